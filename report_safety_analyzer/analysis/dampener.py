"""Single-removal dampener.

A report that fails the strict rule still counts as safe if removing exactly one
level makes it strictly safe. Two strategies are provided:

``backtrack`` (default)
    One left-to-right scan per direction carrying a one-skip budget. At the first
    offending pair ``(left, right)`` the scan branches into "drop ``left``" and
    "drop ``right``", both with the budget spent. With a fixed direction, every
    pair before the first offending one is valid, so any single removal that fixes
    the report must remove one of the two levels of that pair. Each direction
    therefore explores at most three scan states.

``brute_force``
    Re-run the strict check for every single removal. O(n) strict checks of O(n)
    each; kept as the reference the backtracking scan is tested against.

The scan is driven by an explicit work-list rather than recursion so long reports
do not hit the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from report_safety_analyzer.analysis.levels import check_strict, pair_is_valid
from report_safety_analyzer.models.profile import DEFAULT_PROFILE, ValidationProfile
from report_safety_analyzer.models.report import Direction, LevelsLike, Report, as_levels
from report_safety_analyzer.models.results import DampenerOutcome


# Directions are tried in this order; the first accepting one is reported.
SCAN_DIRECTIONS = (Direction.INCREASING, Direction.DECREASING)


@dataclass(frozen=True)
class _ScanState:
    left: int
    right: int
    can_skip: bool
    removed: Optional[int] = None


def _scan_direction(
    levels: Sequence[int],
    direction: Direction,
    profile: ValidationProfile,
) -> Optional[DampenerOutcome]:
    """Backtracking scan for one assumed direction. Returns None if no path accepts."""
    n = len(levels)
    work: List[_ScanState] = [_ScanState(left=0, right=1, can_skip=True)]

    while work:
        state = work.pop()
        left, right = state.left, state.right

        while right < n and pair_is_valid(levels[left], levels[right], direction, profile):
            left, right = right, right + 1

        if right >= n:
            n_kept = n - (0 if state.removed is None else 1)
            return DampenerOutcome(
                safe=True,
                removed_index=state.removed,
                direction=direction if n_kept >= 2 else None,
            )

        if not state.can_skip:
            continue

        # LIFO: "drop left" is pushed last so it is explored first.
        work.append(_ScanState(left=left, right=right + 1, can_skip=False, removed=right))
        if left == 0:
            work.append(_ScanState(left=right, right=right + 1, can_skip=False, removed=left))
        else:
            work.append(_ScanState(left=left - 1, right=right, can_skip=False, removed=left))

    return None


def _backtrack(levels: np.ndarray, profile: ValidationProfile) -> DampenerOutcome:
    values = levels.tolist()
    for direction in SCAN_DIRECTIONS:
        outcome = _scan_direction(values, direction, profile)
        if outcome is not None:
            return outcome
    return DampenerOutcome(safe=False)


def _brute_force(report: Report, profile: ValidationProfile) -> DampenerOutcome:
    for i in range(report.n_levels):
        check = check_strict(report.without(i), profile)
        if check.safe:
            return DampenerOutcome(safe=True, removed_index=i, direction=check.direction)
    return DampenerOutcome(safe=False)


def check_with_dampener(report: LevelsLike, profile: Optional[ValidationProfile] = None) -> DampenerOutcome:
    """Decide whether a report is safe after removing at most one level.

    Parameters
    ----------
    report:
        A :class:`~report_safety_analyzer.models.report.Report` or any non-empty
        integer sequence. Callers normally pass only reports that failed the strict
        check, but the verdict is correct for any report.
    profile:
        Step bounds and ``removal_strategy``. Defaults to steps of 1..3, backtracking.

    Returns
    -------
    DampenerOutcome
        ``removed_index`` is None if the report is already strictly safe.
    """
    profile = profile or DEFAULT_PROFILE
    levels = as_levels(report)

    strict = check_strict(levels, profile)
    if strict.safe:
        return DampenerOutcome(safe=True, direction=strict.direction)

    if profile.removal_strategy == "brute_force":
        return _brute_force(report if isinstance(report, Report) else Report(levels), profile)
    return _backtrack(levels, profile)


def is_safe_with_one_removal(report: LevelsLike, profile: Optional[ValidationProfile] = None) -> bool:
    """True if the report is safe as-is or after removing exactly one level.

    Examples
    --------
    >>> is_safe_with_one_removal([1, 3, 2, 4, 5])
    True
    >>> is_safe_with_one_removal([9, 7, 6, 2, 1])
    False
    """
    return check_with_dampener(report, profile).safe
