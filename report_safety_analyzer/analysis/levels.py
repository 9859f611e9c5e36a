"""Strict report validation.

A report is *strictly safe* when all adjacent differences share one strict sign
and every magnitude lies within ``[profile.min_step, profile.max_step]``. A zero
difference is never accepted and there is no partial credit.

Functions
---------
level_differences
    Adjacent differences ``levels[i+1] - levels[i]``.
pair_is_valid
    Pairwise rule used by the dampener scan.
check_strict
    Full verdict (direction and first offending pair).
is_safe_strict
    Boolean shortcut of :func:`check_strict`.

Notes
-----
A single-level report has no adjacent pairs. It is vacuously safe and has no direction.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from report_safety_analyzer.models.profile import DEFAULT_PROFILE, ValidationProfile
from report_safety_analyzer.models.report import Direction, LevelsLike, as_levels
from report_safety_analyzer.models.results import StrictCheck


def level_differences(report: LevelsLike) -> np.ndarray:
    """Return the int64 array of adjacent differences, of length ``n_levels - 1``."""
    return np.diff(as_levels(report))


def pair_is_valid(
    left: int,
    right: int,
    direction: Direction,
    profile: ValidationProfile = DEFAULT_PROFILE,
) -> bool:
    """True if the step ``left -> right`` moves in ``direction`` by an accepted amount."""
    signed_step = (int(right) - int(left)) * direction.sign
    return signed_step > 0 and profile.step_ok(signed_step)


def _valid_steps(diffs: np.ndarray, direction: Direction, profile: ValidationProfile) -> np.ndarray:
    signed = diffs * direction.sign
    return (signed >= profile.min_step) & (signed <= profile.max_step)


def check_strict(report: LevelsLike, profile: Optional[ValidationProfile] = None) -> StrictCheck:
    """Check a report against the strict monotonic bounded-step rule.

    Parameters
    ----------
    report:
        A :class:`~report_safety_analyzer.models.report.Report` or any non-empty
        integer sequence.
    profile:
        Step bounds. Defaults to steps of 1..3.

    Returns
    -------
    StrictCheck
        ``direction`` is set for safe multi-level reports. ``first_bad_pair`` is the
        index of the first adjacent pair that breaks the rule, judged against the
        direction of the first difference (pair 0 if that difference is zero).
    """
    profile = profile or DEFAULT_PROFILE
    diffs = level_differences(report)
    if diffs.size == 0:
        return StrictCheck(safe=True)

    first = int(diffs[0])
    if first == 0:
        return StrictCheck(safe=False, first_bad_pair=0)

    direction = Direction.INCREASING if first > 0 else Direction.DECREASING
    ok = _valid_steps(diffs, direction, profile)
    bad = np.flatnonzero(~ok)
    if bad.size:
        return StrictCheck(safe=False, first_bad_pair=int(bad[0]))
    return StrictCheck(safe=True, direction=direction)


def is_safe_strict(report: LevelsLike, profile: Optional[ValidationProfile] = None) -> bool:
    """True if the report is safe without removing any level.

    Examples
    --------
    >>> is_safe_strict([7, 6, 4, 2, 1])
    True
    >>> is_safe_strict([1, 2, 7, 8, 9])
    False
    >>> is_safe_strict([8, 6, 4, 4, 1])
    False
    """
    return check_strict(report, profile).safe
