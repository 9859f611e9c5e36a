from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from report_safety_analyzer.models.profile import ValidationProfile
from report_safety_analyzer.models.report import Direction


@dataclass(frozen=True)
class StrictCheck:
    """Verdict of the strict validator for one report.

    Attributes
    ----------
    safe:
        True if every adjacent difference has the same strict sign and a bounded magnitude.
    direction:
        Direction of a safe report. None for unsafe reports and for single-level
        reports, which have no direction.
    first_bad_pair:
        Index ``i`` of the first offending pair ``(levels[i], levels[i+1])``, or None when safe.
    """

    safe: bool
    direction: Optional[Direction] = None
    first_bad_pair: Optional[int] = None


@dataclass(frozen=True)
class DampenerOutcome:
    """Verdict of the single-removal dampener for one report.

    Attributes
    ----------
    safe:
        True if the report is safe as-is or after removing exactly one level.
    removed_index:
        Index of the level whose removal makes the report safe. None when the
        report was already safe without a removal, or when no removal helps.
    direction:
        Direction under which the (possibly shortened) report is safe.
    """

    safe: bool
    removed_index: Optional[int] = None
    direction: Optional[Direction] = None


@dataclass(frozen=True)
class SafetyResults:
    """Per-report verdicts and totals for one batch of reports.

    ``table`` has one row per report, in input order. Columns:
    ``line_no, n_levels, levels, strict_safe, direction, first_bad_pair,
    rechecked, dampened_safe, removed_index, safe``.
    """

    table: pd.DataFrame
    n_reports: int
    n_strict_safe: int
    n_rechecked: int
    n_dampened: int
    profile: ValidationProfile
    warnings: Tuple[str, ...] = ()

    @property
    def n_total_safe(self) -> int:
        return int(self.n_strict_safe + self.n_dampened)
