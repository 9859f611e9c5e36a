"""Batch evaluation of reports.

Design:
  - Every report is checked by the strict validator.
  - Reports that fail the strict check are re-examined by the dampener.
  - Results are returned as a per-report DataFrame plus totals, in input order.

Reports are independent and immutable, so nothing here depends on evaluation order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from report_safety_analyzer.analysis.dampener import check_with_dampener
from report_safety_analyzer.analysis.levels import check_strict
from report_safety_analyzer.models.profile import DEFAULT_PROFILE, ValidationProfile
from report_safety_analyzer.models.report import Report
from report_safety_analyzer.models.results import SafetyResults


RESULT_COLUMNS = [
    "line_no",
    "n_levels",
    "levels",
    "strict_safe",
    "direction",
    "first_bad_pair",
    "rechecked",
    "dampened_safe",
    "removed_index",
    "safe",
]


def _direction_name(direction) -> Optional[str]:
    return None if direction is None else direction.name.lower()


def evaluate_reports(
    reports: Iterable[Report],
    profile: Optional[ValidationProfile] = None,
) -> SafetyResults:
    """Run the strict check and the dampener over a batch of reports.

    Parameters
    ----------
    reports:
        Parsed reports, typically ``ReportBatch.reports``.
    profile:
        Validation configuration. With ``recheck_safe_reports`` the dampener also
        runs on strict-safe reports; ``dampened_safe`` is then filled for every row,
        but only strict failures count towards ``n_dampened``.

    Returns
    -------
    SafetyResults
        Table columns are listed in :data:`RESULT_COLUMNS`. ``removed_index`` is
        the 0-based position of the dropped level within the report.
    """
    profile = profile or DEFAULT_PROFILE

    rows: List[Dict[str, Any]] = []
    warnings: List[str] = []
    n_strict = 0
    n_rechecked = 0
    n_dampened = 0

    for report in reports:
        strict = check_strict(report, profile)
        if report.n_levels == 1:
            where = f"line {report.line_no}" if report.line_no is not None else "report"
            warnings.append(f"{where} has a single level; counted as safe (no adjacent pairs)")

        row: Dict[str, Any] = {
            "line_no": report.line_no,
            "n_levels": report.n_levels,
            "levels": " ".join(str(v) for v in report.levels.tolist()),
            "strict_safe": strict.safe,
            "direction": _direction_name(strict.direction),
            "first_bad_pair": strict.first_bad_pair,
            "rechecked": False,
            "dampened_safe": None,
            "removed_index": None,
            "safe": strict.safe,
        }

        if strict.safe:
            n_strict += 1

        if not strict.safe or profile.recheck_safe_reports:
            outcome = check_with_dampener(report, profile)
            row["rechecked"] = True
            row["dampened_safe"] = outcome.safe
            row["removed_index"] = outcome.removed_index
            if not strict.safe:
                n_rechecked += 1
                if outcome.safe:
                    n_dampened += 1
                    row["safe"] = True
                    row["direction"] = _direction_name(outcome.direction)

        rows.append(row)

    table = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    # Nullable integer columns keep missing indices as <NA> rather than float NaN.
    for col in ("line_no", "first_bad_pair", "removed_index"):
        table[col] = table[col].astype("Int64")
    table["dampened_safe"] = table["dampened_safe"].astype("boolean")

    return SafetyResults(
        table=table,
        n_reports=len(rows),
        n_strict_safe=n_strict,
        n_rechecked=n_rechecked,
        n_dampened=n_dampened,
        profile=profile,
        warnings=tuple(warnings),
    )


def summary_lines(results: SafetyResults) -> List[str]:
    """Plain-text totals as printed by the command-line runner."""
    strict = results.n_strict_safe
    dampened = results.n_dampened
    return [
        f"The number of safe reports is: {strict}",
        f"The number of reports to check again {results.n_rechecked}",
        f"The refined number of safe reports is: {strict} + {dampened} = {results.n_total_safe}",
    ]


def export_results_csv(results: SafetyResults, path: str | Path) -> Path:
    """Write the per-report table to CSV and return the resolved output path."""
    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    results.table.to_csv(out_path, index=False)
    return out_path
