"""Report analysis package.

Design principle:
  - Ingest produces immutable :class:`~report_safety_analyzer.models.report.Report` objects.
  - Analysis consumes Reports and produces verdicts; it never reads files or prints.

Validators are pure functions of the report contents and the
:class:`~report_safety_analyzer.models.profile.ValidationProfile`.
"""

from .levels import check_strict, is_safe_strict, level_differences, pair_is_valid
from .dampener import check_with_dampener, is_safe_with_one_removal
from .pipeline import evaluate_reports, export_results_csv, summary_lines

__all__ = [
    "check_strict",
    "is_safe_strict",
    "level_differences",
    "pair_is_valid",
    "check_with_dampener",
    "is_safe_with_one_removal",
    "evaluate_reports",
    "export_results_csv",
    "summary_lines",
]
