"""Report safety runner - command-line entry point.

Reads one report file, checks every report with the strict validator, re-checks
the failures with the single-removal dampener and prints the totals:

    The number of safe reports is: 2
    The number of reports to check again 4
    The refined number of safe reports is: 2 + 2 = 4

Exit codes
----------
0  success
1  malformed input (a field that is not an integer, a bad option value)
2  input file missing or unreadable
3  results CSV could not be written
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from report_safety_analyzer.analysis.pipeline import evaluate_reports, export_results_csv, summary_lines
from report_safety_analyzer.ingest.readers_reports import ReportFormatError, ReportReader, ReportReaderConfig
from report_safety_analyzer.models.profile import REMOVAL_STRATEGIES, ValidationProfile
from report_safety_analyzer.models.results import SafetyResults


EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_INPUT_ERROR = 2
EXIT_OUTPUT_ERROR = 3


@dataclass(frozen=True)
class SafetyRunConfig:
    """Everything one run needs, built from the command line."""

    input_path: Path
    profile: ValidationProfile = field(default_factory=ValidationProfile)
    reader: ReportReaderConfig = field(default_factory=ReportReaderConfig)
    out_csv: Optional[Path] = None


@dataclass(frozen=True)
class SafetyRunResult:
    results: SafetyResults
    warnings: tuple = ()


def run_safety_check(cfg: SafetyRunConfig) -> SafetyRunResult:
    """Read and evaluate one report file. Exporting is left to the caller."""
    batch = ReportReader(cfg.reader).read(cfg.input_path)
    results = evaluate_reports(batch.reports, cfg.profile)
    return SafetyRunResult(
        results=results,
        warnings=tuple(batch.warnings) + tuple(results.warnings),
    )


def _build_config(argv: Optional[Sequence[str]]) -> SafetyRunConfig:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m report_safety_analyzer.validation.safety_runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Count safe reports in a report file.

            Each line holds one report: whitespace-separated integer levels.
            A report is safe if its levels all increase or all decrease by steps of
            1..3. The dampener also accepts reports that become safe after removing
            exactly one level.
            """
        ),
    )

    p.add_argument("path", help="Report file (one report per line)")
    p.add_argument(
        "--strategy",
        choices=REMOVAL_STRATEGIES,
        default="backtrack",
        help="Dampener strategy: single backtracking scan (default) or brute-force removal",
    )
    p.add_argument("--min-step", type=int, default=1, help="Smallest accepted step between levels (default: 1)")
    p.add_argument("--max-step", type=int, default=3, help="Largest accepted step between levels (default: 3)")
    p.add_argument(
        "--recheck-all",
        action="store_true",
        help="Also run the dampener on strictly safe reports (fills the CSV column for every row)",
    )
    p.add_argument("--out-csv", default=None, help="Optional path for the per-report results table")

    ns = p.parse_args(list(argv) if argv is not None else None)

    profile = ValidationProfile(
        min_step=int(ns.min_step),
        max_step=int(ns.max_step),
        removal_strategy=str(ns.strategy),
        recheck_safe_reports=bool(ns.recheck_all),
    )

    return SafetyRunConfig(
        input_path=Path(ns.path),
        profile=profile,
        out_csv=Path(ns.out_csv) if ns.out_csv else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        cfg = _build_config(argv)
        run = run_safety_check(cfg)
    except OSError as e:
        print(f"[error] cannot read input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ReportFormatError as e:
        print(f"[error] malformed report: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR
    except UnicodeDecodeError as e:
        print(f"[error] input is not valid text: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR
    except ValueError as e:
        print(f"[error] invalid configuration: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR

    lines: List[str] = summary_lines(run.results)
    for w in run.warnings:
        print(f"[warn] {w}", file=sys.stderr)
    for line in lines:
        print(line)
    if cfg.out_csv is not None:
        try:
            out_csv = export_results_csv(run.results, cfg.out_csv)
        except OSError as e:
            print(f"[error] cannot write results CSV: {e}", file=sys.stderr)
            return EXIT_OUTPUT_ERROR
        print(f"[info] wrote per-report results: {out_csv}", file=sys.stderr)

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
