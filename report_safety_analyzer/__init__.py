"""Report Safety Analyzer -- Python tooling for validating level reports.

A report is one line of integers ("levels"). A report is *safe* when its levels
are either all increasing or all decreasing and every adjacent step lies in the
configured bounds (1..3 by default). The dampener tolerates a single bad level:
a report that becomes safe after removing exactly one level counts as safe too.

This package provides tools for:
- Reading report files into immutable Report objects
- Checking reports against the strict monotonic bounded-step rule
- Re-checking failed reports with the single-removal dampener
- Building per-report results DataFrames and printing totals

Key principles:
- Reports are never mutated after parsing
- Validators are pure functions of the report and the profile
- Malformed input is fatal; "unsafe" is a normal outcome, not an error

Main subpackages:
- analysis: Strict validator, dampener and aggregation pipeline
- ingest: Report file reader
- models: Data models (Report, Direction, ValidationProfile, results)
- validation: Command-line runner
"""

__all__ = []
