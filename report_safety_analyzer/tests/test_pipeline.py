"""Tests for batch evaluation and the results table."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pandas as pd
import pytest

from report_safety_analyzer.analysis.pipeline import (
    RESULT_COLUMNS,
    evaluate_reports,
    export_results_csv,
    summary_lines,
)
from report_safety_analyzer.ingest.readers_reports import ReportReader
from report_safety_analyzer.models.profile import ValidationProfile
from report_safety_analyzer.models.report import Report


CANONICAL = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9\n"


@pytest.fixture
def canonical_reports():
    return ReportReader().parse_text(CANONICAL).reports


def test_aggregate_counts(canonical_reports) -> None:
    res = evaluate_reports(canonical_reports)
    assert res.n_reports == 6
    assert res.n_strict_safe == 2
    assert res.n_rechecked == 4
    assert res.n_dampened == 2
    assert res.n_total_safe == 4
    assert res.warnings == ()


@pytest.mark.parametrize("strategy", ["backtrack", "brute_force"])
def test_aggregate_counts_per_strategy(canonical_reports, strategy) -> None:
    res = evaluate_reports(canonical_reports, ValidationProfile(removal_strategy=strategy))
    assert (res.n_strict_safe, res.n_dampened, res.n_total_safe) == (2, 2, 4)


def test_results_table(canonical_reports) -> None:
    t = evaluate_reports(canonical_reports).table
    assert list(t.columns) == RESULT_COLUMNS
    assert len(t) == 6
    assert t["line_no"].tolist() == [1, 2, 3, 4, 5, 6]
    assert t["strict_safe"].tolist() == [True, False, False, False, False, True]
    assert t["safe"].tolist() == [True, False, False, True, True, True]
    assert t["rechecked"].tolist() == [False, True, True, True, True, False]
    assert t.loc[3, "removed_index"] == 1
    assert t.loc[3, "direction"] == "increasing"
    assert t.loc[0, "direction"] == "decreasing"
    assert pd.isna(t.loc[0, "removed_index"])
    assert pd.isna(t.loc[0, "dampened_safe"])
    assert t.loc[1, "first_bad_pair"] == 1
    assert t.loc[0, "levels"] == "7 6 4 2 1"


def test_recheck_safe_reports_keeps_totals(canonical_reports) -> None:
    profile = dataclasses.replace(ValidationProfile(), recheck_safe_reports=True)
    res = evaluate_reports(canonical_reports, profile)
    assert res.n_total_safe == 4
    assert res.n_rechecked == 4
    assert res.table["rechecked"].all()
    assert res.table.loc[0, "dampened_safe"]


def test_single_level_report_warns() -> None:
    res = evaluate_reports([Report([3], line_no=7), Report([1, 2])])
    assert res.n_strict_safe == 2
    assert len(res.warnings) == 1
    assert "line 7" in res.warnings[0]


def test_empty_batch() -> None:
    res = evaluate_reports([])
    assert res.n_reports == 0
    assert res.n_total_safe == 0
    assert list(res.table.columns) == RESULT_COLUMNS


def test_summary_lines(canonical_reports) -> None:
    lines = summary_lines(evaluate_reports(canonical_reports))
    assert lines == [
        "The number of safe reports is: 2",
        "The number of reports to check again 4",
        "The refined number of safe reports is: 2 + 2 = 4",
    ]


def test_export_results_csv(tmp_path: Path, canonical_reports) -> None:
    res = evaluate_reports(canonical_reports)
    out = export_results_csv(res, tmp_path / "out" / "results.csv")
    assert out.exists()
    back = pd.read_csv(out)
    assert list(back.columns) == RESULT_COLUMNS
    assert back["safe"].sum() == 4
