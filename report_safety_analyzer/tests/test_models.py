"""Tests for Report, Direction and ValidationProfile."""

from __future__ import annotations

import dataclasses
import json

import numpy as np
import pytest

from report_safety_analyzer.analysis.levels import is_safe_strict
from report_safety_analyzer.models.profile import ValidationProfile
from report_safety_analyzer.models.report import Direction, Report


# -----------------------------------------------------------------------
# Report
# -----------------------------------------------------------------------


def test_report_is_immutable_copy() -> None:
    src = np.array([1, 2, 3])
    r = Report(src, line_no=4)
    src[0] = 100
    assert r.levels.tolist() == [1, 2, 3]
    assert r.levels.dtype == np.int64
    assert not r.levels.flags.writeable
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.line_no = 5  # type: ignore[misc]


def test_report_requires_levels() -> None:
    with pytest.raises(ValueError):
        Report([])
    with pytest.raises(ValueError):
        Report([[1, 2], [3, 4]])


def test_report_without() -> None:
    r = Report([1, 3, 2, 4, 5], line_no=2)
    shorter = r.without(1)
    assert shorter.levels.tolist() == [1, 2, 4, 5]
    assert shorter.line_no == 2
    assert r.n_levels == 5
    assert len(shorter) == 4
    with pytest.raises(IndexError):
        r.without(5)
    with pytest.raises(ValueError):
        Report([1]).without(0)


def test_direction_sign() -> None:
    assert Direction.INCREASING.sign == 1
    assert Direction.DECREASING.sign == -1


# -----------------------------------------------------------------------
# ValidationProfile
# -----------------------------------------------------------------------


def test_profile_defaults() -> None:
    p = ValidationProfile()
    assert p.min_step == 1
    assert p.max_step == 3
    assert p.removal_strategy == "backtrack"
    assert p.recheck_safe_reports is False


def test_profile_frozen() -> None:
    p = ValidationProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.max_step = 4  # type: ignore[misc]


def test_profile_replace() -> None:
    p = ValidationProfile()
    p2 = dataclasses.replace(p, max_step=5)
    assert p2.max_step == 5
    assert p2.min_step == 1  # unchanged


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(min_step=0),
        dict(min_step=4, max_step=3),
        dict(removal_strategy="greedy"),
    ],
)
def test_profile_rejects_invalid(kwargs) -> None:
    with pytest.raises(ValueError):
        ValidationProfile(**kwargs)


def test_profile_step_ok() -> None:
    p = ValidationProfile()
    assert p.step_ok(1) and p.step_ok(-3)
    assert not p.step_ok(0)
    assert not p.step_ok(4)


def test_profile_dict_roundtrip_through_json() -> None:
    p = ValidationProfile(min_step=2, max_step=4, removal_strategy="brute_force")
    d = json.loads(json.dumps(p.to_dict()))
    assert ValidationProfile.from_dict(d) == p


def test_profile_from_dict_coerces_text_values() -> None:
    p = ValidationProfile.from_dict({"min_step": "2", "max_step": "4"})
    assert p.min_step == 2 and isinstance(p.min_step, int)
    assert p.max_step == 4 and isinstance(p.max_step, int)
    assert is_safe_strict([1, 3, 7], p)
    assert not is_safe_strict([1, 2, 4], p)
    with pytest.raises(ValueError):
        ValidationProfile.from_dict({"min_step": "two"})
