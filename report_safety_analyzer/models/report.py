from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np


LevelsLike = Union["Report", Sequence[int], np.ndarray]


class Direction(enum.Enum):
    """Required sign of every consecutive difference in a report."""

    INCREASING = 1
    DECREASING = -1

    @property
    def sign(self) -> int:
        return int(self.value)


@dataclass(frozen=True, eq=False)
class Report:
    """
    One parsed report: an ordered, read-only sequence of signed integer levels.

    Notes
    - ``levels`` is always a 1D int64 array with the writeable flag cleared.
    - A report holds at least one level. Reports of length 1 have no adjacent
      pairs and are vacuously safe.
    - ``line_no`` is the 1-based line in ``source_path`` (None for in-memory reports).
    """
    levels: np.ndarray
    line_no: Optional[int] = None
    source_path: Optional[Path] = None

    def __post_init__(self) -> None:
        arr = np.array(self.levels, dtype=np.int64, copy=True)
        if arr.ndim != 1:
            raise ValueError(f"Report levels must be 1D, got shape {arr.shape}")
        if arr.size == 0:
            raise ValueError("Report must contain at least one level")
        arr.setflags(write=False)
        object.__setattr__(self, "levels", arr)

    @property
    def n_levels(self) -> int:
        return int(self.levels.size)

    def without(self, index: int) -> "Report":
        """Return a copy of this report with the level at ``index`` removed."""
        n = self.n_levels
        if not (0 <= index < n):
            raise IndexError(f"index {index} out of range for report of {n} levels")
        if n == 1:
            raise ValueError("Cannot remove the only level of a report")
        return Report(
            levels=np.delete(self.levels, index),
            line_no=self.line_no,
            source_path=self.source_path,
        )

    def __len__(self) -> int:
        return self.n_levels

    def __repr__(self) -> str:
        where = f", line_no={self.line_no}" if self.line_no is not None else ""
        return f"Report(levels={self.levels.tolist()}{where})"


def as_levels(report: LevelsLike) -> np.ndarray:
    """Return the int64 level array of a Report or of any integer sequence."""
    if isinstance(report, Report):
        return report.levels
    arr = np.asarray(report, dtype=np.int64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1D sequence of levels, got shape {arr.shape}")
    if arr.size == 0:
        raise ValueError("A report must contain at least one level")
    return arr
