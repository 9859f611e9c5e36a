"""Validation profile -- bundles every parameter that affects a safety verdict.

A ValidationProfile groups the step bounds and the dampener strategy into one
frozen dataclass. It can be:

- Constructed with defaults (steps of 1..3, backtracking dampener)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for provenance next to exported results
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


REMOVAL_STRATEGIES: Tuple[str, ...] = ("backtrack", "brute_force")


@dataclass(frozen=True)
class ValidationProfile:
    """Frozen configuration for strict and dampened report validation.

    Fields
    ------
    min_step : int
        Smallest accepted absolute difference between adjacent levels. Must be >= 1,
        so equal adjacent levels are never accepted.
    max_step : int
        Largest accepted absolute difference between adjacent levels.
    removal_strategy : str
        "backtrack" (single scan with a one-skip budget, per direction) or
        "brute_force" (re-run the strict check for every single removal).
    recheck_safe_reports : bool
        If True, the pipeline runs the dampener on strict-safe reports as well.
        Totals are unchanged; the results table gains a dampener verdict for every row.
    """

    min_step: int = 1
    max_step: int = 3
    removal_strategy: str = "backtrack"
    recheck_safe_reports: bool = False

    def __post_init__(self) -> None:
        # Values loaded from JSON or text may arrive as strings; store plain ints.
        object.__setattr__(self, "min_step", int(self.min_step))
        object.__setattr__(self, "max_step", int(self.max_step))
        object.__setattr__(self, "recheck_safe_reports", bool(self.recheck_safe_reports))

        if self.min_step < 1:
            raise ValueError(f"min_step must be >= 1, got {self.min_step}")
        if self.max_step < self.min_step:
            raise ValueError(f"max_step ({self.max_step}) must be >= min_step ({self.min_step})")
        if self.removal_strategy not in REMOVAL_STRATEGIES:
            raise ValueError(
                f"Unknown removal_strategy {self.removal_strategy!r}; expected one of {REMOVAL_STRATEGIES}"
            )

    def step_ok(self, diff: int) -> bool:
        """True if ``|diff|`` lies within [min_step, max_step]."""
        return self.min_step <= abs(diff) <= self.max_step

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> ValidationProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        d = dict(d)  # shallow copy
        return cls(**d)


DEFAULT_PROFILE = ValidationProfile()
