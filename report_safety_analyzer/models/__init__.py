from .report import Direction, Report
from .profile import ValidationProfile
from .results import DampenerOutcome, SafetyResults, StrictCheck

__all__ = [
    "Direction",
    "Report",
    "ValidationProfile",
    "DampenerOutcome",
    "SafetyResults",
    "StrictCheck",
]
