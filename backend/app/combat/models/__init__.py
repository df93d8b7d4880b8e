"""Data models for the combat predictor."""

from .combatant import Combatant
from .combat_result import PredictionResult, ScoreBreakdown

__all__ = [
    "Combatant",
    "PredictionResult",
    "ScoreBreakdown",
]
