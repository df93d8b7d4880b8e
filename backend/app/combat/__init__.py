"""Combat outcome predictor package."""

from .models import Combatant, PredictionResult, ScoreBreakdown
from .predictor import predict_winner

__all__ = ["Combatant", "PredictionResult", "ScoreBreakdown", "predict_winner"]
