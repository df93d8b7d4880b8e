"""
数据模型包
"""
from .pokemon import Pokemon, CombatRecord, ModelResult, ModelType
from .dashboard import (
    StatAverage,
    TypeWinRate,
    DatasetSummary,
    DataOverviewResponse,
    ModelEvaluationResponse,
    PredictionRequest,
    PredictionResponse,
    ScoreBreakdownView,
)

__all__ = [
    "Pokemon",
    "CombatRecord",
    "ModelResult",
    "ModelType",
    "StatAverage",
    "TypeWinRate",
    "DatasetSummary",
    "DataOverviewResponse",
    "ModelEvaluationResponse",
    "PredictionRequest",
    "PredictionResponse",
    "ScoreBreakdownView",
]
