"""
Dashboard response models (overview, model evaluation, predictor).
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from .pokemon import CombatRecord, ModelResult, Pokemon


class StatAverage(BaseModel):
    """平均能力值（柱状图一行）"""
    name: str
    value: float
    relative: float = 0.0  # 相对最大值的百分比


class TypeWinRate(BaseModel):
    """按主属性统计的胜率"""
    type: str
    label: str
    win_rate: float
    wins: int
    total: int


class DatasetSummary(BaseModel):
    """数据集概况"""
    pokemon_count: int
    legendary_count: int
    legendary_ratio: float
    combat_count: int


class DataOverviewResponse(BaseModel):
    """数据总览"""
    summary: DatasetSummary
    pokemon_sample: List[Pokemon] = Field(default_factory=list)
    combat_sample: List[CombatRecord] = Field(default_factory=list)
    average_stats: List[StatAverage] = Field(default_factory=list)
    type_win_rates: List[TypeWinRate] = Field(default_factory=list)


class ModelEvaluationResponse(BaseModel):
    """模型评估对比"""
    regression_models: List[ModelResult] = Field(default_factory=list)
    classification_models: List[ModelResult] = Field(default_factory=list)
    best_regression: Optional[ModelResult] = None
    best_classification: Optional[ModelResult] = None


class PredictionRequest(BaseModel):
    """对战预测请求（两只宝可梦的图鉴编号）"""
    first_pokemon: int
    second_pokemon: int


class ScoreBreakdownView(BaseModel):
    total_stats: float
    battle_score: float
    type_multiplier: float
    final_score: float


class PredictionResponse(BaseModel):
    """对战预测结果"""
    winner: Pokemon
    loser: Pokemon
    # 能力值不做校验，异常数据可能得到 [0, 100] 以外的胜率
    win_probability: float
    loser_probability: float
    explanation: str
    is_tie: bool = False
    winner_breakdown: ScoreBreakdownView
    loser_breakdown: ScoreBreakdownView
