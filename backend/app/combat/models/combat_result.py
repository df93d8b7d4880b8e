"""
战斗预测结果数据模型
"""
from dataclasses import dataclass
from typing import Any, Dict

from .combatant import Combatant


@dataclass(frozen=True)
class ScoreBreakdown:
    """单方评分明细（预测流水线的四个阶段）"""

    total_stats: float
    battle_score: float
    type_multiplier: float
    final_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_stats": self.total_stats,
            "battle_score": self.battle_score,
            "type_multiplier": self.type_multiplier,
            "final_score": self.final_score,
        }


@dataclass(frozen=True)
class PredictionResult:
    """
    对战预测结果

    不持久化；每次调用独立生成
    """

    winner: Combatant
    loser: Combatant
    win_probability: float  # 0-100
    explanation: str

    winner_breakdown: ScoreBreakdown
    loser_breakdown: ScoreBreakdown

    # 最终得分完全相同时为 True（按先手规则判定胜者）
    is_tie: bool = False

    @property
    def loser_probability(self) -> float:
        return 100.0 - self.win_probability

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "winner": self.winner.to_dict(),
            "loser": self.loser.to_dict(),
            "win_probability": self.win_probability,
            "loser_probability": self.loser_probability,
            "explanation": self.explanation,
            "is_tie": self.is_tie,
            "breakdown": {
                "winner": self.winner_breakdown.to_dict(),
                "loser": self.loser_breakdown.to_dict(),
            },
        }
