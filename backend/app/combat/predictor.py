"""
对战胜负预测

Deterministic heuristic: weighted base stats times a type-advantage
multiplier. Pure functions only; safe to call from any context.
"""
from typing import Callable, List, Optional, Tuple

from .models.combatant import Combatant
from .models.combat_result import PredictionResult, ScoreBreakdown
from .type_chart import TYPE_ADVANTAGE_MULTIPLIER, strong_against


# ============================================
# 权重配置
# ============================================

# 速度决定出手顺序，权重最高；HP 权重最低
STAT_WEIGHTS = {
    "hp": 0.7,
    "attack": 0.9,
    "defense": 0.8,
    "sp_attack": 0.9,
    "sp_defense": 0.8,
    "speed": 1.2,
}

# 平局规则：最终得分完全相同时，先传入的一方获胜
FIRST_COMBATANT_WINS_TIES = True

# 双方得分均为 0 时的胜率
ZERO_SCORE_PROBABILITY = 50.0


# ============================================
# 评分计算
# ============================================

def total_stats(combatant: Combatant) -> float:
    """六项能力值之和（仅用于说明文字）"""
    return sum(combatant.stats)


def battle_score(combatant: Combatant) -> float:
    """加权战斗评分"""
    return sum(
        getattr(combatant, stat) * weight for stat, weight in STAT_WEIGHTS.items()
    )


def type_advantage(attacker: Combatant, defender: Combatant) -> float:
    """
    属性克制倍率（攻击方 -> 防御方）

    Every attacker type x defender type pair found in the table multiplies
    by 1.5, so a dual type matchup tops out at 1.5 ** 4.
    """
    multiplier = 1.0
    for attacking_type in attacker.types:
        beats = strong_against(attacking_type)
        for defending_type in defender.types:
            if defending_type in beats:
                multiplier *= TYPE_ADVANTAGE_MULTIPLIER
    return multiplier


def score_breakdown(attacker: Combatant, defender: Combatant) -> ScoreBreakdown:
    score = battle_score(attacker)
    multiplier = type_advantage(attacker, defender)
    return ScoreBreakdown(
        total_stats=total_stats(attacker),
        battle_score=score,
        type_multiplier=multiplier,
        final_score=score * multiplier,
    )


def final_score(attacker: Combatant, defender: Combatant) -> float:
    return score_breakdown(attacker, defender).final_score


def win_probability(winner_score: float, loser_score: float) -> float:
    total = winner_score + loser_score
    if total == 0:
        return ZERO_SCORE_PROBABILITY
    return winner_score / total * 100


# ============================================
# 说明文字
# ============================================

ExplanationRule = Callable[[Combatant, Combatant, ScoreBreakdown, ScoreBreakdown], Optional[str]]


def _format_total(value: float) -> str:
    # 整数不带 ".0"，其余原样输出
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _stats_sentence(winner, loser, winner_info, loser_info):
    if winner_info.total_stats > loser_info.total_stats:
        return (
            f"{winner.name} has stronger overall stats "
            f"({_format_total(winner_info.total_stats)} vs {_format_total(loser_info.total_stats)})."
        )
    # 胜负由属性克制决定时，总能力值可能更低
    return f"{winner.name} has stronger overall stats with better stat distribution."


def _type_sentence(winner, loser, winner_info, loser_info):
    if winner_info.type_multiplier > 1.0:
        return f"Type advantage gives {winner.name} a significant edge."
    return None


def _speed_sentence(winner, loser, winner_info, loser_info):
    if winner.speed > loser.speed:
        return f"{winner.name}'s higher speed allows it to attack first."
    if winner.speed < loser.speed:
        return (
            f"Despite being slower, {winner.name}'s other advantages "
            "outweigh the speed difference."
        )
    return None


# 顺序固定
EXPLANATION_RULES: Tuple[ExplanationRule, ...] = (
    _stats_sentence,
    _type_sentence,
    _speed_sentence,
)


def build_explanation(
    winner: Combatant,
    loser: Combatant,
    winner_info: ScoreBreakdown,
    loser_info: ScoreBreakdown,
) -> str:
    sentences: List[str] = []
    for rule in EXPLANATION_RULES:
        sentence = rule(winner, loser, winner_info, loser_info)
        if sentence:
            sentences.append(sentence)
    return " ".join(sentences)


# ============================================
# 入口
# ============================================

def predict_winner(first: Combatant, second: Combatant) -> PredictionResult:
    """
    预测对战胜者

    Args:
        first: 挑战者 1
        second: 挑战者 2

    Returns:
        PredictionResult: 胜者、胜率(0-100)与说明
    """
    first_info = score_breakdown(first, second)
    second_info = score_breakdown(second, first)

    is_tie = first_info.final_score == second_info.final_score
    if first_info.final_score > second_info.final_score or (is_tie and FIRST_COMBATANT_WINS_TIES):
        winner, loser, winner_info, loser_info = first, second, first_info, second_info
    else:
        winner, loser, winner_info, loser_info = second, first, second_info, first_info

    return PredictionResult(
        winner=winner,
        loser=loser,
        win_probability=win_probability(winner_info.final_score, loser_info.final_score),
        explanation=build_explanation(winner, loser, winner_info, loser_info),
        winner_breakdown=winner_info,
        loser_breakdown=loser_info,
        is_tie=is_tie,
    )
