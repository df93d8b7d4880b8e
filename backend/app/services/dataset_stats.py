"""Display aggregations for the dashboard (averages, win rates, model leaderboard)."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from app.combat.type_chart import type_label
from app.models import (
    DatasetSummary,
    ModelResult,
    ModelType,
    Pokemon,
    StatAverage,
    TypeWinRate,
)

# (label, Pokemon field) for the average stats chart
AVERAGE_STAT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("HP", "points_de_vie"),
    ("Attack", "points_attaque"),
    ("Defense", "points_deffence"),
    ("Speed", "points_vitesse"),
)


def average_stats(pokemon: Sequence[Pokemon]) -> List[StatAverage]:
    """Mean of each charted stat, plus its share of the largest mean."""
    count = len(pokemon)
    values = []
    for label, field_name in AVERAGE_STAT_FIELDS:
        total = sum(getattr(p, field_name) for p in pokemon)
        values.append((label, total / count if count else 0.0))

    max_value = max((value for _, value in values), default=0.0)
    return [
        StatAverage(
            name=label,
            value=value,
            relative=(value / max_value * 100) if max_value else 0.0,
        )
        for label, value in values
    ]


def type_win_rates(pokemon: Sequence[Pokemon]) -> List[TypeWinRate]:
    """Aggregate wins / fights per primary type, best win rate first."""
    buckets: Dict[str, List[int]] = {}
    for p in pokemon:
        bucket = buckets.setdefault(p.type_1, [0, 0])
        bucket[0] += p.victoires
        bucket[1] += p.combats

    rows = [
        TypeWinRate(
            type=type_code,
            label=type_label(type_code),
            win_rate=(wins / total * 100) if total > 0 else 0.0,
            wins=wins,
            total=total,
        )
        for type_code, (wins, total) in buckets.items()
    ]
    # sorted() is stable: equal rates keep first-seen order
    return sorted(rows, key=lambda row: row.win_rate, reverse=True)


def summarize_dataset(pokemon_count: int, legendary_count: int, combat_count: int) -> DatasetSummary:
    ratio = (legendary_count / pokemon_count * 100) if pokemon_count else 0.0
    return DatasetSummary(
        pokemon_count=pokemon_count,
        legendary_count=legendary_count,
        legendary_ratio=ratio,
        combat_count=combat_count,
    )


# ---------------------------------------------------------------------------
# Model evaluation
# ---------------------------------------------------------------------------

def split_models(results: Sequence[ModelResult]) -> Tuple[List[ModelResult], List[ModelResult]]:
    """Return (regression, classification) preserving input order."""
    regression = [m for m in results if m.model_type == ModelType.REGRESSION.value]
    classification = [m for m in results if m.model_type == ModelType.CLASSIFICATION.value]
    return regression, classification


def best_model(results: Sequence[ModelResult], metric: str) -> Optional[ModelResult]:
    """Highest ``metric`` wins; a missing metric counts as 0, earliest wins ties."""
    best: Optional[ModelResult] = None
    for model in results:
        if best is None or (getattr(model, metric) or 0) > (getattr(best, metric) or 0):
            best = model
    return best
