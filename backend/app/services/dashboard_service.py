"""
Dashboard 数据组装服务
"""
import logging
from typing import Optional

from app.config import settings
from app.models import DataOverviewResponse, ModelEvaluationResponse
from app.services.dataset_stats import (
    average_stats,
    best_model,
    split_models,
    summarize_dataset,
    type_win_rates,
)
from app.services.pokedex_store import PokedexStore

logger = logging.getLogger(__name__)


class DashboardService:
    """Builds the overview and model evaluation pages from stored rows."""

    def __init__(self, store: PokedexStore) -> None:
        self.store = store

    async def get_overview(self, sample_size: Optional[int] = None) -> DataOverviewResponse:
        """数据总览：数据集概况 + 样本 + 图表数据"""
        limit = sample_size or settings.overview_sample_size
        # store 底层是同步 Firestore 客户端，逐个 await
        pokemon = await self.store.list_pokemon(order_by="numero", limit=limit)
        combats = await self.store.list_combats(limit=limit)
        pokemon_count = await self.store.count(self.store.pokemon_collection)
        legendary_count = await self.store.count_legendary()
        combat_count = await self.store.count(self.store.combats_collection)
        logger.info(
            "[Dashboard] overview: %d pokemon, %d combats (sample=%d)",
            pokemon_count,
            combat_count,
            limit,
        )
        return DataOverviewResponse(
            summary=summarize_dataset(pokemon_count, legendary_count, combat_count),
            pokemon_sample=pokemon,
            combat_sample=combats,
            average_stats=average_stats(pokemon),
            type_win_rates=type_win_rates(pokemon),
        )

    async def get_model_evaluation(self) -> ModelEvaluationResponse:
        """模型评估：回归按 R² 选最佳，分类按准确率选最佳"""
        results = await self.store.list_model_results()
        regression, classification = split_models(results)
        return ModelEvaluationResponse(
            regression_models=regression,
            classification_models=classification,
            best_regression=best_model(regression, "r2_score"),
            best_classification=best_model(classification, "accuracy"),
        )
