"""
对战预测服务

Loads both Pokémon from the store and runs the heuristic predictor.
"""
import logging

from app.combat import Combatant, predict_winner
from app.models import PredictionResponse, ScoreBreakdownView
from app.services.pokedex_store import PokedexStore

logger = logging.getLogger(__name__)


class PredictionService:
    """Predict the winner between two stored Pokémon."""

    def __init__(self, store: PokedexStore) -> None:
        self.store = store

    async def predict(self, first_numero: int, second_numero: int) -> PredictionResponse:
        # 两只宝可梦都必须存在，否则抛出 PokemonNotFoundError
        first = await self.store.require_pokemon(first_numero)
        second = await self.store.require_pokemon(second_numero)

        first_combatant = Combatant.from_pokemon(first)
        result = predict_winner(first_combatant, Combatant.from_pokemon(second))
        winner, loser = (first, second) if result.winner is first_combatant else (second, first)

        logger.info(
            "[Predictor] %s vs %s -> %s (%.1f%%, tie=%s)",
            first.nom,
            second.nom,
            winner.nom,
            result.win_probability,
            result.is_tie,
        )
        return PredictionResponse(
            winner=winner,
            loser=loser,
            win_probability=result.win_probability,
            loser_probability=result.loser_probability,
            explanation=result.explanation,
            is_tie=result.is_tie,
            winner_breakdown=ScoreBreakdownView(**result.winner_breakdown.to_dict()),
            loser_breakdown=ScoreBreakdownView(**result.loser_breakdown.to_dict()),
        )
