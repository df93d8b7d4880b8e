"""
业务逻辑服务包
"""
from .pokedex_store import PokedexStore, PokemonNotFoundError, DataStoreUnavailableError
from .dashboard_service import DashboardService
from .prediction_service import PredictionService

__all__ = [
    "PokedexStore",
    "PokemonNotFoundError",
    "DataStoreUnavailableError",
    "DashboardService",
    "PredictionService",
]
