"""
FastAPI dependencies.
"""
from functools import lru_cache

from fastapi import Depends

from app.services.dashboard_service import DashboardService
from app.services.pokedex_store import PokedexStore
from app.services.prediction_service import PredictionService


@lru_cache()
def get_pokedex_store() -> PokedexStore:
    return PokedexStore()


def get_dashboard_service(store: PokedexStore = Depends(get_pokedex_store)) -> DashboardService:
    return DashboardService(store)


def get_prediction_service(store: PokedexStore = Depends(get_pokedex_store)) -> PredictionService:
    return PredictionService(store)
