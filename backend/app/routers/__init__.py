"""
API 路由包
"""
from .pokedex import router as pokedex_router
from .models import router as models_router
from .predictor import router as predictor_router

__all__ = [
    "pokedex_router",
    "models_router",
    "predictor_router",
]
