"""
对战预测 API 路由
"""
from fastapi import APIRouter, Depends

from app.dependencies import get_prediction_service
from app.models import PredictionRequest, PredictionResponse
from app.routers.errors import map_exception_to_http
from app.services.prediction_service import PredictionService

router = APIRouter(prefix="/predictor", tags=["Combat Predictor"])


@router.post("/predict")
async def predict(
    payload: PredictionRequest,
    service: PredictionService = Depends(get_prediction_service),
) -> PredictionResponse:
    """预测两只宝可梦的对战胜者"""
    try:
        return await service.predict(payload.first_pokemon, payload.second_pokemon)
    except Exception as exc:
        raise map_exception_to_http(exc) from exc
