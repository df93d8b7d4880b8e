"""
模型评估 API 路由
"""
from fastapi import APIRouter, Depends

from app.dependencies import get_dashboard_service
from app.models import ModelEvaluationResponse
from app.routers.errors import map_exception_to_http
from app.services.dashboard_service import DashboardService

router = APIRouter(prefix="/models", tags=["Model Evaluation"])


@router.get("/evaluation")
async def get_model_evaluation(
    service: DashboardService = Depends(get_dashboard_service),
) -> ModelEvaluationResponse:
    """回归 / 分类模型指标对比"""
    try:
        return await service.get_model_evaluation()
    except Exception as exc:
        raise map_exception_to_http(exc) from exc
