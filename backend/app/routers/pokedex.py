"""
宝可梦图鉴 / 数据总览 API 路由
"""
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_dashboard_service, get_pokedex_store
from app.models import DataOverviewResponse, Pokemon
from app.routers.errors import map_exception_to_http
from app.services.dashboard_service import DashboardService
from app.services.pokedex_store import PokedexStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pokedex", tags=["Pokedex"])


@router.get("/pokemon")
async def list_pokemon(
    order_by: Literal["numero", "nom"] = Query("nom"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    store: PokedexStore = Depends(get_pokedex_store),
) -> List[Pokemon]:
    """宝可梦列表（预测器选择框使用，默认按名称排序）"""
    try:
        return await store.list_pokemon(order_by=order_by, limit=limit)
    except Exception as exc:
        raise map_exception_to_http(exc) from exc


@router.get("/pokemon/{numero}")
async def get_pokemon(
    numero: int,
    store: PokedexStore = Depends(get_pokedex_store),
) -> Pokemon:
    """获取单只宝可梦"""
    try:
        pokemon = await store.get_pokemon(numero)
    except Exception as exc:
        raise map_exception_to_http(exc) from exc
    if pokemon is None:
        raise HTTPException(status_code=404, detail=f"pokemon #{numero} not found")
    return pokemon


@router.get("/overview")
async def get_overview(
    sample_size: Optional[int] = Query(None, ge=1, le=100),
    service: DashboardService = Depends(get_dashboard_service),
) -> DataOverviewResponse:
    """数据总览"""
    try:
        return await service.get_overview(sample_size=sample_size)
    except Exception as exc:
        logger.exception("overview failed")
        raise map_exception_to_http(exc) from exc
