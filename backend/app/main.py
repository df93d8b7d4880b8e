"""
FastAPI 应用入口
"""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings, validate_config
from app.dependencies import get_pokedex_store
from app.routers import models_router, pokedex_router, predictor_router
from app.services.pokedex_store import PokedexStore

# 创建 FastAPI 应用
app = FastAPI(
    title="Pokémon Combat Analysis API",
    description="基于 Firestore 的宝可梦数据分析与对战预测",
    version="0.1.0",
)

# 配置 CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(pokedex_router, prefix=settings.api_prefix)
app.include_router(models_router, prefix=settings.api_prefix)
app.include_router(predictor_router, prefix=settings.api_prefix)


@app.on_event("startup")
async def startup_event():
    """应用启动时的初始化"""
    print("=" * 60)
    print("Pokémon Combat Analysis 启动中...")
    print("=" * 60)

    if validate_config():
        print("✓ 配置验证通过")
    else:
        print("✗ 配置验证失败，请检查环境变量")

    print(f"✓ API 文档: http://localhost:8000/docs")
    print("=" * 60)


@app.get("/")
async def root():
    """根路径"""
    return {
        "message": "Pokémon Combat Analysis API",
        "version": "0.1.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check(store: PokedexStore = Depends(get_pokedex_store)):
    """健康检查"""
    try:
        pokemon_count = await store.count(store.pokemon_collection)
        return {
            "status": "healthy",
            "firestore_database": settings.firestore_database,
            "pokemon_count": pokemon_count,
        }
    except Exception as exc:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": f"{type(exc).__name__}: {exc}",
            },
        )
