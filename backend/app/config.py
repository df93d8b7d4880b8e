"""
配置管理模块
"""
import os
from pathlib import Path
from pydantic import BaseModel, ConfigDict
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()


class Settings(BaseModel):
    """应用配置"""

    # Firebase 配置
    google_application_credentials: str = os.getenv(
        "GOOGLE_APPLICATION_CREDENTIALS",
        "./firebase-credentials.json"
    )
    firestore_database: str = os.getenv("FIRESTORE_DATABASE", "(default)")

    # 数据集合名称
    pokemon_collection: str = os.getenv("POKEMON_COLLECTION", "pokemon")
    combats_collection: str = os.getenv("COMBATS_COLLECTION", "combats")
    model_results_collection: str = os.getenv("MODEL_RESULTS_COLLECTION", "model_results")

    # 数据总览样本数量
    overview_sample_size: int = int(os.getenv("OVERVIEW_SAMPLE_SIZE", "10"))

    # API 配置
    api_prefix: str = "/api"
    cors_origins: list = ["*"]

    model_config = ConfigDict(env_file=".env", case_sensitive=False)


# 全局配置实例
settings = Settings()


def validate_config() -> bool:
    """
    验证配置是否完整

    Returns:
        bool: 配置是否有效
    """
    if not Path(settings.google_application_credentials).exists():
        print(f"警告: Firebase 凭证文件不存在: {settings.google_application_credentials}")
        return False

    return True
