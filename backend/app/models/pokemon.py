"""
宝可梦 / 对战 / 模型评估 数据模型

Field names follow the stored columns of the hosted dataset.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Pokemon(BaseModel):
    """宝可梦图鉴记录"""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    numero: int
    nom: str
    type_1: str
    type_2: Optional[str] = None

    # 基础能力值
    points_de_vie: int = 0
    points_attaque: int = 0
    points_deffence: int = 0
    points_attaque_speciale: int = 0
    point_defense_speciale: int = 0
    points_vitesse: int = 0

    nombre_generations: int = 1
    legendaire: bool = False

    # 历史对战统计
    combats: int = 0
    victoires: int = 0
    taux_de_victoire: float = 0.0

    @field_validator("type_1", "type_2", mode="before")
    @classmethod
    def _coerce_type_code(cls, value: Any) -> Optional[str]:
        # 属性编码在部分导出数据中为整数
        if value is None:
            return None
        return str(value)

    @property
    def total_stats(self) -> int:
        return (
            self.points_de_vie
            + self.points_attaque
            + self.points_deffence
            + self.points_attaque_speciale
            + self.point_defense_speciale
            + self.points_vitesse
        )


class CombatRecord(BaseModel):
    """历史对战记录"""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str
    first_pokemon: int
    second_pokemon: int
    winner: int
    created_at: Optional[datetime] = None


class ModelType(str, Enum):
    """模型类型"""
    REGRESSION = "regression"          # 胜率回归
    CLASSIFICATION = "classification"  # 传说宝可梦分类


class ModelResult(BaseModel):
    """机器学习模型评估指标"""
    model_config = ConfigDict(from_attributes=True, extra="ignore", protected_namespaces=())

    id: str
    model_name: str
    model_type: str

    # 回归指标
    mse: Optional[float] = None
    mae: Optional[float] = None
    r2_score: Optional[float] = None

    # 分类指标
    accuracy: Optional[float] = None
    precision: Optional[float] = None
    recall: Optional[float] = None
    f1_score: Optional[float] = None

    created_at: Optional[datetime] = Field(default=None)
