"""
战斗单位数据模型
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from app.combat.type_chart import normalize_type_code


@dataclass(frozen=True)
class Combatant:
    """
    参与预测的宝可梦（只读）

    设计原则：
    - 六项基础能力值，不做范围校验
    - 第二属性可为空（None / "" / "0"）
    """

    # ===== 基础信息 =====
    name: str
    numero: int
    type_1: Optional[str]
    type_2: Optional[str] = None

    # ===== 基础能力值 =====
    hp: float = 0
    attack: float = 0
    defense: float = 0
    sp_attack: float = 0
    sp_defense: float = 0
    speed: float = 0

    def __post_init__(self):
        # 属性编码统一为字符串, 哨兵值统一为 None
        object.__setattr__(self, "type_1", normalize_type_code(self.type_1))
        object.__setattr__(self, "type_2", normalize_type_code(self.type_2))

    @property
    def types(self) -> Tuple[str, ...]:
        """实际拥有的属性（跳过空属性）"""
        return tuple(t for t in (self.type_1, self.type_2) if t is not None)

    @property
    def stats(self) -> Tuple[float, ...]:
        return (
            self.hp,
            self.attack,
            self.defense,
            self.sp_attack,
            self.sp_defense,
            self.speed,
        )

    @classmethod
    def from_pokemon(cls, pokemon: Any) -> "Combatant":
        """从数据库中的宝可梦记录构建"""
        return cls(
            name=pokemon.nom,
            numero=pokemon.numero,
            type_1=pokemon.type_1,
            type_2=pokemon.type_2,
            hp=pokemon.points_de_vie,
            attack=pokemon.points_attaque,
            defense=pokemon.points_deffence,
            sp_attack=pokemon.points_attaque_speciale,
            sp_defense=pokemon.point_defense_speciale,
            speed=pokemon.points_vitesse,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "numero": self.numero,
            "type_1": self.type_1,
            "type_2": self.type_2,
            "hp": self.hp,
            "attack": self.attack,
            "defense": self.defense,
            "sp_attack": self.sp_attack,
            "sp_defense": self.sp_defense,
            "speed": self.speed,
        }
