"""
属性克制表（简化版）

Type codes are the string ids stored in the ``pokemon`` collection
(``type_1`` / ``type_2``). The advantage table is hand authored and
deliberately incomplete: it is a heuristic, not the game chart.
"""
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Union


# ============================================
# 常量定义
# ============================================

# 克制倍率（每命中一对属性乘一次）
TYPE_ADVANTAGE_MULTIPLIER = 1.5

# "无第二属性" 的保留编码
NO_TYPE = "0"


# ============================================
# 属性名称（18种）
# ============================================

TYPE_NAMES: Mapping[str, str] = MappingProxyType({
    "1": "Fighting",
    "2": "Flying",
    "3": "Poison",
    "4": "Ground",
    "5": "Rock",
    "6": "Bug",
    "7": "Ghost",
    "8": "Steel",
    "9": "Fire",
    "10": "Water",
    "11": "Grass",
    "12": "Electric",
    "13": "Psychic",
    "14": "Ice",
    "15": "Dragon",
    "16": "Dark",
    "17": "Fairy",
    "18": "Normal",
})


# ============================================
# 克制表: 攻击方属性 -> 被克制的防御方属性
# ============================================
# NOTE: the inline names are the ones the table was authored against
# (6=Fire, 9=Grass, ...). They do not follow TYPE_NAMES; the codes are
# what gets matched, so keep them as they are.

TYPE_ADVANTAGES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "6": frozenset({"9", "10", "12"}),   # Fire > Grass, Bug, Ice
    "4": frozenset({"6", "16", "2"}),    # Water > Fire, Rock, Ground
    "9": frozenset({"4", "16", "13"}),   # Grass > Water, Rock, Poison
    "5": frozenset({"4", "18"}),         # Electric > Water, Flying
    "13": frozenset({"9"}),              # Poison > Grass
    "2": frozenset({"5", "6", "13"}),    # Flying > Electric, Fire, Poison
    "14": frozenset({"1", "14"}),        # Psychic > Fighting, Psychic (for balance)
    "1": frozenset({"12", "15"}),        # Fighting > Normal, Rock
    "12": frozenset({"14", "17"}),       # Dark > Psychic, Ghost
    "17": frozenset({"14", "17"}),       # Ghost > Psychic, Ghost
    "15": frozenset({"6", "2", "12"}),   # Rock > Fire, Flying, Bug
    "16": frozenset({"5", "13", "6"}),   # Ground > Electric, Poison, Fire
    "10": frozenset({"9", "14", "12"}),  # Bug > Grass, Psychic, Dark
    "8": frozenset({"2", "9", "16"}),    # Ice > Flying, Grass, Ground
    "7": frozenset({"1", "10", "15"}),   # Fairy > Fighting, Bug, Rock
})


TypeCode = Union[str, int, None]


def normalize_type_code(code: TypeCode) -> Optional[str]:
    """统一属性编码为字符串；"无属性" 返回 None"""
    if code is None:
        return None
    text = str(code).strip()
    if not text or text == NO_TYPE:
        return None
    return text


def is_no_type(code: TypeCode) -> bool:
    """是否为 "无第二属性" 哨兵值"""
    return normalize_type_code(code) is None


def strong_against(attacking_type: TypeCode) -> FrozenSet[str]:
    """返回该属性克制的属性集合（未知属性返回空集合）"""
    key = normalize_type_code(attacking_type)
    if key is None:
        return frozenset()
    return TYPE_ADVANTAGES.get(key, frozenset())


def type_label(code: TypeCode) -> str:
    """属性显示名称，未知编码原样返回"""
    key = normalize_type_code(code)
    if key is None:
        return ""
    return TYPE_NAMES.get(key, key)
