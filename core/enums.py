from enum import Enum

class DamageType(Enum):
    PHYSICAL = "physical"
    FIRE = "fire"
    COLD = "cold"
    LIGHTNING = "lightning"
    CHAOS = "chaos"
    # 元素伤害（合成类型，仅用于修正：同时作用于火焰/冰霜/闪电）
    ELEMENTAL = "elemental"

    @property
    def is_elemental(self) -> bool:
        return self in ELEMENTAL_TYPES

# 实际存在的五种伤害类型（按根节点计算顺序）
DAMAGE_TYPES = (
    DamageType.PHYSICAL,
    DamageType.FIRE,
    DamageType.COLD,
    DamageType.LIGHTNING,
    DamageType.CHAOS,
)

ELEMENTAL_TYPES = frozenset({DamageType.FIRE, DamageType.COLD, DamageType.LIGHTNING})

# 拥有独立修正的类型（五种实际类型 + 元素）
MODIFIER_TYPES = DAMAGE_TYPES + (DamageType.ELEMENTAL,)

class ModifierKind(Enum):
    ADDED = "added"         # 附加（固定值）
    INCREASED = "increased" # 提高（加算）
    MORE = "more"           # 额外（乘算）
