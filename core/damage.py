"""
伤害向量
五种伤害类型的不可变数值容器
"""
from dataclasses import dataclass, replace
from typing import Dict

from .enums import DamageType, DAMAGE_TYPES


# 伤害类型 -> 字段名
_FIELD_NAMES = {
    DamageType.PHYSICAL: "physical",
    DamageType.FIRE: "fire",
    DamageType.COLD: "cold",
    DamageType.LIGHTNING: "lightning",
    DamageType.CHAOS: "chaos",
}


def _field_for(damage_type) -> str:
    field_name = _FIELD_NAMES.get(damage_type)
    if field_name is None:
        raise ValueError(f"伤害向量不包含该伤害类型: {damage_type!r}")
    return field_name


@dataclass(frozen=True)
class DamageVector:
    """按类型拆分的伤害值（构造后不可修改）"""
    physical: float = 0.0
    fire: float = 0.0
    cold: float = 0.0
    lightning: float = 0.0
    chaos: float = 0.0

    @property
    def total(self) -> float:
        return self.physical + self.fire + self.cold + self.lightning + self.chaos

    def __add__(self, other: "DamageVector") -> "DamageVector":
        if not isinstance(other, DamageVector):
            return NotImplemented
        return DamageVector(
            physical=self.physical + other.physical,
            fire=self.fire + other.fire,
            cold=self.cold + other.cold,
            lightning=self.lightning + other.lightning,
            chaos=self.chaos + other.chaos,
        )

    def get(self, damage_type: DamageType) -> float:
        """读取指定类型的伤害值，元素等合成类型会抛出 ValueError"""
        return getattr(self, _field_for(damage_type))

    def with_amount(self, amount: float, damage_type: DamageType) -> "DamageVector":
        """返回将指定类型替换为 amount 的新向量"""
        return replace(self, **{_field_for(damage_type): amount})

    @classmethod
    def of_type(cls, amount: float, damage_type: DamageType) -> "DamageVector":
        return EMPTY_DAMAGE.with_amount(amount, damage_type)

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "DamageVector":
        """从 {"physical": 100, ...} 形式的字典构造"""
        return cls(**{key: float(value) for key, value in data.items()})

    def as_dict(self) -> Dict[DamageType, float]:
        return {damage_type: self.get(damage_type) for damage_type in DAMAGE_TYPES}


EMPTY_DAMAGE = DamageVector()
