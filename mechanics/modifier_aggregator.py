"""
伤害修正汇总
一段伤害在转化过程中经历过的每种类型，其修正只生效一次（按集合而非次数）
"""
from typing import AbstractSet

from core.enums import DamageType, DAMAGE_TYPES, MODIFIER_TYPES
from core.modifiers import ModifierSet


def _applicable_types(path: AbstractSet[DamageType]):
    for damage_type in path:
        if damage_type not in DAMAGE_TYPES:
            raise ValueError(f"路径中包含未定义的伤害类型: {damage_type!r}")
    # 经历过任意元素类型时，元素修正生效一次
    elemental = any(damage_type.is_elemental for damage_type in path)
    # 固定顺序遍历，保证浮点累加结果稳定
    return [
        damage_type for damage_type in MODIFIER_TYPES
        if damage_type in path or (damage_type == DamageType.ELEMENTAL and elemental)
    ]


class ModifierAggregator:
    @staticmethod
    def total_increased(path: AbstractSet[DamageType], modifiers: ModifierSet) -> float:
        """路径上所有「提高」之和"""
        return sum(modifiers.get(damage_type).increased for damage_type in _applicable_types(path))

    @staticmethod
    def total_more(path: AbstractSet[DamageType], modifiers: ModifierSet) -> float:
        """路径上所有「额外」之积"""
        more = 1.0
        for damage_type in _applicable_types(path):
            more *= modifiers.get(damage_type).more
        return more

    @staticmethod
    def aggregate(amount: float, path: AbstractSet[DamageType], modifiers: ModifierSet) -> float:
        """
        最终伤害 = 伤害 × (1 + Σ提高) × Π额外
        """
        increased = ModifierAggregator.total_increased(path, modifiers)
        more = ModifierAggregator.total_more(path, modifiers)
        return amount * (1.0 + increased) * more
