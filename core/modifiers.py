"""
伤害修正（附加 / 提高 / 额外）
每种伤害类型一份修正，外加作用于所有元素伤害的「元素」修正
"""
from dataclasses import dataclass, field, replace
from typing import Dict

from .enums import DamageType, MODIFIER_TYPES


@dataclass(frozen=True)
class DamageModifier:
    """单一伤害类型的修正"""
    added: float = 0.0      # 附加伤害（固定值，只作用于根节点）
    increased: float = 0.0  # 提高（加算，0.30 = +30%）
    more: float = 1.0       # 额外（乘算系数）


NO_MODIFIER = DamageModifier()


def _default_modifiers() -> Dict[DamageType, DamageModifier]:
    return {damage_type: NO_MODIFIER for damage_type in MODIFIER_TYPES}


@dataclass(frozen=True)
class ModifierSet:
    """
    全部伤害类型的修正集合

    所有 with_* 方法都返回新的集合，原集合保持不变：
    - with_added: 附加伤害累加
    - with_increased: 提高累加
    - with_more: 不同来源的「额外」相互乘算，More *= (1 + amount)
    """
    modifiers: Dict[DamageType, DamageModifier] = field(default_factory=_default_modifiers)

    def __post_init__(self):
        # 补齐缺失类型并复制一份，避免与调用方共享字典
        merged = _default_modifiers()
        for damage_type, modifier in self.modifiers.items():
            if damage_type not in merged:
                raise ValueError(f"未定义的修正类型: {damage_type!r}")
            merged[damage_type] = modifier
        object.__setattr__(self, "modifiers", merged)

    def get(self, damage_type: DamageType) -> DamageModifier:
        try:
            return self.modifiers[damage_type]
        except (KeyError, TypeError):
            raise ValueError(f"未定义的修正类型: {damage_type!r}") from None

    def _with_modifier(self, damage_type: DamageType, modifier: DamageModifier) -> "ModifierSet":
        updated = dict(self.modifiers)
        updated[damage_type] = modifier
        return ModifierSet(updated)

    def with_added(self, amount: float, damage_type: DamageType) -> "ModifierSet":
        mod = self.get(damage_type)
        return self._with_modifier(damage_type, replace(mod, added=mod.added + amount))

    def with_increased(self, amount: float, damage_type: DamageType) -> "ModifierSet":
        mod = self.get(damage_type)
        return self._with_modifier(damage_type, replace(mod, increased=mod.increased + amount))

    def with_more(self, amount: float, damage_type: DamageType) -> "ModifierSet":
        mod = self.get(damage_type)
        return self._with_modifier(damage_type, replace(mod, more=mod.more * (1.0 + amount)))


EMPTY_MODIFIERS = ModifierSet()
