"""
伤害转化表
十条合法转化边各自的比例；技能转化、装备转化、「获得额外伤害」各使用一份
"""
from dataclasses import dataclass, replace
from typing import Dict

from core.enums import DamageType
from mechanics.conversion_topology import ConversionTopology


@dataclass(frozen=True)
class ConversionEdgeSet:
    """
    转化比例表（0.5 = 50%）

    单条边不设上限，同一源类型的总和由 ConversionScaler 负责缩放
    """
    physical_to_lightning: float = 0.0
    physical_to_cold: float = 0.0
    physical_to_fire: float = 0.0
    physical_to_chaos: float = 0.0
    lightning_to_cold: float = 0.0
    lightning_to_fire: float = 0.0
    lightning_to_chaos: float = 0.0
    cold_to_fire: float = 0.0
    cold_to_chaos: float = 0.0
    fire_to_chaos: float = 0.0

    def get(self, source: DamageType, target: DamageType) -> float:
        return getattr(self, ConversionTopology.field_name(source, target))

    def with_edge(self, source: DamageType, target: DamageType, fraction: float):
        """替换一条边的比例"""
        return replace(self, **{ConversionTopology.field_name(source, target): fraction})

    def add_edge(self, source: DamageType, target: DamageType, fraction: float):
        """在已有比例上累加（多个来源同一条边时使用）"""
        return self.with_edge(source, target, self.get(source, target) + fraction)

    def outgoing(self, source: DamageType) -> Dict[DamageType, float]:
        """源类型的全部出边比例"""
        return {target: self.get(source, target) for target in ConversionTopology.targets(source)}

    def total_from(self, source: DamageType) -> float:
        return sum(self.outgoing(source).values())


@dataclass(frozen=True)
class ExtraDamageTable(ConversionEdgeSet):
    """
    「X% 的 A 伤害额外获得为 B 伤害」

    与转化不同：源类型自身伤害不减少，也不受 100% 上限约束
    """
