"""
伤害转化拓扑
固定的有向无环图：物理 -> 闪电 -> 冰霜 -> 火焰 -> 混沌
只能沿图中的边转化，混沌为终点
"""
from typing import Dict, List, Tuple

from core.enums import DamageType, DAMAGE_TYPES


# 源类型 -> 可转化的目标类型
EDGES: Dict[DamageType, Tuple[DamageType, ...]] = {
    DamageType.PHYSICAL: (DamageType.LIGHTNING, DamageType.COLD, DamageType.FIRE, DamageType.CHAOS),
    DamageType.LIGHTNING: (DamageType.COLD, DamageType.FIRE, DamageType.CHAOS),
    DamageType.COLD: (DamageType.FIRE, DamageType.CHAOS),
    DamageType.FIRE: (DamageType.CHAOS,),
    DamageType.CHAOS: (),
}


def _check_type(damage_type):
    if damage_type not in EDGES:
        raise ValueError(f"转化图中不存在该伤害类型: {damage_type!r}")


class ConversionTopology:
    """转化图查询（无状态）"""

    @staticmethod
    def targets(damage_type: DamageType) -> Tuple[DamageType, ...]:
        """返回可从 damage_type 转化到的目标类型"""
        _check_type(damage_type)
        return EDGES[damage_type]

    @staticmethod
    def is_terminal(damage_type: DamageType) -> bool:
        _check_type(damage_type)
        return not EDGES[damage_type]

    @staticmethod
    def has_edge(source: DamageType, target: DamageType) -> bool:
        _check_type(source)
        return target in EDGES[source]

    @staticmethod
    def edges() -> List[Tuple[DamageType, DamageType]]:
        """全部十条合法的转化边"""
        return [(source, target) for source in DAMAGE_TYPES for target in EDGES[source]]

    @staticmethod
    def field_name(source: DamageType, target: DamageType) -> str:
        """边在 ConversionEdgeSet 中对应的字段名，如 physical_to_fire"""
        if not ConversionTopology.has_edge(source, target):
            raise ValueError(f"不允许的转化: {source!r} -> {target!r}")
        return f"{source.value}_to_{target.value}"

    @staticmethod
    def max_depth(damage_type: DamageType = DamageType.PHYSICAL) -> int:
        """从 damage_type 出发的最长转化路径（边数）"""
        targets = ConversionTopology.targets(damage_type)
        if not targets:
            return 0
        return 1 + max(ConversionTopology.max_depth(target) for target in targets)
