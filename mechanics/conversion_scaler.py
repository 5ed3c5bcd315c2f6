"""
转化比例缩放
同一源类型的转化总和不能超过 100%，技能转化优先于装备转化
"""
from dataclasses import dataclass, field
from typing import Dict

from core.conversions import ConversionEdgeSet
from core.enums import DamageType
from mechanics.conversion_topology import ConversionTopology


@dataclass(frozen=True)
class ScaledConversion:
    """单个节点的转化结果"""
    remainder: float                                   # 保持原类型的部分
    converted: Dict[DamageType, float] = field(default_factory=dict)  # 目标类型 -> 转化量（含额外获得）
    skill_factor: float = 1.0
    gear_factor: float = 1.0


class ConversionScaler:
    @staticmethod
    def skill_factor(total_skill: float) -> float:
        # 技能转化仅在自身总和超过 100% 时按比例缩小
        if total_skill > 1.0:
            return 1.0 / total_skill
        return 1.0

    @staticmethod
    def gear_factor(total_gear: float, room: float) -> float:
        """
        装备转化系数

        room 为技能转化之后剩余的比例。总和超过 room 时缩放到正好填满；
        未超过时系数为 room 本身（仅在 room == 1 时经过验证）
        """
        if total_gear > room:
            return room / total_gear
        return room

    @staticmethod
    def scale(source: DamageType, incoming: float,
              skill: ConversionEdgeSet, gear: ConversionEdgeSet,
              extra: ConversionEdgeSet) -> ScaledConversion:
        """
        计算一个节点的转化分配

        Args:
            source: 当前伤害类型
            incoming: 进入该节点的伤害
            skill: 技能转化表
            gear: 装备/天赋转化表
            extra: 额外获得表（不缩放）

        Returns:
            ScaledConversion: 剩余量与各目标的转化量
        """
        targets = ConversionTopology.targets(source)
        if not targets:
            return ScaledConversion(remainder=incoming)

        skill_edges = skill.outgoing(source)
        gear_edges = gear.outgoing(source)
        extra_edges = extra.outgoing(source)

        total_skill = sum(skill_edges.values())
        skill_factor = ConversionScaler.skill_factor(total_skill)
        room = max(0.0, 1.0 - total_skill)

        total_gear = sum(gear_edges.values())
        gear_factor = ConversionScaler.gear_factor(total_gear, room)

        converted = {}
        for target in targets:
            converted[target] = (
                incoming * skill_edges[target] * skill_factor +
                incoming * gear_edges[target] * gear_factor +
                incoming * extra_edges[target]
            )

        remainder = incoming * (1.0 - total_skill * skill_factor - total_gear * gear_factor)
        return ScaledConversion(
            remainder=max(0.0, remainder),
            converted=converted,
            skill_factor=skill_factor,
            gear_factor=gear_factor,
        )
