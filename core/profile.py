"""角色伤害数据（引擎的唯一输入）"""
from dataclasses import dataclass, field, replace

from core.conversions import ConversionEdgeSet, ExtraDamageTable
from core.damage import DamageVector
from core.enums import DamageType
from core.modifiers import ModifierSet


@dataclass(frozen=True)
class CharacterDamageProfile:
    """
    角色伤害数据

    由外部（装备、天赋、技能加载）组装，引擎只读
    技能转化与其他来源的转化分开保存，因为技能转化优先
    """
    # 基础伤害（武器或法术）
    base_damage: DamageVector = field(default_factory=DamageVector)
    modifiers: ModifierSet = field(default_factory=ModifierSet)
    # 技能带来的转化
    skill_conversions: ConversionEdgeSet = field(default_factory=ConversionEdgeSet)
    # 天赋树、装备等其他来源的转化
    gear_conversions: ConversionEdgeSet = field(default_factory=ConversionEdgeSet)
    # 所有来源的「额外获得」之和
    extra_damage: ExtraDamageTable = field(default_factory=ExtraDamageTable)
    # 「元素伤害额外获得为混沌伤害」之和
    elemental_as_extra_chaos: float = 0.0
    # 「非混沌伤害额外获得为混沌伤害」之和
    non_chaos_as_extra_chaos: float = 0.0

    def with_skill_conversion(self, source: DamageType, target: DamageType, fraction: float):
        return replace(self, skill_conversions=self.skill_conversions.add_edge(source, target, fraction))

    def with_gear_conversion(self, source: DamageType, target: DamageType, fraction: float):
        return replace(self, gear_conversions=self.gear_conversions.add_edge(source, target, fraction))

    def with_extra_damage(self, source: DamageType, target: DamageType, fraction: float):
        return replace(self, extra_damage=self.extra_damage.add_edge(source, target, fraction))

    def with_modifiers(self, modifiers: ModifierSet):
        return replace(self, modifiers=modifiers)

    def calculate_damage(self) -> DamageVector:
        from core.calculator import calculate_damage
        return calculate_damage(self)
