"""
角色伤害数据的外部格式
字典 / JSON / YAML -> CharacterDamageProfile，负数比例与负伤害在加载时拒绝
"""
import json
import yaml
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from core.conversions import ConversionEdgeSet, ExtraDamageTable
from core.damage import DamageVector
from core.enums import DamageType, ModifierKind
from core.modifiers import ModifierSet
from core.profile import CharacterDamageProfile


class DamageModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    physical: float = Field(0.0, ge=0)
    fire: float = Field(0.0, ge=0)
    cold: float = Field(0.0, ge=0)
    lightning: float = Field(0.0, ge=0)
    chaos: float = Field(0.0, ge=0)


class ConversionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    physical_to_lightning: float = Field(0.0, ge=0)
    physical_to_cold: float = Field(0.0, ge=0)
    physical_to_fire: float = Field(0.0, ge=0)
    physical_to_chaos: float = Field(0.0, ge=0)
    lightning_to_cold: float = Field(0.0, ge=0)
    lightning_to_fire: float = Field(0.0, ge=0)
    lightning_to_chaos: float = Field(0.0, ge=0)
    cold_to_fire: float = Field(0.0, ge=0)
    cold_to_chaos: float = Field(0.0, ge=0)
    fire_to_chaos: float = Field(0.0, ge=0)


class ModifierEntry(BaseModel):
    """一条修正，如 {"kind": "more", "damage_type": "elemental", "amount": 0.7}"""
    model_config = ConfigDict(extra="forbid")

    kind: ModifierKind
    damage_type: DamageType
    amount: float
    source: str = ""  # 来源说明（仅备注）


class ProfileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_damage: DamageModel = Field(default_factory=DamageModel)
    modifiers: List[ModifierEntry] = Field(default_factory=list)
    skill_conversions: ConversionModel = Field(default_factory=ConversionModel)
    gear_conversions: ConversionModel = Field(default_factory=ConversionModel)
    extra_damage: ConversionModel = Field(default_factory=ConversionModel)
    elemental_as_extra_chaos: float = Field(0.0, ge=0)
    non_chaos_as_extra_chaos: float = Field(0.0, ge=0)

    def build_modifiers(self) -> ModifierSet:
        """按顺序叠加所有修正"""
        modifiers = ModifierSet()
        for entry in self.modifiers:
            if entry.kind == ModifierKind.ADDED:
                modifiers = modifiers.with_added(entry.amount, entry.damage_type)
            elif entry.kind == ModifierKind.INCREASED:
                modifiers = modifiers.with_increased(entry.amount, entry.damage_type)
            elif entry.kind == ModifierKind.MORE:
                modifiers = modifiers.with_more(entry.amount, entry.damage_type)
        return modifiers

    def to_profile(self) -> CharacterDamageProfile:
        return CharacterDamageProfile(
            base_damage=DamageVector.from_dict(self.base_damage.model_dump()),
            modifiers=self.build_modifiers(),
            skill_conversions=ConversionEdgeSet(**self.skill_conversions.model_dump()),
            gear_conversions=ConversionEdgeSet(**self.gear_conversions.model_dump()),
            extra_damage=ExtraDamageTable(**self.extra_damage.model_dump()),
            elemental_as_extra_chaos=self.elemental_as_extra_chaos,
            non_chaos_as_extra_chaos=self.non_chaos_as_extra_chaos,
        )


def profile_from_dict(data: Dict[str, Any]) -> CharacterDamageProfile:
    """从字典构造角色伤害数据，格式错误时抛出 pydantic.ValidationError"""
    return ProfileModel.model_validate(data).to_profile()


def load_profile(file_path: str) -> CharacterDamageProfile:
    """
    从文件加载角色伤害数据

    Args:
        file_path: .json / .yaml / .yml 文件路径
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"角色数据文件不存在: {file_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f) or {}

    return profile_from_dict(data)
