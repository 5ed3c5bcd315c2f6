from core.profile_schema import profile_from_dict

# 伤害转化 wiki 示例 (https://www.poewiki.net/wiki/Damage_conversion)
PRESETS = {
    "wiki_example_1": {
        "description": "100物理弓 + 黑光箭袋(50%物理转火) + 霜息手套(50%物理转冰) + 闪电箭(技能50%物理转电)",
        "profile": {
            "base_damage": {"physical": 100},
            "gear_conversions": {
                "physical_to_fire": 0.50,   # 黑光箭袋
                "physical_to_cold": 0.50,   # 霜息手套
            },
            "skill_conversions": {"physical_to_lightning": 0.50},  # 闪电箭
        },
        "expected": {"lightning": 50, "fire": 25, "cold": 25, "physical": 0, "total": 100},
    },
    "wiki_example_2": {
        "description": "示例1 + 附加火焰伤害辅助(25%物理额外获得为火焰)",
        "profile": {
            "base_damage": {"physical": 100},
            "gear_conversions": {"physical_to_fire": 0.50, "physical_to_cold": 0.50},
            "skill_conversions": {"physical_to_lightning": 0.50},
            "extra_damage": {"physical_to_fire": 0.25},  # 附加火焰伤害辅助 Lv1
        },
        "expected": {"lightning": 50, "fire": 50, "cold": 25, "physical": 0, "total": 125},
    },
    "wiki_example_3": {
        "description": "100物理弓 + 黑光箭袋 + 霜息手套 + 项链(10%非混沌伤害额外获得为混沌)",
        "profile": {
            "base_damage": {"physical": 100},
            "gear_conversions": {"physical_to_fire": 0.50, "physical_to_cold": 0.50},
            "non_chaos_as_extra_chaos": 0.10,
        },
        "expected": {"fire": 50, "cold": 50, "chaos": 20, "total": 120},
    },
    "wiki_final_example": {
        "description": "100物理剑，技能/装备转化 + 额外获得 + 附加/提高/额外修正",
        "profile": {
            "base_damage": {"physical": 100},
            "skill_conversions": {
                "physical_to_cold": 0.50,  # 技能宝石
                "cold_to_fire": 0.50,      # 辅助宝石
            },
            "gear_conversions": {
                "physical_to_fire": 0.30,
                "physical_to_lightning": 0.30,
            },
            "extra_damage": {
                "physical_to_fire": 0.30,
                "physical_to_cold": 0.15,
            },
            "modifiers": [
                {"kind": "added", "damage_type": "cold", "amount": 30, "source": "辅助宝石"},
                {"kind": "more", "damage_type": "physical", "amount": 0.30, "source": "辅助宝石"},
                {"kind": "more", "damage_type": "elemental", "amount": 0.70, "source": "辅助宝石(武器元素伤害)"},
                {"kind": "increased", "damage_type": "physical", "amount": 0.80, "source": "天赋(剑类物理)"},
                {"kind": "increased", "damage_type": "physical", "amount": 0.30, "source": "力量与天赋(近战物理)"},
                {"kind": "increased", "damage_type": "fire", "amount": 0.20, "source": "天赋"},
                {"kind": "increased", "damage_type": "cold", "amount": 0.15, "source": "天赋"},
            ],
        },
        "expected": {"cold": 190.9, "fire": 490.0, "lightning": 116.0, "total": 796.9},
        "tolerance": 0.1,
    },
}


def build_preset_profile(name: str):
    """根据预设名构造角色伤害数据（未知名称抛出 KeyError）"""
    return profile_from_dict(PRESETS[name]["profile"])
