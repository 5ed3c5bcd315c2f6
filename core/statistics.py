"""
伤害结算统计
记录每个叶节点（不再继续转化、结算修正的伤害片段）的明细
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional
from collections import defaultdict

from core.config_manager import get_config
from core.enums import DamageType, DAMAGE_TYPES


@dataclass
class LeafRecord:
    """单个叶节点的结算记录"""
    root: DamageType                # 来源的根伤害类型
    path: FrozenSet[DamageType]     # 经历过的伤害类型集合（含最终类型）
    damage_type: DamageType         # 最终结算类型
    raw_amount: float               # 修正前伤害
    increased: float                # Σ提高
    more: float                     # Π额外
    final_amount: float             # 修正后伤害

    def path_label(self) -> str:
        ordered = [t.value for t in DAMAGE_TYPES if t in self.path]
        return " + ".join(ordered)


class ConversionStatistics:
    """叶节点统计收集器"""

    def __init__(self):
        self.leaf_records: List[LeafRecord] = []
        self.total_damage = 0.0

    def record_leaf(self, root: DamageType, path: FrozenSet[DamageType],
                    damage_type: DamageType, raw_amount: float,
                    increased: float, more: float, final_amount: float):
        """记录叶节点结算"""
        record = LeafRecord(
            root=root,
            path=path,
            damage_type=damage_type,
            raw_amount=raw_amount,
            increased=increased,
            more=more,
            final_amount=final_amount
        )
        self.leaf_records.append(record)
        self.total_damage += final_amount

    def damage_by_type(self) -> Dict[DamageType, float]:
        """按最终伤害类型汇总"""
        summary = defaultdict(float)
        for record in self.leaf_records:
            summary[record.damage_type] += record.final_amount
        return dict(summary)

    def damage_by_root(self) -> Dict[DamageType, float]:
        """按根伤害类型汇总（各基础伤害最终贡献了多少）"""
        summary = defaultdict(float)
        for record in self.leaf_records:
            summary[record.root] += record.final_amount
        return dict(summary)

    def get_damage_breakdown(self) -> Dict[DamageType, float]:
        """
        获取伤害占比（按最终类型）

        Returns:
            Dict[伤害类型, 占比]
        """
        if self.total_damage == 0:
            return {}

        return {
            damage_type: damage / self.total_damage
            for damage_type, damage in self.damage_by_type().items()
        }

    def generate_report(self, precision: Optional[int] = None) -> str:
        """生成文本格式的统计报告（默认精度取自配置 report_precision）"""
        if precision is None:
            precision = get_config().report_precision

        lines = []
        lines.append("=" * 60)
        lines.append("伤害结算报告".center(60))
        lines.append("=" * 60)

        lines.append(f"\n总伤害: {self.total_damage:,.{precision}f}")
        lines.append(f"叶节点数: {len(self.leaf_records)}")

        by_type = self.damage_by_type()
        breakdown = self.get_damage_breakdown()
        if by_type:
            lines.append("\n" + "-" * 60)
            lines.append("按伤害类型".center(60))
            lines.append("-" * 60)
            for damage_type in DAMAGE_TYPES:
                if damage_type in by_type:
                    pct = breakdown.get(damage_type, 0.0) * 100
                    lines.append(f"  {damage_type.value}: {by_type[damage_type]:,.{precision}f} ({pct:.1f}%)")

        if self.leaf_records:
            lines.append("\n" + "-" * 60)
            lines.append("叶节点明细".center(60))
            lines.append("-" * 60)
            for record in self.leaf_records:
                lines.append(
                    f"  [{record.root.value}] {record.path_label()} -> {record.damage_type.value}: "
                    f"{record.raw_amount:,.{precision}f} × {1 + record.increased:.2f} × {record.more:.2f}"
                    f" = {record.final_amount:,.{precision}f}"
                )

        lines.append("\n" + "=" * 60)
        return "\n".join(lines)

    def reset(self):
        """重置所有统计数据"""
        self.leaf_records.clear()
        self.total_damage = 0.0
