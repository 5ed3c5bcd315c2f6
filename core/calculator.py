import logging
import sys
from typing import FrozenSet, Optional

from core.config_manager import ConfigManager
from core.damage import DamageVector, EMPTY_DAMAGE
from core.enums import DamageType, DAMAGE_TYPES
from core.profile import CharacterDamageProfile
from core.statistics import ConversionStatistics
from mechanics.conversion_scaler import ConversionScaler
from mechanics.modifier_aggregator import ModifierAggregator

# 避免重复配置
_LOGGING_CONFIGURED = False

class DamageEngine:
    """
    伤害转化计算：
    每种基础伤害作为根节点，沿转化图递归拆分为「保留部分」和各条边的转化部分，
    保留部分按经历过的类型集合结算修正（叶节点），转化部分继续递归，最后求和。

    引擎本身不保存计算状态，可被多个调用方同时使用。
    """

    def __init__(self, config: Optional[ConfigManager] = None):
        self.config = config or ConfigManager.get_instance()
        self.scaler = ConversionScaler()
        self.aggregator = ModifierAggregator()

        # 配置日志
        self._setup_logging()

    def _setup_logging(self):
        global _LOGGING_CONFIGURED
        self.logger = logging.getLogger("DamageEngine")

        if not _LOGGING_CONFIGURED:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter('[%(name)s] %(message)s')
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            _LOGGING_CONFIGURED = True

        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR
        }
        log_level = level_map.get(str(self.config.log_level).upper(), logging.INFO)
        self.logger.setLevel(log_level)

    def log(self, message: str, level: str = "INFO"):
        """
        统一日志接口
        Args:
            message: 日志内容
            level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        """
        if level == "DEBUG":
            self.logger.debug(message)
        elif level == "WARNING":
            self.logger.warning(message)
        elif level == "ERROR":
            self.logger.error(message)
        else:
            self.logger.info(message)

    def calculate(self, profile: CharacterDamageProfile,
                  statistics: Optional[ConversionStatistics] = None) -> DamageVector:
        """
        计算最终伤害

        Args:
            profile: 角色伤害数据
            statistics: 可选的统计器，记录每个叶节点的结算明细

        Returns:
            DamageVector: 各类型的最终伤害
        """
        if not self.config.enable_statistics:
            statistics = None

        result = EMPTY_DAMAGE
        for root in DAMAGE_TYPES:
            # 附加伤害只加在根节点上
            amount = profile.base_damage.get(root) + profile.modifiers.get(root).added
            result = result + self.convert(amount, root, frozenset(), profile,
                                           root=root, statistics=statistics)

        self.log(
            f"伤害结算完成: 物理 {result.physical:.1f} / 火焰 {result.fire:.1f} / "
            f"冰霜 {result.cold:.1f} / 闪电 {result.lightning:.1f} / 混沌 {result.chaos:.1f} "
            f"(总计 {result.total:.1f})",
            level="DEBUG"
        )
        return result

    def convert(self, amount: float, damage_type: DamageType, path: FrozenSet[DamageType],
                profile: CharacterDamageProfile, root: Optional[DamageType] = None,
                statistics: Optional[ConversionStatistics] = None) -> DamageVector:
        """
        递归处理一段 damage_type 伤害

        Args:
            amount: 伤害值
            damage_type: 当前伤害类型
            path: 此前经历过的伤害类型（不含当前类型）
            profile: 角色伤害数据
            root: 根伤害类型（仅用于统计）
            statistics: 可选的统计器
        """
        if amount <= 0:
            return EMPTY_DAMAGE

        scaled = self.scaler.scale(
            damage_type, amount,
            profile.skill_conversions, profile.gear_conversions, profile.extra_damage
        )
        converted = dict(scaled.converted)

        # 全局「额外获得为混沌伤害」
        if damage_type != DamageType.CHAOS:
            chaos_bonus = amount * profile.non_chaos_as_extra_chaos
            if damage_type.is_elemental:
                chaos_bonus += amount * profile.elemental_as_extra_chaos
            converted[DamageType.CHAOS] = converted.get(DamageType.CHAOS, 0.0) + chaos_bonus

        current_path = path | {damage_type}
        result = self._finalize(scaled.remainder, damage_type, current_path, profile,
                                root or damage_type, statistics)

        for target, converted_amount in converted.items():
            if converted_amount > 0:
                result = result + self.convert(converted_amount, target, current_path, profile,
                                               root=root or damage_type, statistics=statistics)

        return result

    def _finalize(self, amount: float, damage_type: DamageType, path: FrozenSet[DamageType],
                  profile: CharacterDamageProfile, root: DamageType,
                  statistics: Optional[ConversionStatistics]) -> DamageVector:
        """叶节点：按路径结算修正"""
        final_amount = self.aggregator.aggregate(amount, path, profile.modifiers)

        if amount > 0 and (statistics is not None or self.config.enable_detailed_logging):
            increased = self.aggregator.total_increased(path, profile.modifiers)
            more = self.aggregator.total_more(path, profile.modifiers)

            if statistics is not None:
                statistics.record_leaf(root, path, damage_type, amount, increased, more, final_amount)

            if self.config.enable_detailed_logging:
                types = ", ".join(t.value for t in DAMAGE_TYPES if t in path)
                self.log(
                    f"叶节点 {damage_type.value} [{types}]: {amount:.2f} × {1 + increased:.2f} × {more:.2f}"
                    f" = {final_amount:.2f}",
                    level="DEBUG"
                )

        return DamageVector.of_type(final_amount, damage_type)


_default_engine = None


def get_engine() -> DamageEngine:
    """获取共享的默认引擎"""
    global _default_engine
    if _default_engine is None:
        _default_engine = DamageEngine()
    return _default_engine


def calculate_damage(profile: CharacterDamageProfile) -> DamageVector:
    """计算角色的最终伤害"""
    return get_engine().calculate(profile)
