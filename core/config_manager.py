"""
统一配置管理系统
集中管理伤害计算引擎的运行配置（日志、统计、报告格式）
"""
import json
import yaml
from pathlib import Path
from typing import Dict, Any


class ConfigManager:
    """单例配置管理器"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        # 日志配置
        self.log_level = "INFO"  # DEBUG, INFO, WARNING, ERROR
        self.enable_detailed_logging = False  # 输出每个叶节点的结算明细（DEBUG）

        # 统计配置
        self.enable_statistics = True  # 调用方传入统计器时记录叶节点
        self.report_precision = 1      # 报告中伤害保留的小数位

        self._initialized = True

    def load_from_dict(self, config_dict: Dict[str, Any]):
        """从字典加载配置（忽略未知键）"""
        for key, value in config_dict.items():
            if hasattr(self, key) and not key.startswith('_'):
                setattr(self, key, value)

    def load_from_json(self, file_path: str):
        """从JSON文件加载配置"""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        with open(path, 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
            self.load_from_dict(config_dict)

    def load_from_yaml(self, file_path: str):
        """从YAML文件加载配置"""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        with open(path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f) or {}
            self.load_from_dict(config_dict)

    def save_to_json(self, file_path: str):
        """保存配置到JSON文件"""
        config_dict = self.to_dict()
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    def to_dict(self) -> Dict[str, Any]:
        """导出为字典"""
        return {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith('_')
        }

    def reset_to_defaults(self):
        """重置为默认配置"""
        self._initialized = False
        self.__init__()

    @classmethod
    def get_instance(cls) -> 'ConfigManager':
        """获取单例实例"""
        return cls()


# 提供全局访问点
def get_config() -> ConfigManager:
    """获取配置管理器实例"""
    return ConfigManager.get_instance()
