import json
import os
import tempfile
import unittest
from core.config_manager import ConfigManager, get_config

class TestConfigManager(unittest.TestCase):
    def setUp(self):
        # 重置单例以保证测试隔离
        ConfigManager._instance = None
        self.config = get_config()

    def tearDown(self):
        ConfigManager._instance = None

    def test_singleton(self):
        c1 = get_config()
        c2 = get_config()
        self.assertIs(c1, c2)

    def test_default_values(self):
        self.assertEqual(self.config.log_level, "INFO")
        self.assertFalse(self.config.enable_detailed_logging)
        self.assertTrue(self.config.enable_statistics)
        self.assertEqual(self.config.report_precision, 1)

    def test_load_from_dict_ignores_unknown_keys(self):
        self.config.load_from_dict({"log_level": "DEBUG", "unknown_key": 1})
        self.assertEqual(self.config.log_level, "DEBUG")
        self.assertFalse(hasattr(self.config, "unknown_key"))

    def test_json_round_trip(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "config.json")
            self.config.enable_detailed_logging = True
            self.config.save_to_json(path)

            with open(path, encoding='utf-8') as f:
                self.assertTrue(json.load(f)["enable_detailed_logging"])

            self.config.reset_to_defaults()
            self.assertFalse(self.config.enable_detailed_logging)
            self.config.load_from_json(path)
            self.assertTrue(self.config.enable_detailed_logging)

    def test_load_from_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.yaml")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("log_level: WARNING\nreport_precision: 3\n")

            self.config.load_from_yaml(path)

        self.assertEqual(self.config.log_level, "WARNING")
        self.assertEqual(self.config.report_precision, 3)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.config.load_from_yaml("does/not/exist.yaml")
        with self.assertRaises(FileNotFoundError):
            self.config.load_from_json("does/not/exist.json")

if __name__ == '__main__':
    unittest.main()
