import unittest
from core.enums import DamageType
from core.statistics import ConversionStatistics

class TestConversionStatistics(unittest.TestCase):
    def setUp(self):
        self.stats = ConversionStatistics()
        self.stats.record_leaf(DamageType.PHYSICAL, frozenset({DamageType.PHYSICAL, DamageType.FIRE}),
                               DamageType.FIRE, 50, 0.5, 2.0, 150)
        self.stats.record_leaf(DamageType.PHYSICAL, frozenset({DamageType.PHYSICAL}),
                               DamageType.PHYSICAL, 50, 0.0, 1.0, 50)
        self.stats.record_leaf(DamageType.COLD, frozenset({DamageType.COLD}),
                               DamageType.COLD, 100, 0.0, 1.0, 100)

    def test_aggregation(self):
        self.assertEqual(self.stats.total_damage, 300)
        self.assertEqual(self.stats.damage_by_type(), {
            DamageType.FIRE: 150, DamageType.PHYSICAL: 50, DamageType.COLD: 100
        })
        self.assertEqual(self.stats.damage_by_root(), {DamageType.PHYSICAL: 200, DamageType.COLD: 100})
        self.assertAlmostEqual(self.stats.get_damage_breakdown()[DamageType.FIRE], 0.5)

    def test_path_label(self):
        self.assertEqual(self.stats.leaf_records[0].path_label(), "physical + fire")

    def test_report(self):
        report = self.stats.generate_report(precision=2)
        self.assertIn("300.00", report)
        self.assertIn("fire: 150.00 (50.0%)", report)

    def test_empty_and_reset(self):
        self.stats.reset()
        self.assertEqual(self.stats.total_damage, 0)
        self.assertEqual(self.stats.get_damage_breakdown(), {})
        self.assertIn("总伤害", self.stats.generate_report())

if __name__ == '__main__':
    unittest.main()
