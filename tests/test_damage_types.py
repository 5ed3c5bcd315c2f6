import unittest
from core.conversions import ConversionEdgeSet, ExtraDamageTable
from core.damage import DamageVector, EMPTY_DAMAGE
from core.enums import DamageType
from core.modifiers import DamageModifier, ModifierSet

class TestDamageVector(unittest.TestCase):
    def test_total_and_add(self):
        a = DamageVector(physical=10, fire=5)
        b = DamageVector(fire=5, chaos=2.5)
        total = a + b

        self.assertEqual(total, DamageVector(physical=10, fire=10, chaos=2.5))
        self.assertAlmostEqual(total.total, 22.5)
        # 原向量不变
        self.assertEqual(a.fire, 5)

    def test_with_amount(self):
        damage = DamageVector(physical=100).with_amount(40, DamageType.COLD)
        self.assertEqual(damage.cold, 40)
        self.assertEqual(damage.physical, 100)
        self.assertEqual(DamageVector.of_type(7, DamageType.LIGHTNING), DamageVector(lightning=7))

    def test_elemental_is_not_a_vector_field(self):
        with self.assertRaises(ValueError):
            EMPTY_DAMAGE.with_amount(1, DamageType.ELEMENTAL)
        with self.assertRaises(ValueError):
            EMPTY_DAMAGE.get("fire")

    def test_as_dict(self):
        data = DamageVector(physical=1, chaos=2).as_dict()
        self.assertEqual(data[DamageType.PHYSICAL], 1)
        self.assertEqual(data[DamageType.CHAOS], 2)
        self.assertNotIn(DamageType.ELEMENTAL, data)


class TestModifierSet(unittest.TestCase):
    def test_defaults_are_neutral(self):
        modifiers = ModifierSet()
        for damage_type in DamageType:
            self.assertEqual(modifiers.get(damage_type), DamageModifier(0, 0, 1))

    def test_added_and_increased_sum(self):
        modifiers = (ModifierSet()
                     .with_added(30, DamageType.COLD)
                     .with_added(5, DamageType.COLD)
                     .with_increased(0.80, DamageType.PHYSICAL)
                     .with_increased(0.30, DamageType.PHYSICAL))

        self.assertEqual(modifiers.get(DamageType.COLD).added, 35)
        self.assertAlmostEqual(modifiers.get(DamageType.PHYSICAL).increased, 1.10)

    def test_more_stacks_multiplicatively(self):
        modifiers = ModifierSet().with_more(0.30, DamageType.PHYSICAL).with_more(0.20, DamageType.PHYSICAL)
        self.assertAlmostEqual(modifiers.get(DamageType.PHYSICAL).more, 1.3 * 1.2)

    def test_builder_does_not_alias(self):
        base = ModifierSet()
        changed = base.with_increased(0.5, DamageType.FIRE)

        self.assertEqual(base.get(DamageType.FIRE).increased, 0)
        self.assertEqual(changed.get(DamageType.FIRE).increased, 0.5)
        self.assertIsNot(base.modifiers, changed.modifiers)

    def test_undefined_type_fails_fast(self):
        with self.assertRaises(ValueError):
            ModifierSet().get("void")
        with self.assertRaises(ValueError):
            ModifierSet({"void": DamageModifier()})


class TestConversionEdgeSet(unittest.TestCase):
    def test_get_and_with_edge(self):
        edges = ConversionEdgeSet(physical_to_fire=0.5)
        self.assertEqual(edges.get(DamageType.PHYSICAL, DamageType.FIRE), 0.5)

        updated = edges.with_edge(DamageType.COLD, DamageType.FIRE, 0.25)
        self.assertEqual(updated.cold_to_fire, 0.25)
        self.assertEqual(edges.cold_to_fire, 0)

    def test_add_edge_accumulates(self):
        edges = ConversionEdgeSet().add_edge(DamageType.PHYSICAL, DamageType.COLD, 0.3)
        edges = edges.add_edge(DamageType.PHYSICAL, DamageType.COLD, 0.2)
        self.assertAlmostEqual(edges.physical_to_cold, 0.5)

    def test_outgoing(self):
        edges = ConversionEdgeSet(physical_to_fire=0.3, physical_to_lightning=0.3, cold_to_fire=0.5)
        outgoing = edges.outgoing(DamageType.PHYSICAL)

        self.assertEqual(set(outgoing), {DamageType.FIRE, DamageType.COLD, DamageType.LIGHTNING, DamageType.CHAOS})
        self.assertAlmostEqual(edges.total_from(DamageType.PHYSICAL), 0.6)
        self.assertEqual(edges.outgoing(DamageType.CHAOS), {})

    def test_illegal_edge(self):
        # 火焰不能转化为冰霜
        with self.assertRaises(ValueError):
            ConversionEdgeSet().get(DamageType.FIRE, DamageType.COLD)
        with self.assertRaises(ValueError):
            ExtraDamageTable().with_edge(DamageType.CHAOS, DamageType.FIRE, 0.1)

    def test_extra_table_keeps_type(self):
        table = ExtraDamageTable().with_edge(DamageType.PHYSICAL, DamageType.FIRE, 0.25)
        self.assertIsInstance(table, ExtraDamageTable)

if __name__ == '__main__':
    unittest.main()
