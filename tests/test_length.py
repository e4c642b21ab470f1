"""
Tests for the Length quantity.
"""

import unittest

import numpy as np

from unitofmeasure.unit import Area, AreaUnit, Length, LengthSystem, LengthUnit, Volume


class TestLengthConstruction(unittest.TestCase):
    """Test Length construction and copying."""

    def test_default_is_zero_meters(self):
        """Test the default length is zero in the base unit."""
        length = Length()
        self.assertEqual(length.magnitude, 0.0)
        self.assertIs(length.unit, LengthUnit.METER)

    def test_magnitude_only_uses_base_unit(self):
        """Test a bare magnitude is interpreted in meters."""
        length = Length(5)
        self.assertEqual(length.magnitude, 5.0)
        self.assertIs(length.unit, LengthUnit.METER)

    def test_magnitude_kept_in_given_unit(self):
        """Test the magnitude is stored in its own unit, not in meters."""
        length = Length(2.5, LengthUnit.KILOMETER)
        self.assertEqual(length.magnitude, 2.5)
        self.assertIs(length.unit, LengthUnit.KILOMETER)

    def test_copy_constructor(self):
        """Test constructing from another length copies it."""
        original = Length(3, LengthUnit.FOOT)
        copied = Length(original)
        self.assertEqual(copied.magnitude, 3.0)
        self.assertIs(copied.unit, LengthUnit.FOOT)

    def test_copy_constructor_with_unit(self):
        """Test constructing from another length converts to the given unit."""
        copied = Length(Length(1, LengthUnit.KILOMETER), LengthUnit.METER)
        self.assertAlmostEqual(copied.magnitude, 1000.0)
        self.assertIs(copied.unit, LengthUnit.METER)

    def test_copies_are_independent(self):
        """Test changing the unit of a copy leaves the original untouched."""
        original = Length(1, LengthUnit.KILOMETER)
        copied = original.copy()
        copied.unit = LengthUnit.METER
        self.assertEqual(original.magnitude, 1.0)
        self.assertIs(original.unit, LengthUnit.KILOMETER)

    def test_rejects_unit_of_other_kind(self):
        """Test a unit of another kind is refused."""
        with self.assertRaises(TypeError):
            Length(1, AreaUnit.SQUARE_METER)

    def test_rejects_copy_of_other_kind(self):
        """Test a quantity of another kind cannot be copied into a length."""
        with self.assertRaises(TypeError):
            Length(Area(1))


class TestLengthConversion(unittest.TestCase):
    """Test conversion and unit assignment."""

    def test_to_other_unit(self):
        """Test converting kilometers to meters."""
        self.assertAlmostEqual(Length(1.5, LengthUnit.KILOMETER).to(LengthUnit.METER), 1500.0)

    def test_to_same_unit_returns_magnitude(self):
        """Test converting to the current unit returns the stored magnitude."""
        value = 0.1 + 0.2
        self.assertEqual(Length(value, LengthUnit.INCH).to(LengthUnit.INCH), value)

    def test_inch_to_centimeter(self):
        """Test one inch is 2.54 centimeters."""
        self.assertAlmostEqual(Length(1, LengthUnit.INCH).to(LengthUnit.CENTIMETER), 2.54)

    def test_mile_to_foot(self):
        """Test one mile is 5280 feet."""
        self.assertAlmostEqual(Length(1, LengthUnit.MILE).to(LengthUnit.FOOT), 5280.0)

    def test_light_year(self):
        """Test a light-year spans 365.25 light-days."""
        self.assertAlmostEqual(Length(1, LengthUnit.LIGHT_YEAR).to(LengthUnit.LIGHT_DAY), 365.25)

    def test_nautical_mile(self):
        """Test a nautical mile is 1852 meters and 1000 fathoms is about 1.8288 km."""
        self.assertAlmostEqual(Length(1, LengthUnit.NAUTICAL_MILE).to(LengthUnit.METER), 1852.0)
        self.assertAlmostEqual(Length(1000, LengthUnit.FATHOM).to(LengthUnit.KILOMETER), 1.8288)

    def test_unit_assignment_rescales(self):
        """Test assigning a new unit rescales the magnitude in place."""
        length = Length(1, LengthUnit.KILOMETER)
        length.unit = LengthUnit.METER
        self.assertAlmostEqual(length.magnitude, 1000.0)
        self.assertIs(length.unit, LengthUnit.METER)

    def test_unit_assignment_same_unit_is_noop(self):
        """Test assigning the current unit does not touch the magnitude."""
        length = Length(0.1 + 0.2, LengthUnit.FOOT)
        length.unit = LengthUnit.FOOT
        self.assertEqual(length.magnitude, 0.1 + 0.2)

    def test_unit_assignment_rejects_other_kind(self):
        """Test assigning a unit of another kind raises TypeError."""
        length = Length(1)
        with self.assertRaises(TypeError):
            length.unit = AreaUnit.SQUARE_FOOT

    def test_with_unit_is_pure(self):
        """Test with_unit returns a new length and keeps the original."""
        length = Length(2, LengthUnit.FOOT)
        inches = length.with_unit(LengthUnit.INCH)
        self.assertAlmostEqual(inches.magnitude, 24.0)
        self.assertIs(inches.unit, LengthUnit.INCH)
        self.assertIs(length.unit, LengthUnit.FOOT)


class TestLengthSystem(unittest.TestCase):
    """Test measurement system classification."""

    def test_systems(self):
        """Test every family is classified by its own tag."""
        cases = {
            LengthUnit.FEMTOMETER: LengthSystem.METRIC,
            LengthUnit.MEGAMETER: LengthSystem.METRIC,
            LengthUnit.INCH: LengthSystem.IMPERIAL,
            LengthUnit.MICROINCH: LengthSystem.IMPERIAL,
            LengthUnit.LIGHT_SECOND: LengthSystem.ASTRONOMICAL,
            LengthUnit.LIGHT_YEAR: LengthSystem.ASTRONOMICAL,
            LengthUnit.NAUTICAL_MILE: LengthSystem.NAUTICAL,
            LengthUnit.FATHOM: LengthSystem.NAUTICAL,
        }
        for unit, system in cases.items():
            with self.subTest(unit=unit):
                self.assertIs(Length(1, unit).system, system)

    def test_flags(self):
        """Test the is_* properties."""
        self.assertTrue(Length(1, LengthUnit.METER).is_metric)
        self.assertFalse(Length(1, LengthUnit.METER).is_imperial)
        self.assertTrue(Length(1, LengthUnit.YARD).is_imperial)
        self.assertTrue(Length(1, LengthUnit.LIGHT_WEEK).is_astronomical)
        self.assertTrue(Length(1, LengthUnit.NAUTICAL_MILE).is_nautical)
        self.assertFalse(Length(1, LengthUnit.NAUTICAL_MILE).is_metric)


class TestLengthNormalize(unittest.TestCase):
    """Test normalization to the most natural unit."""

    def test_millimeters_to_meters(self):
        """Test 1034 mm becomes 1.034 m."""
        length = Length(1034, LengthUnit.MILLIMETER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.METER)
        self.assertAlmostEqual(length.magnitude, 1.034)

    def test_just_below_meter_goes_to_centimeters(self):
        """Test 999 mm falls short of one meter and becomes 99.9 cm."""
        length = Length(999, LengthUnit.MILLIMETER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.CENTIMETER)
        self.assertAlmostEqual(length.magnitude, 99.9)

    def test_exact_power_of_ten_picks_larger_unit(self):
        """Test 1000 mm sits on the threshold and becomes 1 m."""
        length = Length(1000, LengthUnit.MILLIMETER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.METER)
        self.assertAlmostEqual(length.magnitude, 1.0)

    def test_inches_to_feet(self):
        """Test 34.5 in becomes 2.875 ft."""
        length = Length(34.5, LengthUnit.INCH)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.FOOT)
        self.assertAlmostEqual(length.magnitude, 2.875)

    def test_stays_within_system(self):
        """Test a large imperial length becomes miles, never kilometers."""
        length = Length(10_000, LengthUnit.FOOT)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.MILE)

    def test_rare_units_are_not_selected(self):
        """Test normalization never picks a rare unit such as the megameter."""
        length = Length(5000, LengthUnit.HECTOMETER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.KILOMETER)
        self.assertAlmostEqual(length.magnitude, 500.0)

    def test_rare_unit_is_normalized_away(self):
        """Test a length in decimeters moves to a standard unit."""
        length = Length(5, LengthUnit.DECIMETER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.CENTIMETER)
        self.assertAlmostEqual(length.magnitude, 50.0)

    def test_astronomical(self):
        """Test two days of light travel become light-days."""
        length = Length(2 * 86_400, LengthUnit.LIGHT_SECOND)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.LIGHT_DAY)
        self.assertAlmostEqual(length.magnitude, 2.0)

    def test_nautical_is_never_normalized(self):
        """Test nautical lengths keep their unit."""
        length = Length(5000, LengthUnit.FATHOM)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.FATHOM)
        self.assertEqual(length.magnitude, 5000.0)

    def test_zero_metric_resets_to_meter(self):
        """Test a zero metric length becomes zero meters."""
        length = Length(0, LengthUnit.KILOMETER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.METER)
        self.assertEqual(length.magnitude, 0.0)

    def test_zero_imperial_is_unchanged(self):
        """Test a zero imperial length keeps its unit."""
        length = Length(0, LengthUnit.YARD)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.YARD)

    def test_negative_magnitude(self):
        """Test the sign is kept and the absolute value drives the choice."""
        length = Length(-1500, LengthUnit.METER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.KILOMETER)
        self.assertAlmostEqual(length.magnitude, -1.5)

    def test_too_small_is_unchanged(self):
        """Test a length below every candidate keeps its unit."""
        length = Length(1e-20, LengthUnit.METER)
        length.normalize()
        self.assertIs(length.unit, LengthUnit.METER)
        self.assertEqual(length.magnitude, 1e-20)

    def test_idempotent(self):
        """Test normalizing twice changes nothing the second time."""
        for value, unit in [
            (1034, LengthUnit.MILLIMETER),
            (34.5, LengthUnit.INCH),
            (7.5e7, LengthUnit.MICROMETER),
            (123_456, LengthUnit.LIGHT_SECOND),
        ]:
            with self.subTest(value=value, unit=unit):
                length = Length(value, unit)
                length.normalize()
                once = (length.magnitude, length.unit)
                length.normalize()
                self.assertEqual((length.magnitude, length.unit), once)

    def test_idempotent_at_threshold(self):
        """Test values one rounding step off a power of ten settle after one pass."""
        for value, unit in [
            (1e-12 / 1e-15, LengthUnit.FEMTOMETER),
            (10 * 1e-3 / 1e-12, LengthUnit.PICOMETER),
        ]:
            with self.subTest(value=value, unit=unit):
                length = Length(value, unit)
                length.normalize()
                once = (length.magnitude, length.unit)
                self.assertGreaterEqual(abs(length.magnitude), 1)
                length.normalize()
                self.assertEqual((length.magnitude, length.unit), once)

    def test_normalized_is_pure(self):
        """Test normalized returns a new length."""
        length = Length(1034, LengthUnit.MILLIMETER)
        result = length.normalized()
        self.assertIs(result.unit, LengthUnit.METER)
        self.assertIs(length.unit, LengthUnit.MILLIMETER)


class TestLengthArithmetic(unittest.TestCase):
    """Test arithmetic between lengths and with scalars."""

    def test_addition(self):
        """Test 1.25 m + 10 cm equals 1.35 m."""
        lhs = Length(1.25, LengthUnit.METER)
        rhs = Length(10, LengthUnit.CENTIMETER)
        expected = Length(1.35, LengthUnit.METER)
        actual = lhs + rhs
        self.assertEqual(expected, actual)
        self.assertIs(actual.unit, LengthUnit.METER)

    def test_addition_keeps_left_unit(self):
        """Test the sum is expressed in the unit of the left operand."""
        result = Length(10, LengthUnit.CENTIMETER) + Length(1, LengthUnit.METER)
        self.assertIs(result.unit, LengthUnit.CENTIMETER)
        self.assertAlmostEqual(result.magnitude, 110.0)

    def test_addition_commutative_in_value(self):
        """Test x + y and y + x agree once reported in a common unit."""
        x = Length(2.1, LengthUnit.METER)
        y = Length(43.4, LengthUnit.INCH)
        for unit in (LengthUnit.METER, LengthUnit.FOOT, LengthUnit.MILLIMETER):
            with self.subTest(unit=unit):
                self.assertAlmostEqual((x + y).to(unit), (y + x).to(unit))

    def test_subtraction(self):
        """Test subtracting inches from feet."""
        result = Length(2, LengthUnit.FOOT) - Length(6, LengthUnit.INCH)
        self.assertIs(result.unit, LengthUnit.FOOT)
        self.assertAlmostEqual(result.magnitude, 1.5)

    def test_scalar_multiplication(self):
        """Test multiplying by a scalar on either side."""
        length = Length(2, LengthUnit.FOOT)
        for result in (length * 3, 3 * length, length * np.int64(3), length * np.float64(3.0)):
            with self.subTest(result=result):
                self.assertEqual(result.magnitude, 6.0)
                self.assertIs(result.unit, LengthUnit.FOOT)

    def test_scalar_division(self):
        """Test dividing by a scalar keeps the unit."""
        result = Length(9, LengthUnit.MILE) / 3
        self.assertEqual(result.magnitude, 3.0)
        self.assertIs(result.unit, LengthUnit.MILE)

    def test_unary(self):
        """Test negation and absolute value keep the unit."""
        length = Length(-4, LengthUnit.YARD)
        self.assertEqual((-length).magnitude, 4.0)
        self.assertEqual(abs(length).magnitude, 4.0)
        self.assertIs(abs(length).unit, LengthUnit.YARD)

    def test_add_other_kind_raises(self):
        """Test adding a volume to a length raises TypeError."""
        with self.assertRaises(TypeError):
            Length(1) + Volume(1)

    def test_multiply_by_string_raises(self):
        """Test multiplying by a non-number raises TypeError."""
        with self.assertRaises(TypeError):
            Length(1) * "2"


class TestLengthComparison(unittest.TestCase):
    """Test equality and ordering."""

    def test_equality_converts(self):
        """Test 1 km equals 1000 m."""
        self.assertEqual(Length(1, LengthUnit.KILOMETER), Length(1000, LengthUnit.METER))
        self.assertNotEqual(Length(1, LengthUnit.KILOMETER), Length(999, LengthUnit.METER))

    def test_ordering(self):
        """Test ordering operators convert the right operand."""
        km = Length(1, LengthUnit.KILOMETER)
        self.assertGreater(km, Length(999, LengthUnit.METER))
        self.assertLess(Length(11, LengthUnit.INCH), Length(1, LengthUnit.FOOT))
        self.assertLessEqual(km, Length(1000, LengthUnit.METER))
        self.assertGreaterEqual(Length(1, LengthUnit.MILE), Length(1, LengthUnit.KILOMETER))

    def test_compare_to(self):
        """Test three-way comparison."""
        meter = Length(1, LengthUnit.METER)
        self.assertEqual(meter.compare_to(Length(100, LengthUnit.CENTIMETER)), 0)
        self.assertEqual(meter.compare_to(Length(1, LengthUnit.FOOT)), 1)
        self.assertEqual(meter.compare_to(Length(2, LengthUnit.YARD)), -1)

    def test_other_kind_is_not_equal(self):
        """Test a length never equals an area or a plain number."""
        self.assertNotEqual(Length(1), Area(1))
        self.assertNotEqual(Length(1), 1.0)

    def test_ordering_other_kind_raises(self):
        """Test ordering against another kind raises TypeError."""
        with self.assertRaises(TypeError):
            Length(1) < Area(1)
        with self.assertRaises(TypeError):
            Length(1).compare_to(Area(1))
        with self.assertRaises(TypeError):
            Length(1).compare_to(None)

    def test_unhashable(self):
        """Test lengths are mutable values and cannot be hashed."""
        with self.assertRaises(TypeError):
            hash(Length(1))


class TestLengthText(unittest.TestCase):
    """Test text rendering."""

    def test_str(self):
        """Test the default rendering uses the short symbol."""
        self.assertEqual(str(Length(1.35, LengthUnit.METER)), "1.35 m")
        self.assertEqual(str(Length(2, LengthUnit.MICROMETER)), "2.0 µm")

    def test_format_short(self):
        """Test a format spec is applied to the magnitude."""
        self.assertEqual(format(Length(1.35, LengthUnit.METER), ".1f"), "1.4 m")
        self.assertEqual(f"{Length(1.5, LengthUnit.FOOT)}", "1.5 ft")

    def test_format_long(self):
        """Test the l flag selects the long unit name."""
        self.assertEqual(format(Length(1.35, LengthUnit.METER), ".1fl"), "1.4 meters")
        self.assertEqual(f"{Length(3, LengthUnit.NAUTICAL_MILE):l}", "3.0 nautical miles")

    def test_format_long_upper_case(self):
        """Test the long name flag is case-insensitive."""
        self.assertEqual(format(Length(1.35, LengthUnit.METER), ".1fL"), "1.4 meters")

    def test_format_fill_character(self):
        """Test an l used as fill character is not read as the long name flag."""
        self.assertEqual(format(Length(2, LengthUnit.METER), "l>6"), "lll2.0 m")

    def test_unit_text(self):
        """Test the symbol and name properties."""
        length = Length(1, LengthUnit.LIGHT_YEAR)
        self.assertEqual(length.unit_symbol, "ly")
        self.assertEqual(length.unit_name, "light-years")

    def test_repr_shows_base_unit(self):
        """Test repr includes the value in meters."""
        self.assertEqual(repr(Length(1034, LengthUnit.MILLIMETER)), "1034 mm (= 1.034 m)")


if __name__ == "__main__":
    unittest.main()
