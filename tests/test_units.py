"""Tests for size_cli.utils.units."""
import unittest

from size_cli.core.errors import AmountOverflowError
from size_cli.utils.units import scale


class TestScale(unittest.TestCase):
    def test_below_1024_is_bytes(self) -> None:
        for amount in (0, 1, 512, 1023):
            unit, _ = scale(amount)
            self.assertEqual(unit.divisor, 1)
            self.assertEqual(unit.label, "")

    def test_kilo_range(self) -> None:
        for a in (1, 2, 500, 1023):
            unit, _ = scale(a * 1024)
            self.assertEqual(unit.divisor, 1024)
            self.assertEqual(unit.label, "k")
            self.assertEqual(unit.word, "kilo")

    def test_each_tier(self) -> None:
        expected = [
            (1024**2, "m"),
            (1024**3, "g"),
            (1024**4, "t"),
            (1024**5 - 1, "t"),
        ]
        for amount, label in expected:
            unit, _ = scale(amount)
            self.assertEqual(unit.label, label, amount)

    def test_petabyte_range_goes_to_exa(self) -> None:
        unit, _ = scale(1024**5)
        self.assertEqual(unit.label, "e")
        self.assertEqual(unit.divisor, 1024**6)
        unit, _ = scale(2**64 - 1)
        self.assertEqual(unit.label, "e")

    def test_round_down_keeps_boundary_in_lower_tier(self) -> None:
        unit, tested = scale(1024, round_down=True)
        self.assertEqual(unit.divisor, 1)
        self.assertEqual(tested, 1023)
        unit, _ = scale(1024**2, round_down=True)
        self.assertEqual(unit.label, "k")

    def test_round_down_does_not_demote_away_from_boundary(self) -> None:
        unit, _ = scale(5000, round_down=True)
        self.assertEqual(unit.label, "k")

    def test_zero(self) -> None:
        unit, _ = scale(0, round_down=True)
        self.assertTrue(unit.is_bytes)

    def test_out_of_range(self) -> None:
        for bad in (2**64, -1, float("nan"), "12", True):
            with self.assertRaises(AmountOverflowError):
                scale(bad)


if __name__ == "__main__":
    unittest.main()
