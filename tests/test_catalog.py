import random
import unittest

from termstress.ansi import COLORS, RESET, random_color
from termstress.catalog import Catalog
from termstress.messages import (
    BROKEN_CATALOG,
    CHARSET,
    MAX_LENGTH,
    MIN_LENGTH,
    color_message,
    random_length,
    random_string,
)
from termstress.types import BROKEN_DELAY, COLOR_DELAY, DelayPolicy


class TestCatalog(unittest.TestCase):
    def test_selection_is_cyclic(self) -> None:
        n = len(BROKEN_CATALOG)
        for i in range(3 * n):
            self.assertIs(BROKEN_CATALOG.entry_at(i), BROKEN_CATALOG.entry_at(i + n))

    def test_builtin_catalog_size(self) -> None:
        self.assertEqual(len(BROKEN_CATALOG), 31)
        self.assertEqual(BROKEN_CATALOG.delay, BROKEN_DELAY)

    def test_every_builtin_entry_produces_text(self) -> None:
        for factory in BROKEN_CATALOG.entries:
            self.assertIsInstance(factory(), str)

    def test_empty_catalog_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Catalog(name="empty", entries=())

    def test_literal_catalog(self) -> None:
        cat = Catalog.literal("x", ["a", "b"])
        self.assertEqual([cat.entry_at(i)() for i in range(5)], ["a", "b", "a", "b", "a"])


class TestColors(unittest.TestCase):
    def test_random_color_never_reset(self) -> None:
        allowed = {code for name, code in COLORS.items() if name != "reset"}
        rng = random.Random(7)
        seen = set()
        for _ in range(2000):
            code = random_color(rng)
            self.assertIn(code, allowed)
            self.assertNotEqual(code, RESET)
            seen.add(code)
        self.assertEqual(seen, allowed)

    def test_color_message_shape(self) -> None:
        rng = random.Random(3)
        for _ in range(200):
            msg = color_message(rng)
            self.assertTrue(msg.endswith(RESET))
            body = msg[: -len(RESET)]
            code = body[: body.index("m") + 1]
            text = body[len(code):]
            self.assertIn(code, COLORS.values())
            self.assertTrue(MIN_LENGTH <= len(text) < MAX_LENGTH)
            self.assertTrue(set(text) <= set(CHARSET))

    def test_random_length_bounds(self) -> None:
        rng = random.Random(11)
        lengths = {random_length(rng) for _ in range(5000)}
        self.assertEqual(min(lengths), MIN_LENGTH)
        self.assertEqual(max(lengths), MAX_LENGTH - 1)

    def test_random_string_rejects_negative_length(self) -> None:
        with self.assertRaises(ValueError):
            random_string(random.Random(), -1)


class TestDelayPolicy(unittest.TestCase):
    def test_color_delay_within_bounds(self) -> None:
        rng = random.Random(5)
        for _ in range(5000):
            ms = COLOR_DELAY.sample_ms(rng)
            self.assertGreaterEqual(ms, 500)
            self.assertLessEqual(ms, 2000)

    def test_fixed_delay(self) -> None:
        self.assertEqual(BROKEN_DELAY.sample_ms(random.Random()), 2000.0)
        self.assertTrue(BROKEN_DELAY.is_fixed)

    def test_invalid_bounds_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DelayPolicy(min_ms=-1, max_ms=10)
        with self.assertRaises(ValueError):
            DelayPolicy(min_ms=100, max_ms=10)
