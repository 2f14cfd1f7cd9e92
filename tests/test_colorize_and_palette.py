"""
Unit tests for the palette (weighted color pick) and the colorizer.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np

from mondrian.procedural import PaletteColor, Rectangle, colorize, generate_partition, random_color


class TestPalette(unittest.TestCase):

    def test_hex_and_rgb(self):
        self.assertEqual(PaletteColor.WHITE.hex_color, 0xFFFFFF)
        self.assertEqual(PaletteColor.BLUE.rgb, (0, 0, 255))
        self.assertEqual(PaletteColor.RED.rgb, (255, 0, 0))
        self.assertEqual(PaletteColor.YELLOW.rgb, (255, 213, 0))

    def test_buckets(self):
        self.assertIs(random_color(0.0), PaletteColor.WHITE)
        self.assertIs(random_color(0.65), PaletteColor.WHITE)
        self.assertIs(random_color(0.75), PaletteColor.RED)
        self.assertIs(random_color(0.85), PaletteColor.BLUE)
        self.assertIs(random_color(0.95), PaletteColor.YELLOW)
        self.assertIs(random_color(0.9999), PaletteColor.YELLOW)

    def test_out_of_range_falls_back_to_white(self):
        self.assertIs(random_color(1.0), PaletteColor.WHITE)
        self.assertIs(random_color(5.0), PaletteColor.WHITE)

    def test_weighting(self):
        """Roughly 70% WHITE, 10% each other color over many uniform samples."""
        samples = np.random.default_rng(0).random(100_000)
        picks = [random_color(s) for s in samples]
        n = len(picks)
        freq = {c: picks.count(c) / n for c in PaletteColor}
        self.assertAlmostEqual(freq[PaletteColor.WHITE], 0.7, delta=0.01)
        for c in (PaletteColor.RED, PaletteColor.BLUE, PaletteColor.YELLOW):
            self.assertAlmostEqual(freq[c], 0.1, delta=0.01, msg=c.name)

    def test_from_name(self):
        self.assertIs(PaletteColor.from_name(" red "), PaletteColor.RED)
        with self.assertRaises(ValueError):
            PaletteColor.from_name("green")


class TestColorize(unittest.TestCase):

    def setUp(self):
        self.rects = generate_partition(1000.0, 50, 42)

    def test_geometry_unchanged(self):
        out = colorize(self.rects, 42)
        self.assertEqual(len(out), len(self.rects))
        for before, after in zip(self.rects, out):
            self.assertEqual((before.x, before.y, before.w, before.h), (after.x, after.y, after.w, after.h))

    def test_deterministic(self):
        self.assertEqual(colorize(self.rects, 42), colorize(self.rects, 42))

    def test_threshold_one_keeps_colors(self):
        red = [Rectangle(0.0, 0.0, 10.0, 10.0, PaletteColor.RED)] * 5
        self.assertEqual(colorize(red, 42, threshold=1.0), red)

    def test_stream_consumption(self):
        """One sample decides, a second (only when recoloring) picks the color."""
        rects = [Rectangle(float(i), 0.0, 1.0, 1.0) for i in range(50)]
        out = colorize(rects, 5)
        rng = np.random.default_rng(5)
        expected = []
        for _ in rects:
            if rng.random() > 0.7:
                expected.append(random_color(rng.random()))
            else:
                expected.append(PaletteColor.WHITE)
        self.assertEqual([r.color for r in out], expected)

    def test_seed_changes_output(self):
        a = colorize(generate_partition(1000.0, 50, 42), 42)
        b = colorize(generate_partition(1000.0, 50, 7), 7)
        self.assertNotEqual(a, b)


if __name__ == "__main__":
    unittest.main()
