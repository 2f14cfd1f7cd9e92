"""
Unit tests for partition diagnostics.
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestMetrics(unittest.TestCase):

    def test_rectangle_overlap_ignores_shared_edges(self):
        from mondrian.procedural import Rectangle

        a = Rectangle(-5.0, 0.0, 10.0, 10.0)
        b = Rectangle(5.0, 0.0, 10.0, 10.0)
        c = Rectangle(0.0, 0.0, 10.0, 10.0)
        self.assertFalse(a.overlaps(b))
        self.assertTrue(a.overlaps(c))

    def test_find_overlaps_pairs(self):
        from mondrian.analysis import find_overlaps
        from mondrian.procedural import Rectangle

        rects = [
            Rectangle(-5.0, 0.0, 10.0, 10.0),
            Rectangle(5.0, 0.0, 10.0, 10.0),
            Rectangle(0.0, 0.0, 10.0, 10.0),
        ]
        self.assertEqual(find_overlaps(rects), [(0, 2), (1, 2)])

    def test_is_partition(self):
        from mondrian.analysis import is_partition
        from mondrian.procedural import Rectangle

        halves = [Rectangle(-5.0, 0.0, 10.0, 20.0), Rectangle(5.0, 0.0, 10.0, 20.0)]
        self.assertTrue(is_partition(halves, 20.0))
        self.assertFalse(is_partition(halves[:1], 20.0))
        outside = [Rectangle(100.0, 0.0, 20.0, 20.0)]
        self.assertFalse(is_partition(outside, 20.0))

    def test_summary(self):
        from mondrian.analysis import partition_summary
        from mondrian.procedural import PaletteColor, Rectangle

        rects = [
            Rectangle(-5.0, 0.0, 10.0, 20.0, PaletteColor.RED),
            Rectangle(5.0, 0.0, 10.0, 20.0),
        ]
        s = partition_summary(rects, 20.0)
        self.assertEqual(s["count"], 2)
        self.assertEqual(s["coverage"], 1.0)
        self.assertEqual(s["overlaps"], 0)
        self.assertEqual(s["colors"], {"WHITE": 1, "BLUE": 0, "RED": 1, "YELLOW": 0})
        self.assertEqual(
            s["largest"], {"x": -5.0, "y": 0.0, "w": 10.0, "h": 20.0, "color": "RED"}
        )

    def test_empty(self):
        from mondrian.analysis import find_overlaps, partition_summary, total_area

        self.assertEqual(total_area([]), 0.0)
        self.assertEqual(find_overlaps([]), [])
        self.assertEqual(partition_summary([], 10.0)["count"], 0)
        self.assertIsNone(partition_summary([], 10.0)["largest"])


if __name__ == "__main__":
    unittest.main()
