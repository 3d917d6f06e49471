import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.core.rounding import round_half_up  # noqa: E402


class RoundHalfUpTests(unittest.TestCase):
    def test_ties_go_up(self):
        for value, expected in ((0.5, 1), (1.5, 2), (2.5, 3), (33.5, 34), (58.5, 59), (62.5, 63)):
            with self.subTest(value=value):
                self.assertEqual(round_half_up(value), expected)

    def test_non_ties_go_to_nearest(self):
        self.assertEqual(round_half_up(0), 0)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(2.51), 3)
        self.assertEqual(round_half_up(99.9), 100)

    def test_returns_int(self):
        self.assertIsInstance(round_half_up(7.0), int)


if __name__ == "__main__":
    unittest.main()
