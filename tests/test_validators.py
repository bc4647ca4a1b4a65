"""
Unit tests for validators
"""

import unittest

from utils.validators import sanitize


class TestSanitize(unittest.TestCase):
    """Test cases for sanitize"""

    def test_keeps_digits_and_point_in_order(self):
        self.assertEqual(sanitize("12a.3b4"), "12.34")

    def test_nothing_valid_left(self):
        self.assertEqual(sanitize(""), "")
        self.assertEqual(sanitize("abc"), "")
        self.assertEqual(sanitize(None), "")

    def test_strips_sign_spaces_and_commas(self):
        self.assertEqual(sanitize("-1 500,50"), "150050")

    def test_only_first_decimal_point_is_kept(self):
        self.assertEqual(sanitize("1.2.3"), "1.23")
        self.assertEqual(sanitize("..5"), ".5")
        self.assertEqual(sanitize("27.000 Bs."), "27.000")

    def test_lone_point(self):
        self.assertEqual(sanitize("."), ".")

    def test_non_ascii_digits_are_dropped(self):
        self.assertEqual(sanitize("١٢3"), "3")

    def test_idempotent(self):
        for raw in ["12a.3b4", "1.2.3", "Bs. 27.000,50", ""]:
            self.assertEqual(sanitize(sanitize(raw)), sanitize(raw))


if __name__ == '__main__':
    unittest.main()
