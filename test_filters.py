#!/usr/bin/env python3
"""
Unit tests for the Jinja template filters.
"""

import unittest
from datetime import datetime

from portfolio.filters import TEMPLATE_FILTERS, contains, format_date, humanize, join, time_ago, truncate

class TestFilters(unittest.TestCase):

    def test_truncate(self):
        cases = [
            ("This is a very long string that needs truncation", 10, "This is a ..."),
            ("Short", 20, "Short"),
            ("Exact", 5, "Exact"),
            ("", 10, ""),
        ]
        for s, length, expected in cases:
            with self.subTest(s=s, length=length):
                self.assertEqual(truncate(s, length), expected)

    def test_format_date(self):
        self.assertEqual(format_date("2025-01-15"), "Jan 15, 2025")
        self.assertEqual(format_date(""), "")
        self.assertEqual(format_date("15/01/2025"), "15/01/2025")

    def test_contains(self):
        self.assertTrue(contains(["go", "php", "rust"], "go"))
        self.assertFalse(contains(["go", "php", "rust"], "python"))
        self.assertFalse(contains([], "go"))

    def test_join(self):
        self.assertEqual(join(["go", "php", "rust"], ", "), "go, php, rust")
        self.assertEqual(join(["a", "b", "c"], " | "), "a | b | c")
        self.assertEqual(join([], ","), "")
        self.assertEqual(join(["only"], ","), "only")

    def test_time_ago(self):
        now = datetime(2025, 6, 1, 12, 0)
        cases = [
            ("2023-01-01", "2 years ago"),
            ("2024-01-01", "1 year ago"),
            ("2025-03-01", "3 months ago"),
            ("2025-05-01", "1 month ago"),
            ("2025-05-30", "2 days ago"),
            ("2025-05-31", "1 day ago"),
            ("2025-06-01", "Today"),
            ("", ""),
            ("yesterday", "yesterday"),
        ]
        for date_str, expected in cases:
            with self.subTest(date_str=date_str):
                self.assertEqual(time_ago(date_str, now=now), expected)

    def test_humanize(self):
        self.assertEqual(humanize("go_programming"), "Go Programming")
        self.assertEqual(humanize("cloud-devops"), "Cloud Devops")
        self.assertEqual(humanize("Go"), "Go")
        self.assertEqual(humanize("backend_web_development"), "Backend Web Development")

    def test_registered_filters(self):
        for name in ("truncate_text", "format_date", "contains", "join_with", "time_ago", "humanize"):
            self.assertIn(name, TEMPLATE_FILTERS)

if __name__ == '__main__':
    unittest.main(verbosity=2)
