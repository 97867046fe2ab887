#!/usr/bin/env python3
"""
Unit tests for the markdown renderer configurations.
"""

import unittest
from unittest.mock import MagicMock, patch

from portfolio.assets import markdown
from portfolio.errors import RenderError

class TestRender(unittest.TestCase):
    """Test cases for the primary (GitHub flavoured) renderer."""

    def test_heading_ids(self):
        html = markdown.render(b"# Hello\n")
        self.assertIn(b'<h1 id="hello">Hello</h1>', html)

    def test_strikethrough(self):
        self.assertIn(b"<del>gone</del>", markdown.render(b"~~gone~~\n"))

    def test_tables(self):
        html = markdown.render(b"| a | b |\n| --- | --- |\n| 1 | 2 |\n")
        self.assertIn(b"<table>", html)
        self.assertIn(b"<td>1</td>", html)

    def test_autolinks(self):
        html = markdown.render(b"See https://example.com for more.\n")
        self.assertIn(b'href="https://example.com"', html)

    def test_task_lists(self):
        html = markdown.render(b"- [x] done\n- [ ] todo\n")
        self.assertIn(b"task-list-item", html)
        self.assertIn(b'type="checkbox"', html)

    def test_attribute_lists(self):
        html = markdown.render(b"## Section {#custom .note}\n")
        self.assertIn(b'id="custom"', html)
        self.assertIn(b'class="note"', html)

    def test_hard_line_breaks(self):
        self.assertIn(b"<br", markdown.render(b"line one\nline two\n"))

    def test_plain_has_no_extensions(self):
        html = markdown.render(b"~~gone~~\nnext line\n", markdown.PLAIN_MARKDOWN)
        self.assertNotIn(b"<del>", html)
        self.assertNotIn(b"<br", html)

    def test_configs_are_distinct(self):
        self.assertIsNot(markdown.MARKDOWN, markdown.PLAIN_MARKDOWN)
        self.assertEqual(markdown.PLAIN_MARKDOWN.extensions, ())

    def test_fresh_converter_per_call(self):
        """Reference links from one document do not leak into the next."""
        markdown.render(b"[link][ref]\n\n[ref]: https://example.com\n")
        html = markdown.render(b"[link][ref]\n")
        self.assertNotIn(b"https://example.com", html)

    def test_invalid_utf8(self):
        with self.assertRaises(RenderError):
            markdown.render(b"\xff\xfe broken")

    def test_converter_failure(self):
        converter = MagicMock()
        converter.convert.side_effect = RuntimeError("boom")
        with patch.object(markdown.MarkdownConfig, "build", return_value=converter):
            with self.assertRaises(RenderError):
                markdown.render(b"# Hello\n")

class TestParse(unittest.TestCase):
    """Test cases for element tree access."""

    def test_blank_document(self):
        root = markdown.parse(b"   \n")
        self.assertEqual(len(root), 0)

    def test_first_element_in_document_order(self):
        root = markdown.parse(b"## Sub\n\n# First\n\n# Second\n")
        self.assertEqual(markdown.direct_text(markdown.first_element(root, "h1")), "First")

    def test_first_element_missing(self):
        root = markdown.parse(b"Just text\n")
        self.assertIsNone(markdown.first_element(root, "h1"))

    def test_direct_text_skips_nested_text(self):
        root = markdown.parse(b"# Hello *world*\n")
        self.assertEqual(markdown.direct_text(markdown.first_element(root, "h1")), "Hello")

    def test_direct_text_resolves_entities(self):
        root = markdown.parse(b"# Tom &amp; Jerry &#169; &#x41;\n")
        self.assertEqual(markdown.direct_text(markdown.first_element(root, "h1")), "Tom & Jerry © A")

    def test_direct_text_drops_inline_tags(self):
        root = markdown.parse(b"Hello <br>\n", markdown.PLAIN_MARKDOWN)
        self.assertEqual(markdown.direct_text(markdown.first_element(root, "p")), "Hello")

    def test_entities_stay_escaped_in_rendered_html(self):
        self.assertIn(b"Tom &amp; Jerry", markdown.render(b"# Tom &amp; Jerry\n"))

    def test_raw_html_blocks_are_not_paragraphs(self):
        root = markdown.parse(b"<div>intro</div>\n\nReal paragraph.\n", markdown.PLAIN_MARKDOWN)
        self.assertEqual(markdown.direct_text(markdown.first_element(root, "p")), "Real paragraph.")

if __name__ == '__main__':
    unittest.main(verbosity=2)
