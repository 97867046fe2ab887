#!/usr/bin/env python3
"""
Unit tests for frontmatter extraction.
"""

import unittest

import yaml

from portfolio.assets.frontmatter import extract
from portfolio.errors import FrontmatterParseError

class TestExtract(unittest.TestCase):
    """Test cases for splitting frontmatter from content."""

    def test_no_frontmatter(self):
        """Documents without a leading delimiter come back unchanged."""
        for document in (b"", b"# Hello\n\nBody\n", b"  ---\ntitle: x\n---\n", b"Intro\n---\nMore\n"):
            metadata, content = extract(document)
            self.assertEqual(metadata, {})
            self.assertEqual(content, document)

    def test_unclosed_frontmatter(self):
        """A missing closing fence is not an error; the whole document is content."""
        document = b"---\ntitle: Unclosed\n# Body\n"
        metadata, content = extract(document)
        self.assertEqual(metadata, {})
        self.assertEqual(content, document)

    def test_well_formed_frontmatter(self):
        """Metadata matches decoding the isolated block directly."""
        block = b'title: "Welcome"\ndate: "2025-11-17"\ntags:\n  - a\n  - b\n'
        document = b"---\n" + block + b"---\n# Body\n\nText\n"

        metadata, content = extract(document)

        self.assertEqual(metadata, yaml.safe_load(block))
        self.assertEqual(content, b"# Body\n\nText\n")

    def test_splits_on_first_separator(self):
        """Later horizontal rules stay in the content."""
        document = b"---\ntitle: x\n---\nabove\n---\nbelow\n"
        metadata, content = extract(document)
        self.assertEqual(metadata, {"title": "x"})
        self.assertEqual(content, b"above\n---\nbelow\n")

    def test_empty_block(self):
        """An empty frontmatter block decodes to an empty mapping."""
        metadata, content = extract(b"---\n\n---\nbody")
        self.assertEqual(metadata, {})
        self.assertEqual(content, b"body")

    def test_preserves_key_order(self):
        metadata, _ = extract(b"---\nzeta: 1\nalpha: 2\nmid: 3\n---\n")
        self.assertEqual(list(metadata), ["zeta", "alpha", "mid"])

    def test_invalid_yaml(self):
        """A block that is not valid YAML raises FrontmatterParseError."""
        with self.assertRaises(FrontmatterParseError):
            extract(b"---\ntitle: [unclosed\n---\nbody\n")

    def test_non_mapping_block(self):
        """A block that decodes to a list is rejected."""
        with self.assertRaises(FrontmatterParseError):
            extract(b"---\n- a\n- b\n---\nbody\n")

if __name__ == '__main__':
    unittest.main(verbosity=2)
