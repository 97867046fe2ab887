# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import html
import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple
from xml.etree.ElementTree import Element

import markdown
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

from ..errors import RenderError

logger = logging.getLogger(__name__)

_ENTITY_RE = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")

@dataclass(frozen=True)
class MarkdownConfig:
    """Immutable description of a markdown converter.

    Python-Markdown converters keep per-document state (the HTML stash, the
    reference table, ...), so a configuration builds a fresh converter for
    every document instead of sharing one instance between requests.
    """
    name: str
    extensions: Tuple[str, ...] = ()
    extension_configs: Mapping[str, Mapping[str, Any]] = field(default_factory=lambda: MappingProxyType({}))

    def build(self) -> markdown.Markdown:
        return markdown.Markdown(
            extensions=list(self.extensions),
            extension_configs={name: dict(conf) for name, conf in self.extension_configs.items()},
            output_format="html",
        )

# GitHub flavoured markdown with heading ids, attribute lists and hard line breaks
MARKDOWN = MarkdownConfig(
    name="gfm",
    extensions=(
        "tables",
        "fenced_code",
        "pymdownx.tilde",
        "pymdownx.magiclink",
        "pymdownx.tasklist",
        "toc",
        "attr_list",
        "nl2br",
    ),
    extension_configs=MappingProxyType({
        "pymdownx.tilde": MappingProxyType({"subscript": False}),
        "pymdownx.tasklist": MappingProxyType({"custom_checkbox": False}),
    }),
)

# No extensions at all; used to find the lead paragraph of a post
PLAIN_MARKDOWN = MarkdownConfig(name="plain")

class _TreeCapture(Treeprocessor):
    """Keeps a reference to the finished element tree of a conversion.

    Entity references are stashed like raw HTML; they are put back into the
    captured tree as the characters they stand for.
    """

    def __init__(self, md=None):
        super().__init__(md)
        self.root: Element | None = None

    def run(self, root):
        for element in root.iter():
            element.text = self._restore_entities(element.text)
            element.tail = self._restore_entities(element.tail)
        self.root = root
        return None

    def _restore_entities(self, text):
        if not text:
            return text
        return HTML_PLACEHOLDER_RE.sub(self._entity_or_placeholder, text)

    def _entity_or_placeholder(self, match):
        blocks = self.md.htmlStash.rawHtmlBlocks
        index = int(match.group(1))
        if index < len(blocks):
            stashed = blocks[index]
            if isinstance(stashed, str) and _ENTITY_RE.fullmatch(stashed):
                return html.unescape(stashed)
        return match.group(0)

def _decode(source: bytes) -> str:
    try:
        return source.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RenderError(f"markdown source is not valid UTF-8: {e}") from e

def render(source: bytes, config: MarkdownConfig = MARKDOWN) -> bytes:
    """Convert markdown bytes to an HTML fragment."""
    text = _decode(source)
    try:
        output = config.build().convert(text)
    except Exception as e:
        logger.error(f"Markdown converter '{config.name}' failed: {e}")
        raise RenderError(f"failed to render markdown: {e}") from e
    return output.encode("utf-8")

def parse(source: bytes, config: MarkdownConfig = MARKDOWN) -> Element:
    """
    Parse markdown bytes and return the document's element tree.

    The tree is captured after every tree processor (inline patterns,
    unescaping) has run, so element text is the final text of the document.
    Entity references are resolved to text; raw HTML still appears as stash
    placeholders, see ``direct_text``.
    """
    text = _decode(source)
    md = config.build()
    capture = _TreeCapture(md)
    # lowest priority runs last
    md.treeprocessors.register(capture, "capture_tree", -100)
    try:
        md.convert(text)
    except Exception as e:
        raise RenderError(f"failed to parse markdown: {e}") from e

    if capture.root is None:
        # Python-Markdown short-circuits on blank documents
        return Element("div")
    return capture.root

def direct_text(element: Element) -> str:
    """
    Concatenate the text nodes that are direct children of ``element``.

    Text nested inside child elements (emphasis, code spans, links) is not
    included. Raw HTML placeholders are dropped.
    """
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return HTML_PLACEHOLDER_RE.sub("", "".join(parts)).strip()

def is_raw_html_block(element: Element) -> bool:
    """Python-Markdown wraps raw HTML blocks in a <p> holding a single placeholder."""
    if element.tag != "p" or len(element):
        return False
    return re.fullmatch(HTML_PLACEHOLDER_RE.pattern, (element.text or "").strip()) is not None

def first_element(root: Element, tag: str) -> Element | None:
    """First element with ``tag`` in document order, skipping raw HTML blocks."""
    for element in root.iter(tag):
        if is_raw_html_block(element):
            continue
        return element
    return None
