# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
import re
from datetime import datetime
from typing import Any, Callable, Dict, List

import yaml

from . import markdown
from ..errors import RenderError
from .meta import MetaKind, MetaValue

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

def local_midnight(year: int, month: int, day: int) -> datetime:
    """Midnight of the given day in the local time zone."""
    return datetime(year, month, day).astimezone()

class Post:
    """A rendered blog post.

    ``content`` holds the rendered HTML, ``source`` the markdown it was rendered
    from and ``metadata`` the decoded frontmatter. The display fields (title,
    date, description, tags) are derived every time they are asked for; a
    missing or malformed field falls back instead of raising.
    """
    slug: str
    content: bytes
    source: bytes
    metadata: Dict[str, Any]

    def __init__(self, slug: str, content: bytes, metadata: Dict[str, Any] | None = None,
                 source: bytes = b"", clock: Callable[[], datetime] | None = None):
        self.slug = slug
        self.content = content
        self.source = source
        self.metadata = metadata if metadata is not None else {}
        self._clock = clock or datetime.now

    def title(self) -> str:
        """Title from the frontmatter, or the first level-1 heading of the post."""
        title = MetaValue.lookup(self.metadata, "title").text()
        if title:
            return title
        return self._first_text("h1", markdown.MARKDOWN)

    def date(self) -> datetime:
        """Publication date at local midnight, or today when the frontmatter has none."""
        value = MetaValue.lookup(self.metadata, "date")

        if value.kind is MetaKind.STRING and value.value:
            if _DATE_RE.fullmatch(value.value):
                try:
                    parsed = datetime.strptime(value.value, DATE_FORMAT)
                    return local_midnight(parsed.year, parsed.month, parsed.day)
                except ValueError:
                    pass
            logger.debug(f"Post {self.slug} has an unparseable date {value.value!r}; using today")
        elif value.kind is MetaKind.DATE:
            return local_midnight(value.value.year, value.value.month, value.value.day)

        today = self._clock()
        return local_midnight(today.year, today.month, today.day)

    def description(self) -> str:
        """Description from the frontmatter, or the lead paragraph of the post."""
        description = MetaValue.lookup(self.metadata, "description").text()
        if description:
            return description
        return self._first_text("p", markdown.PLAIN_MARKDOWN)

    def tags(self) -> List[str]:
        """Tags from the frontmatter. Always a list, possibly empty."""
        value = MetaValue.lookup(self.metadata, "tags")

        if value.kind is MetaKind.SEQUENCE:
            if all(isinstance(tag, str) for tag in value.value):
                return list(value.value)
            tags = [tag for tag in value.value if isinstance(tag, str)]
            if tags:
                return tags
            return []

        if value.kind is MetaKind.STRING:
            # e.g. tags: "[go, python]"; BaseLoader keeps scalars as written, so "[1, true]" -> ["1", "true"]
            if not value.value:
                return []
            try:
                decoded = yaml.load(value.value, Loader=yaml.BaseLoader)
            except yaml.YAMLError:
                return []
            if not isinstance(decoded, list) or not all(isinstance(tag, str) for tag in decoded):
                return []
            return decoded

        return []

    def to_dict(self, include_content: bool = True) -> Dict[str, Any]:
        result = {
            "slug": self.slug,
            "title": self.title(),
            "description": self.description(),
            "date": self.date().isoformat(),
            "tags": self.tags(),
        }
        if include_content:
            result["content"] = self.content.decode("utf-8")
        return result

    def _first_text(self, tag: str, config: markdown.MarkdownConfig) -> str:
        try:
            root = markdown.parse(self.source, config)
        except RenderError as e:
            logger.warning(f"Could not parse post {self.slug} for <{tag}> text: {e}")
            return ""
        element = markdown.first_element(root, tag)
        if element is None:
            return ""
        return markdown.direct_text(element)

    def __repr__(self):
        return f"<Post slug=\"{self.slug}\" metadataKeys={len(self.metadata)} contentBytes={len(self.content)}>"
