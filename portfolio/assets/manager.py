# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from datetime import datetime
from typing import Callable, List

from ..errors import NotFoundError, PortfolioError
from ..models.resume import Resume
from . import frontmatter, markdown
from .post import Post
from .store import AssetStore

logger = logging.getLogger(__name__)

POSTS_DIR = "posts"
DATA_FILE = "data.yaml"

class AssetManager:
    """Loads posts and resume data out of the content bundle."""

    def __init__(self, store: AssetStore | None = None, clock: Callable[[], datetime] | None = None):
        self.store = store or AssetStore()
        self.clock = clock

    def get_post(self, slug: str) -> Post:
        """
        Retrieve a post by slug and render its markdown to HTML.
        Args:
            slug (str): The post identifier, i.e. the file name under posts/ without ".md".
        Returns:
            Post: A freshly assembled post.
        Raises:
            NotFoundError: No post exists for the slug.
            FrontmatterParseError: The post's frontmatter is not valid YAML.
            RenderError: The markdown converter failed.
        """
        path = f"{POSTS_DIR}/{slug}.md"
        if not slug or "/" in slug:
            raise NotFoundError(path, f"slug \"{slug}\" does not exist")

        data = self.store.read_file(path)
        metadata, source = frontmatter.extract(data)
        content = markdown.render(source)

        logger.debug(f"Loaded post {slug} ({len(data)} bytes, {len(metadata)} metadata keys)")
        return Post(slug=slug, content=content, metadata=metadata, source=source, clock=self.clock)

    def list_posts(self) -> List[Post]:
        """Every post in the bundle, newest first. Posts that fail to load are skipped."""
        posts = []
        for path in self.store.list_files(POSTS_DIR, suffix=".md"):
            slug = path.removeprefix(f"{POSTS_DIR}/").removesuffix(".md")
            try:
                posts.append(self.get_post(slug))
            except PortfolioError as e:
                logger.error(f"Skipping post {slug}: {e}")

        posts.sort(key=lambda post: post.slug)
        posts.sort(key=lambda post: post.date(), reverse=True)
        return posts

    def get_data(self) -> Resume:
        """Read and decode data.yaml."""
        return Resume.from_yaml(self.store.read_file(DATA_FILE))

    def __repr__(self):
        return f"<AssetManager store={self.store!r}>"
