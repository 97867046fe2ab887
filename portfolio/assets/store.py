# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from pathlib import Path
from typing import List

from ..errors import NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"

class AssetStore:
    """Read-only byte store addressed by logical path, rooted at a directory."""

    def __init__(self, root: str | Path = DEFAULT_CONTENT_DIR):
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if not target.is_relative_to(self.root):
            raise NotFoundError(path, "path escapes the content root")
        return target

    def read_file(self, path: str) -> bytes:
        target = self._resolve(path)
        if not target.is_file():
            raise NotFoundError(path)
        try:
            return target.read_bytes()
        except OSError as e:
            raise NotFoundError(path, str(e)) from e

    def list_files(self, directory: str, suffix: str = "") -> List[str]:
        """Logical paths of the files directly inside ``directory``, sorted."""
        target = self._resolve(directory)
        if not target.is_dir():
            return []
        return sorted(
            f"{directory}/{entry.name}"
            for entry in target.iterdir()
            if entry.is_file() and entry.name.endswith(suffix)
        )

    def __repr__(self):
        return f"<AssetStore root=\"{self.root}\">"
