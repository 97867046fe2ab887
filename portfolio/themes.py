# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from pathlib import Path
from typing import Iterable, List

from flask import current_app, request

logger = logging.getLogger(__name__)

THEME_COOKIE = "theme"
SHARED_TEMPLATES = "_shared"

class ThemeManager:
    """Knows which themes exist and which template files make up a theme.

    Themes live in ``templates/<theme>/``. A theme may leave out any template;
    the copy in ``templates/_shared/`` is used instead.
    """

    def __init__(self, default_theme: str, valid_themes: Iterable[str]):
        self.valid_themes = frozenset(valid_themes)
        if default_theme not in self.valid_themes:
            raise ValueError(f"Unknown default theme: {default_theme}")
        self.default_theme = default_theme

    @classmethod
    def discover(cls, templates_dir: str | Path, default_theme: str) -> "ThemeManager":
        """Build a ThemeManager from the theme directories under ``templates_dir``."""
        themes = [
            entry.name for entry in Path(templates_dir).iterdir()
            if entry.is_dir() and not entry.name.startswith("_")
        ]
        logger.debug(f"Discovered themes: {', '.join(sorted(themes))}")
        return cls(default_theme, themes)

    def is_valid(self, theme: str | None) -> bool:
        return theme in self.valid_themes

    def resolve(self, theme: str | None) -> str:
        """``theme`` if it exists, otherwise the default theme."""
        if self.is_valid(theme):
            return theme  # pyright: ignore[reportReturnType]
        return self.default_theme

    def template(self, theme: str, name: str) -> List[str]:
        """Candidate template paths for ``name``, most specific first."""
        return [f"{self.resolve(theme)}/{name}.html", f"{SHARED_TEMPLATES}/{name}.html"]

    def themes(self) -> List[str]:
        return sorted(self.valid_themes)

def current_theme_manager() -> ThemeManager:
    return current_app.extensions["theme_manager"]

def current_theme() -> str:
    """The theme chosen by the visitor's cookie, or the default."""
    return current_theme_manager().resolve(request.cookies.get(THEME_COOKIE))
