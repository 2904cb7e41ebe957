"""Colour schemes selectable from the ``theme`` configuration key.

Each :class:`Theme` variant is bound to a CSS file bundled under
``statisch/resources/themes``. Adding a theme means adding a variant here and
dropping ``<value>.css`` next to the existing ones; call sites only ever ask a
variant for its :meth:`Theme.style_header`.

Examples
--------
>>> from statisch.themes import Theme
>>> Theme("gruvbox") is Theme.GRUVBOX
True
>>> ":root" in Theme.GRUVBOX.style_header()
True
"""

from __future__ import annotations

import enum
import functools
from pathlib import Path

RESOURCES_DIR = Path(__file__).parent / "resources"
BASE_STYLESHEET = RESOURCES_DIR / "style.css"


class Theme(enum.Enum):
    """Colour scheme applied to the generated page."""

    GRUVBOX = "gruvbox"

    @property
    def resource(self) -> Path:
        """Return the bundled stylesheet backing this theme."""
        return _THEME_RESOURCES[self]

    def style_header(self) -> str:
        """Return the theme's CSS text."""
        return _read_resource(self.resource)

    @classmethod
    def names(cls) -> list[str]:
        """Return the configuration values accepted for ``theme``."""
        return [member.value for member in cls]


_THEME_RESOURCES: dict[Theme, Path] = {
    Theme.GRUVBOX: RESOURCES_DIR / "themes" / "gruvbox.css",
}


def base_stylesheet() -> str:
    """Return the layout styles shared by every theme."""
    return _read_resource(BASE_STYLESHEET)


@functools.cache
def _read_resource(path: Path) -> str:
    return path.read_text(encoding="utf-8")


__all__ = ["BASE_STYLESHEET", "RESOURCES_DIR", "Theme", "base_stylesheet"]
