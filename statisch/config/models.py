"""Typed dataclasses describing the statisch page configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from statisch._constants import DEFAULT_ICON, DEFAULT_TARGET, DEFAULT_TITLE
from statisch.themes import Theme

FONT_FORMATS: dict[str, str] = {
    "ttf": "truetype",
    "woff": "woff",
    "woff2": "woff2",
    "eot": "embedded-opentype",
}


class StatischError(ValueError):
    """Base class for every failure statisch reports to the user."""


class ConfigParseError(StatischError):
    """Raised when the configuration document is missing or invalid."""


class FontFormatError(StatischError):
    """Raised when the configured font has no usable file extension."""


@dc.dataclass(frozen=True, slots=True)
class Application:
    """One entry in the applications grid."""

    name: str
    link: str
    icon: str = DEFAULT_ICON
    target: str = DEFAULT_TARGET


@dc.dataclass(frozen=True, slots=True)
class Bookmark:
    """A single link inside a bookmark section."""

    name: str
    link: str
    target: str = DEFAULT_TARGET


@dc.dataclass(frozen=True, slots=True)
class BookmarkSection:
    """Named group of bookmarks rendered as one column."""

    name: str
    marks: tuple[Bookmark, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Config:
    """Global configuration of the page.

    Attributes
    ----------
    title : str
        Page title, defaults to ``Statisch``.
    theme : Theme
        Colour scheme, defaults to :attr:`Theme.GRUVBOX`.
    font : Path or None
        Custom font copied next to the page and applied to the body.
    applications : tuple[Application, ...]
        Rows of the applications grid, in display order.
    bookmarks : tuple[BookmarkSection, ...]
        Bookmark columns, in display order.
    favicon : Path or None
        Icon copied verbatim to ``favicon.ico``.
    """

    title: str = DEFAULT_TITLE
    theme: Theme = Theme.GRUVBOX
    font: Path | None = None
    applications: tuple[Application, ...] = ()
    bookmarks: tuple[BookmarkSection, ...] = ()
    favicon: Path | None = None

    def font_extension(self) -> str | None:
        """Return the font's file extension without the leading dot.

        Raises
        ------
        FontFormatError
            If a font is configured but its path has no extension.
        """
        if self.font is None:
            return None
        extension = self.font.suffix.removeprefix(".")
        if not extension:
            msg = f"Font '{self.font}' does not have a file extension."
            raise FontFormatError(msg)
        return extension

    def font_format(self) -> str | None:
        """Translate the font extension into a CSS ``format()`` token.

        Returns
        -------
        str or None
            ``truetype``, ``woff``, ``woff2`` or ``embedded-opentype``; ``None``
            when no font is configured.

        Raises
        ------
        FontFormatError
            If the extension is missing or not one of ``ttf``, ``woff``,
            ``woff2`` and ``eot``.

        Examples
        --------
        >>> Config(font=Path("fonts/Inter.woff2")).font_format()
        'woff2'
        >>> Config().font_format() is None
        True
        """
        extension = self.font_extension()
        if extension is None:
            return None
        try:
            return FONT_FORMATS[extension]
        except KeyError as exc:
            supported = ", ".join(FONT_FORMATS)
            msg = (
                f"Invalid font format '{extension}' for '{self.font}'. "
                f"Supported extensions: {supported}"
            )
            raise FontFormatError(msg) from exc

    def style_header(self) -> str:
        """Return the CSS text of the selected theme."""
        return self.theme.style_header()


__all__ = [
    "FONT_FORMATS",
    "Application",
    "Bookmark",
    "BookmarkSection",
    "Config",
    "ConfigParseError",
    "FontFormatError",
    "StatischError",
]
