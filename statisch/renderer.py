"""Statisch page rendering pipeline.

This module turns a loaded :class:`~statisch.config.Config` into the two text
artefacts of a start page: the ``index.html`` markup and the composed
``style.css`` stylesheet. It also owns the naming rules for the optional font
and favicon assets that :mod:`statisch.writer` copies next to the page.

The renderer never touches the user's files. It reads only the Jinja template
and CSS resources bundled with the package, and every method is a pure
function of the configuration it was built from:

>>> from statisch.config import load_config
>>> renderer = PageRenderer(load_config("title: Home"))
>>> "<title>Home</title>" in renderer.render()
True
>>> renderer.font_face_block()
''
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import (
    FAVICON_NAME,
    FONT_FAMILY,
    FONT_NAME_TEMPLATE,
    ICONIFY_SCRIPT_URL,
    STYLESHEET_NAME,
)
from .themes import base_stylesheet

if typ.TYPE_CHECKING:
    from .config import Config

FONT_FACE_TEMPLATE = """@font-face {{
    font-family: "{family}";
    src: url("{source}") format("{format}");
}}

body {{
    font-family: "{family}", Fallback, sans-serif;
}}"""


class PageRenderer:
    """Render the start page and its stylesheet from structured config data."""

    stylesheet_name = STYLESHEET_NAME
    favicon_name = FAVICON_NAME

    def __init__(self, config: Config, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and Jinja environment.

        Parameters
        ----------
        config : Config
            Parsed page configuration; never modified by the renderer.
        templates_dir : Path, optional
            Directory containing ``index.jinja``. Defaults to
            ``statisch/templates``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("index.jinja")

    @property
    def font(self) -> Path | None:
        """Return the configured font source path."""
        return self.config.font

    @property
    def favicon(self) -> Path | None:
        """Return the configured favicon source path."""
        return self.config.favicon

    @property
    def font_name(self) -> str | None:
        """Return the output file name for the copied font, if any.

        Raises
        ------
        FontFormatError
            If the configured font has no file extension.
        """
        extension = self.config.font_extension()
        if extension is None:
            return None
        return FONT_NAME_TEMPLATE.format(ext=extension)

    def render(self) -> str:
        """Render the page as a complete HTML document.

        Returns
        -------
        str
            HTML markup ending with a newline. The applications and bookmarks
            sections are omitted entirely when their lists are empty.
        """
        html = self.template.render(
            config=self.config,
            stylesheet_name=self.stylesheet_name,
            favicon_name=self.favicon_name if self.favicon else None,
            iconify_script_url=ICONIFY_SCRIPT_URL,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def font_face_block(self) -> str:
        """Return the ``@font-face`` rule for the custom font.

        Returns
        -------
        str
            The rule plus a ``body`` rule applying the font family, or an
            empty string when no font is configured.

        Raises
        ------
        FontFormatError
            If the font extension is missing or unsupported.
        """
        font_format = self.config.font_format()
        if font_format is None:
            return ""
        return FONT_FACE_TEMPLATE.format(
            family=FONT_FAMILY, source=self.font_name, format=font_format
        )

    def stylesheet(self) -> str:
        """Return theme CSS, font-face block and base CSS, newline separated."""
        return "\n".join(
            (
                self.config.style_header(),
                self.font_face_block(),
                base_stylesheet(),
            )
        )


__all__ = ["FONT_FACE_TEMPLATE", "PageRenderer"]
