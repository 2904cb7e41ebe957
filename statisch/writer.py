"""Write a rendered start page and its assets into an output directory.

The writer is the only part of statisch that touches user storage on the way
out. It checks the target directory and every source asset first, renders all
text in memory, and only then writes, so a failed run leaves no half-written
page behind.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

from ._constants import INDEX_NAME
from .config import StatischError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .renderer import PageRenderer

logger = logging.getLogger(__name__)


class OutputTargetError(StatischError):
    """Raised when the output directory or an asset copy is unusable."""


class SiteWriter:
    """Persist the artefacts produced by a :class:`PageRenderer`."""

    def __init__(self, renderer: PageRenderer) -> None:
        self.renderer = renderer

    def run(self, output_dir: Path) -> list[Path]:
        """Write ``index.html``, the stylesheet, favicon and font.

        Parameters
        ----------
        output_dir : Path
            Existing directory receiving the artefacts.

        Returns
        -------
        list[Path]
            Written files, in write order.

        Raises
        ------
        OutputTargetError
            If ``output_dir`` is not an existing directory, a configured asset
            is not a readable file, or a write fails.
        FontFormatError
            If the configured font has an unsupported extension.
        """
        if not output_dir.is_dir():
            msg = f"Target directory '{output_dir}' is not a directory or does not exist."
            raise OutputTargetError(msg)
        copies = self._planned_copies(output_dir)
        html = self.renderer.render()
        stylesheet = self.renderer.stylesheet()

        written = [
            self._write_text(output_dir / INDEX_NAME, html),
            self._write_text(output_dir / self.renderer.stylesheet_name, stylesheet),
        ]
        for source, destination in copies:
            written.append(self._copy(source, destination))
        return written

    def _planned_copies(self, output_dir: Path) -> list[tuple[Path, Path]]:
        """Return ``(source, destination)`` pairs after checking the sources."""
        copies: list[tuple[Path, Path]] = []
        if self.renderer.favicon is not None:
            copies.append(
                (self.renderer.favicon, output_dir / self.renderer.favicon_name)
            )
        font_name = self.renderer.font_name
        if self.renderer.font is not None and font_name is not None:
            copies.append((self.renderer.font, output_dir / font_name))
        for source, _destination in copies:
            _check_readable(source)
        return copies

    @staticmethod
    def _write_text(path: Path, content: str) -> Path:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            msg = f"Failed to write '{path}': {exc}"
            raise OutputTargetError(msg) from exc
        logger.debug("Wrote %s (%d characters)", path, len(content))
        return path

    @staticmethod
    def _copy(source: Path, destination: Path) -> Path:
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            msg = f"Failed to copy '{source}' to '{destination}': {exc}"
            raise OutputTargetError(msg) from exc
        logger.debug("Copied %s to %s", source, destination)
        return destination


def _check_readable(source: Path) -> None:
    """Fail unless ``source`` is a regular file that can be opened for reading."""
    if not source.is_file():
        msg = f"Asset '{source}' does not exist or is not a file."
        raise OutputTargetError(msg)
    try:
        with source.open("rb"):
            pass
    except OSError as exc:
        msg = f"Asset '{source}' cannot be read: {exc}"
        raise OutputTargetError(msg) from exc


__all__ = ["OutputTargetError", "SiteWriter"]
