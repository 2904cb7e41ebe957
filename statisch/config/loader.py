"""Load the page configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from statisch._constants import DEFAULT_ICON, DEFAULT_TARGET, DEFAULT_TITLE
from statisch.themes import Theme

from .helpers import (
    _optional_list,
    _optional_path,
    _optional_str,
    _require_mapping,
    _require_str,
)
from .models import Application, Bookmark, BookmarkSection, Config, ConfigParseError

logger = logging.getLogger(__name__)


def load_config_file(path: Path | None) -> Config:
    """Read the configuration file at ``path`` and parse it.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration. ``None`` yields the
        all-defaults :class:`Config`.

    Returns
    -------
    Config
        Parsed, default-filled configuration.

    Raises
    ------
    ConfigParseError
        If the file does not exist, cannot be read, or does not describe a
        valid configuration.
    """
    if path is None:
        return Config()
    if not path.is_file():
        msg = f"Configuration file '{path}' not found."
        raise ConfigParseError(msg)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Could not read configuration file '{path}': {exc}"
        raise ConfigParseError(msg) from exc
    logger.debug("Loading configuration from %s", path)
    return load_config(text)


def load_config(source: str | None) -> Config:
    """Parse a YAML configuration document.

    Parameters
    ----------
    source : str or None
        Raw YAML text. ``None`` or an empty document yields the all-defaults
        :class:`Config`.

    Returns
    -------
    Config
        Configuration with every absent key resolved to its default. Unknown
        keys are ignored.

    Raises
    ------
    ConfigParseError
        If the YAML is malformed, the top level is not a mapping, a required
        key is missing, or a value has the wrong type.

    Examples
    --------
    >>> load_config("title: Home").title
    'Home'
    >>> load_config(None) == Config()
    True
    """
    if source is None:
        return Config()
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(source)
    except YAMLError as exc:
        msg = f"Failed to parse the configuration: {exc}"
        raise ConfigParseError(msg) from exc
    if loaded is None:
        return Config()
    raw = _require_mapping(loaded, "<document>")

    config = Config(
        title=_optional_str(raw, "title", "", default=DEFAULT_TITLE),
        theme=_build_theme(raw.get("theme")),
        font=_optional_path(raw, "font"),
        applications=tuple(
            _build_application(entry, index)
            for index, entry in enumerate(_optional_list(raw, "applications"))
        ),
        bookmarks=tuple(
            _build_bookmark_section(entry, index)
            for index, entry in enumerate(_optional_list(raw, "bookmarks"))
        ),
        favicon=_optional_path(raw, "favicon"),
    )
    logger.debug(
        "Loaded configuration with %d applications and %d bookmark sections",
        len(config.applications),
        len(config.bookmarks),
    )
    return config


def _build_theme(value: object) -> Theme:
    """Resolve the ``theme`` key into a :class:`Theme` variant."""
    match value:
        case None:
            return Theme.GRUVBOX
        case str() as name:
            pass
        case _:
            msg = "'theme' must be a string."
            raise ConfigParseError(msg)
    try:
        return Theme(name)
    except ValueError as exc:
        known = ", ".join(Theme.names())
        msg = f"Unknown theme '{name}'. Known themes: {known}"
        raise ConfigParseError(msg) from exc


def _build_application(entry: object, index: int) -> Application:
    """Build one application row from its mapping."""
    where = f"applications[{index}]"
    payload = _require_mapping(entry, where)
    return Application(
        name=_require_str(payload, "name", where),
        link=_require_str(payload, "link", where),
        icon=_optional_str(payload, "icon", where, default=DEFAULT_ICON),
        target=_optional_str(payload, "target", where, default=DEFAULT_TARGET),
    )


def _build_bookmark_section(entry: object, index: int) -> BookmarkSection:
    """Build a bookmark column and its marks from a mapping."""
    where = f"bookmarks[{index}]"
    payload = _require_mapping(entry, where)
    marks = payload.get("marks")
    match marks:
        case None:
            items: list[typ.Any] = []
        case list():
            items = marks
        case _:
            msg = f"'{where}.marks' must be a list."
            raise ConfigParseError(msg)
    return BookmarkSection(
        name=_require_str(payload, "name", where),
        marks=tuple(
            _build_bookmark(mark, f"{where}.marks[{position}]")
            for position, mark in enumerate(items)
        ),
    )


def _build_bookmark(entry: object, where: str) -> Bookmark:
    """Build a single bookmark link from a mapping."""
    payload = _require_mapping(entry, where)
    return Bookmark(
        name=_require_str(payload, "name", where),
        link=_require_str(payload, "link", where),
        target=_optional_str(payload, "target", where, default=DEFAULT_TARGET),
    )


__all__ = ["load_config", "load_config_file"]
