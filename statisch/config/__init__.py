"""Load and validate the statisch page configuration.

This subpackage parses the user's YAML document, fills every absent key with
its documented default, and produces frozen dataclasses (:class:`Config`,
:class:`Application`, :class:`BookmarkSection`, ...) that the renderer
consumes. The entry points are :func:`load_config` for raw text and
:func:`load_config_file` for a path; both return the all-defaults
:class:`Config` when no document is given.

Examples
--------
>>> from statisch.config import load_config
>>> config = load_config('''
... title: Home
... applications:
...   - name: Mail
...     link: https://mail.example
... ''')
>>> config.applications[0].target
'_blank'
"""

from .loader import load_config, load_config_file
from .models import (
    FONT_FORMATS,
    Application,
    Bookmark,
    BookmarkSection,
    Config,
    ConfigParseError,
    FontFormatError,
    StatischError,
)

__all__ = [
    "FONT_FORMATS",
    "Application",
    "Bookmark",
    "BookmarkSection",
    "Config",
    "ConfigParseError",
    "FontFormatError",
    "StatischError",
    "load_config",
    "load_config_file",
]
