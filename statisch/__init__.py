"""Render a personal start page from a YAML configuration.

This package exposes the CLI entry points used by the ``statisch`` console
script together with the configuration loader and renderer they wire up.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``load_config`` / ``load_config_file``: Parse a configuration document.
- ``PageRenderer``: Produce the page markup and stylesheet.

Examples
--------
>>> from statisch import PageRenderer, load_config
>>> PageRenderer(load_config(None)).stylesheet_name
'style.css'
>>> from statisch import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main
from .config import load_config, load_config_file
from .renderer import PageRenderer

__all__ = ["PageRenderer", "app", "load_config", "load_config_file", "main"]
