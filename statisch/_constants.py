"""Common literal values used across statisch.

These constants keep output filenames and configuration defaults centralized so
the renderer, writer, templates, and tests can import the same values without
drifting. Intended for internal use within the statisch package.

Examples
--------
>>> from statisch import _constants
>>> _constants.FONT_NAME_TEMPLATE.format(ext="woff2")
'custom-font.woff2'
>>> _constants.STYLESHEET_NAME
'style.css'
"""

DEFAULT_TITLE = "Statisch"
DEFAULT_ICON = "ic:baseline-person"
DEFAULT_TARGET = "_blank"

INDEX_NAME = "index.html"
STYLESHEET_NAME = "style.css"
FAVICON_NAME = "favicon.ico"
FONT_FAMILY = "custom-font"
FONT_NAME_TEMPLATE = FONT_FAMILY + ".{ext}"

ICONIFY_SCRIPT_URL = "https://code.iconify.design/2/2.1.0/iconify.min.js"
