"""Cyclopts CLI entrypoint for rendering a statisch start page.

The ``statisch`` console script defined here loads the YAML configuration,
renders the page, and either dumps the HTML to stdout or writes ``index.html``,
``style.css`` and the optional favicon and font into an existing directory.
Every option can also be supplied through a ``STATISCH_``-prefixed environment
variable (for example ``STATISCH_CONFIG``).

Examples
--------
Preview the markup for a configuration:

>>> from statisch.cli import main
>>> main(["--config", "statisch.yaml", "--dump-html"])  # doctest: +SKIP

Write the site into ``public``:

>>> main(["-c", "statisch.yaml", "-o", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import StatischError, load_config_file
from .renderer import PageRenderer
from .writer import SiteWriter

app = App(
    name="statisch",
    help="A statically generated start page for your server.",
    config=cyclopts.config.Env("STATISCH_", command=False),  # type: ignore[unknown-argument]
)


class UsageError(StatischError):
    """Raised when the command line does not select exactly one output mode."""


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.default
def build(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(name=["--config", "-c"], help="Configuration to use"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(
            name=["--output-dir", "-o"], help="Directory to output the content to"
        ),
    ] = None,
    dump_html: typ.Annotated[
        bool, Parameter(help="Dump the html to stdout", negative=())
    ] = False,
    verbose: typ.Annotated[
        bool, Parameter(name=["--verbose", "-v"], help="Log debug output", negative=())
    ] = False,
) -> None:
    """Render the start page described by ``config``.

    Parameters
    ----------
    config : Path or None, optional
        YAML configuration file; the built-in defaults are used when omitted.
    output_dir : Path or None, optional
        Existing directory receiving ``index.html``, ``style.css`` and the
        optional favicon and font.
    dump_html : bool, optional
        Print the rendered HTML to stdout instead of writing files.
    verbose : bool, optional
        Emit debug logging on stderr.

    Raises
    ------
    UsageError
        If neither or both of ``dump_html`` and ``output_dir`` are given.
    StatischError
        If the configuration, the font, or the output target is invalid.
    """
    _configure_logging(verbose=verbose)
    if dump_html == (output_dir is not None):
        msg = "Select exactly one export mode: --dump-html or --output-dir."
        raise UsageError(msg)

    renderer = PageRenderer(load_config_file(config))
    if output_dir is None:
        print(renderer.render(), end="")
        return

    for path in SiteWriter(renderer).run(output_dir):
        print(f"wrote {_format_path(path)}")


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``statisch`` command.

    Parameters
    ----------
    argv : list[str] or None, optional
        Arguments to parse; ``sys.argv[1:]`` when ``None``.

    Raises
    ------
    SystemExit
        With status 1 after printing ``error: <message>`` to stderr when the
        run fails with a :class:`StatischError`.
    """
    try:
        app(argv)
    except StatischError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
