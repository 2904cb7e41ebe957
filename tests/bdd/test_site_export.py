"""Behaviour tests for exporting a start page to disk.

The scenarios in ``features/site_export.feature`` build a configuration that
references a real font and favicon under ``tmp_path`` and export it through
the ``statisch`` command function, checking both the successful layout of the
output directory and the failure for a missing target.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from statisch import cli
from statisch.writer import OutputTargetError

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_export.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a configuration with a woff2 font and a favicon")
def given_asset_config(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write font, favicon and a configuration referencing both."""
    font = tmp_path / "Inter.woff2"
    font.write_bytes(b"wOF2-font")
    favicon = tmp_path / "site.ico"
    favicon.write_bytes(b"icon")
    config_path = tmp_path / "statisch.yaml"
    config_path.write_text(
        f"""
title: Home
font: {font}
favicon: {favicon}
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["config_path"] = config_path
    scenario_state["tmp_path"] = tmp_path


@when("I export the site to the output directory")
def when_export(scenario_state: dict[str, object]) -> None:
    """Run the CLI command against a fresh output directory."""
    output_dir = scenario_state["tmp_path"] / "public"  # type: ignore[operator]
    output_dir.mkdir()
    cli.build(config=scenario_state["config_path"], output_dir=output_dir)  # type: ignore[arg-type]
    scenario_state["output_dir"] = output_dir


@when("I export the site to a directory that does not exist")
def when_export_missing(scenario_state: dict[str, object]) -> None:
    """Run the CLI command and capture the failure."""
    output_dir = scenario_state["tmp_path"] / "missing"  # type: ignore[operator]
    try:
        cli.build(config=scenario_state["config_path"], output_dir=output_dir)  # type: ignore[arg-type]
    except OutputTargetError as exc:
        scenario_state["error"] = exc
    scenario_state["output_dir"] = output_dir


@then("the output directory holds the page, stylesheet, favicon and font")
def then_artefacts(scenario_state: dict[str, object]) -> None:
    """Verify every artefact was written under its fixed name."""
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    names = sorted(path.name for path in output_dir.iterdir())
    assert names == ["custom-font.woff2", "favicon.ico", "index.html", "style.css"]
    assert (output_dir / "custom-font.woff2").read_bytes() == b"wOF2-font"
    assert (output_dir / "favicon.ico").read_bytes() == b"icon"


@then("the stylesheet registers the custom font")
def then_font_face(scenario_state: dict[str, object]) -> None:
    """Verify the written stylesheet contains the font-face rule."""
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    css = (output_dir / "style.css").read_text(encoding="utf-8")
    assert 'src: url("custom-font.woff2") format("woff2");' in css
    assert '"custom-font", Fallback, sans-serif' in css


@then("the export fails with an output target error")
def then_export_failed(scenario_state: dict[str, object]) -> None:
    """Verify the failure and that no directory was created."""
    assert isinstance(scenario_state.get("error"), OutputTargetError)
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    assert not output_dir.exists()
