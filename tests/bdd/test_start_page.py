"""Behaviour tests for start page section rendering.

These pytest-bdd scenarios, driven by ``features/start_page.feature``, load a
YAML configuration, render it through :class:`statisch.renderer.PageRenderer`
and inspect the markup with BeautifulSoup. They guard the user-visible promise
that entries appear in configuration order and that empty categories leave no
trace on the page.

Usage
-----
Run ``pytest tests/bdd/test_start_page.py -v``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from statisch.config import load_config
from statisch.renderer import PageRenderer

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "start_page.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return BeautifulSoup(scenario_state["html"], "html.parser")  # type: ignore[arg-type]


def _headers(soup: BeautifulSoup) -> list[str]:
    return [header.get_text(strip=True) for header in soup.find_all("h4")]


@given("a configuration with a Mail application and no bookmarks")
def given_mail_config(scenario_state: dict[str, object]) -> None:
    """Store a configuration with one application and an empty bookmark list."""
    scenario_state["source"] = """
title: Home
applications:
  - name: Mail
    link: https://mail.example
    icon: ic:baseline-mail
    target: _blank
bookmarks: []
"""


@given("a configuration with two bookmark sections")
def given_bookmark_config(scenario_state: dict[str, object]) -> None:
    """Store a configuration listing two bookmark columns and no applications."""
    scenario_state["source"] = """
bookmarks:
  - name: Zebra
    marks:
      - name: Zoo
        link: https://zoo.example
  - name: Alpha
    marks:
      - name: Archive
        link: https://archive.example
"""


@when("I render the start page")
def when_render(scenario_state: dict[str, object]) -> None:
    """Load the stored configuration and render it."""
    config = load_config(scenario_state["source"])  # type: ignore[arg-type]
    scenario_state["html"] = PageRenderer(config).render()


@then(parsers.parse('the page title is "{title}"'))
def then_title(scenario_state: dict[str, object], title: str) -> None:
    """Verify the document title."""
    soup = _soup(scenario_state)
    assert soup.title is not None, "expected a <title> element"
    assert soup.title.string == title, (
        f"expected title {title!r}, got {soup.title.string!r}"
    )


@then(parsers.parse('the Mail application links to "{href}"'))
def then_mail_link(scenario_state: dict[str, object], href: str) -> None:
    """Verify the application anchor's href, target and text."""
    anchor = _soup(scenario_state).find("a", href=href)
    assert anchor is not None, f"expected an anchor pointing at {href!r}"
    assert anchor.get_text() == "Mail"
    assert anchor["target"] == "_blank"


@then("the page has no Bookmarks header")
def then_no_bookmarks(scenario_state: dict[str, object]) -> None:
    """Verify the bookmarks category is absent."""
    soup = _soup(scenario_state)
    assert "Bookmarks" not in _headers(soup)
    assert soup.select(".bookmark-section-header") == []


@then("the page has no Applications header")
def then_no_applications(scenario_state: dict[str, object]) -> None:
    """Verify the applications category is absent."""
    soup = _soup(scenario_state)
    assert "Applications" not in _headers(soup)
    assert soup.select(".row") == []


@then("the bookmark columns appear in configuration order")
def then_bookmark_order(scenario_state: dict[str, object]) -> None:
    """Verify the columns are not re-sorted."""
    columns = _soup(scenario_state).select(".bookmark-section-header h5")
    names = [column.get_text() for column in columns]
    assert names == ["Zebra", "Alpha"], f"expected configuration order, got {names}"
