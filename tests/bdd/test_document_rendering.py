"""Behaviour tests for rendering single documents.

Usage
-----
Run ``pytest tests/bdd/test_document_rendering.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from docs_site.generator import MarkdownRenderer, load_page
from docs_site.store import DocumentNotFoundError, DocumentStore

if typ.TYPE_CHECKING:
    from docs_site.generator import PageData

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "document_rendering.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a document with a warning admonition containing shell code")
def given_warning_document(scenario_state: dict[str, object]) -> None:
    """Store a document whose body wraps a shell fence in a warning."""
    scenario_state["store"] = DocumentStore.from_mapping(
        {
            "docs/workflow-release": {
                "front_matter": {"title": "Releasing"},
                "raw_body": (
                    "# Releasing\n\n"
                    "::: Warning\n\n"
                    "Tag before publishing.\n\n"
                    "```shell\ngit tag v1.0.0\n```\n\n"
                    ":::\n"
                ),
            }
        }
    )
    scenario_state["slug"] = "docs/workflow-release"


@given("a content tree without the requested document")
def given_empty_store(scenario_state: dict[str, object]) -> None:
    """Store a single unrelated document."""
    scenario_state["store"] = DocumentStore.from_mapping({"docs/faq": {}})
    scenario_state["slug"] = "docs/missing"


@when("I render the document page")
def when_render_page(scenario_state: dict[str, object]) -> None:
    """Render the stored document into page data."""
    store = typ.cast("DocumentStore", scenario_state["store"])
    slug = typ.cast("str", scenario_state["slug"])
    scenario_state["page"] = load_page(store, MarkdownRenderer(), slug)


@when("I request the missing document")
def when_request_missing(scenario_state: dict[str, object]) -> None:
    """Attempt to load a slug the store does not hold."""
    store = typ.cast("DocumentStore", scenario_state["store"])
    slug = typ.cast("str", scenario_state["slug"])
    with pytest.raises(DocumentNotFoundError) as excinfo:
        load_page(store, MarkdownRenderer(), slug)
    scenario_state["error"] = excinfo.value


@then("the page shows a warning container with highlighted code")
def then_warning_with_code(scenario_state: dict[str, object]) -> None:
    """Verify the container, the suppressed heading, and the highlighted fence."""
    page = typ.cast("PageData", scenario_state["page"])
    assert page.title == "Releasing"
    soup = BeautifulSoup(page.content_html, "html.parser")
    assert soup.find("h1") is None, "leading heading should not be rendered"
    container = soup.select_one("div.alert.alert-warning")
    assert container is not None, "expected a warning container"
    code = container.select_one("pre.hljs code.language-shell")
    assert code is not None, "expected a shell code block inside the warning"
    assert "git tag" in code.get_text()


@then("a not found error with status 404 is raised")
def then_not_found(scenario_state: dict[str, object]) -> None:
    """Verify the error carries the slug and a 404 status."""
    error = typ.cast("DocumentNotFoundError", scenario_state["error"])
    assert error.slug == "docs/missing"
    assert error.status == 404
