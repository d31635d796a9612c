"""Group classified documents into ordered navigation trees.

Three builders share one pattern: filter the store by a top-level segment
(``docs``, ``api``, ``codelabs``), strip it, group, and order. Each builder is
a pure function of the store and the static tables in
:mod:`docs_site.navigation.rules`.

Example
-------
>>> from docs_site.store import DocumentStore
>>> from docs_site.navigation.builder import build_codelabs_navigation
>>> store = DocumentStore.from_mapping(
...     {
...         "codelabs/getting_started/2-second": {},
...         "codelabs/getting_started/10-tenth": {},
...         "codelabs/getting_started/1-first": {},
...     }
... )
>>> [item.title for item in build_codelabs_navigation(store)[0].items]
['First', 'Second', 'Tenth']
"""

from __future__ import annotations

import re
import typing as typ

from docs_site._constants import (
    API_SEGMENT,
    CODELABS_SEGMENT,
    DEFAULT_ORDER,
    DOCS_HREF_PREFIX,
    DOCS_SEGMENT,
)
from docs_site.titles import resolve_title

from .classifier import classify
from .models import NavItem, NavSection, SiteNavigation
from .rules import (
    API_SECTION_ORDER,
    API_SECTION_TITLE,
    API_SECTIONS,
    CATEGORIES_BY_KEY,
    CODELABS_SECTIONS,
    GENERAL_CODELAB_GROUP,
)

if typ.TYPE_CHECKING:
    from docs_site.store import Document, DocumentStore

NUMERIC_ORDER_PATTERN = re.compile(r"^(\d+)-")
WORD_START_PATTERN = re.compile(r"\b\w")


def document_href(document: Document) -> str:
    """Return the site URL of ``document``."""
    return f"{DOCS_HREF_PREFIX}{document.slug}"


def _relative_name(document: Document, segment: str) -> str:
    return document.slug.removeprefix(f"{segment}/")


def _sort_sections(sections: list[NavSection]) -> tuple[NavSection, ...]:
    return tuple(sorted(sections, key=lambda section: section.order))


def _title_sort_key(item: NavItem) -> tuple[str, str]:
    return (item.title.casefold(), item.title)


def _order_sort_key(item: NavItem) -> int:
    return item.order


def build_docs_navigation(store: DocumentStore) -> tuple[NavSection, ...]:
    """Build the general docs tree grouped by category.

    Parameters
    ----------
    store : DocumentStore
        Loaded documents; only those under ``docs/`` are considered.

    Returns
    -------
    tuple[NavSection, ...]
        One section per category that has documents, ordered by the category
        table. Items inside a section are sorted alphabetically by title.
    """
    grouped: dict[str, list[NavItem]] = {}
    for document in store.filter_by_prefix(DOCS_SEGMENT):
        key = classify(_relative_name(document, DOCS_SEGMENT))
        grouped.setdefault(key, []).append(
            NavItem(title=resolve_title(document), href=document_href(document))
        )

    sections: list[NavSection] = []
    for key, items in grouped.items():
        rule = CATEGORIES_BY_KEY.get(key)
        sections.append(
            NavSection(
                title=rule.title if rule else key,
                order=rule.order if rule else DEFAULT_ORDER,
                items=tuple(sorted(items, key=_title_sort_key)),
            )
        )
    return _sort_sections(sections)


def build_api_navigation(store: DocumentStore) -> tuple[NavSection, ...]:
    """Build the single-section API reference tree.

    Known API pages take their title and order from ``API_SECTIONS``; others
    fall back to :func:`~docs_site.titles.resolve_title` and the sentinel
    order, so they sort last.
    """
    items: list[NavItem] = []
    for document in store.filter_by_prefix(API_SEGMENT):
        info = API_SECTIONS.get(_relative_name(document, API_SEGMENT))
        items.append(
            NavItem(
                title=info.title if info else resolve_title(document),
                href=document_href(document),
                order=info.order if info else DEFAULT_ORDER,
            )
        )
    section = NavSection(
        title=API_SECTION_TITLE,
        order=API_SECTION_ORDER,
        items=tuple(sorted(items, key=_order_sort_key)),
    )
    return (section,)


def extract_order(filename: str) -> int:
    """Return the leading ``N-`` number of ``filename`` or the sentinel order."""
    match = NUMERIC_ORDER_PATTERN.match(filename)
    return int(match.group(1)) if match else DEFAULT_ORDER


def codelab_group_title(key: str) -> str:
    """Return a display title for a codelab directory name."""
    return WORD_START_PATTERN.sub(
        lambda match: match.group(0).upper(), key.replace("_", " ")
    )


def build_codelabs_navigation(store: DocumentStore) -> tuple[NavSection, ...]:
    """Build the codelabs tree grouped by first directory.

    Documents nested at least two levels below ``codelabs/`` group under their
    first directory and sort by the numeric prefix of their filename.
    Top-level codelab files fall into the ``general`` group with the sentinel
    order.
    """
    grouped: dict[str, list[NavItem]] = {}
    for document in store.filter_by_prefix(CODELABS_SEGMENT):
        parts = _relative_name(document, CODELABS_SEGMENT).split("/")
        if len(parts) >= 2:
            key = parts[0]
            order = extract_order(parts[-1])
        else:
            key = GENERAL_CODELAB_GROUP
            order = DEFAULT_ORDER
        grouped.setdefault(key, []).append(
            NavItem(
                title=resolve_title(document),
                href=document_href(document),
                order=order,
            )
        )

    sections: list[NavSection] = []
    for key, items in grouped.items():
        info = CODELABS_SECTIONS.get(key)
        sections.append(
            NavSection(
                title=info.title if info else codelab_group_title(key),
                order=info.order if info else DEFAULT_ORDER,
                items=tuple(sorted(items, key=_order_sort_key)),
            )
        )
    return _sort_sections(sections)


def build_navigation(store: DocumentStore) -> SiteNavigation:
    """Build all three navigation trees for ``store``."""
    return SiteNavigation(
        docs=build_docs_navigation(store),
        api=build_api_navigation(store),
        codelabs=build_codelabs_navigation(store),
    )


__all__ = [
    "build_api_navigation",
    "build_codelabs_navigation",
    "build_docs_navigation",
    "build_navigation",
    "codelab_group_title",
    "document_href",
    "extract_order",
]
