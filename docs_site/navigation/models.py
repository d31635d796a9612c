"""Dataclasses shared by the classifier and the navigation builders."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docs_site._constants import DEFAULT_ORDER


@dc.dataclass(frozen=True, slots=True)
class CategoryRule:
    """Map a set of slug prefixes to a titled, ordered docs section.

    Attributes
    ----------
    key : str
        Stable identifier of the category (for example ``"advanced"``).
    title : str
        Section heading shown in navigation.
    order : int
        Sort position of the section; lower sorts first.
    match_prefixes : tuple[str, ...]
        A slug belongs to this category when it starts with any prefix.
    """

    key: str
    title: str
    order: int
    match_prefixes: tuple[str, ...]

    def matches(self, name: str) -> bool:
        """Return ``True`` when ``name`` starts with one of the rule prefixes."""
        return name.startswith(self.match_prefixes)


@dc.dataclass(frozen=True, slots=True)
class ClassificationOverride:
    """Reassign one exact document name to a fixed category.

    Attributes
    ----------
    name : str
        Exact docs-relative name the override applies to.
    category : str
        Category key the document is moved to.
    """

    name: str
    category: str

    def apply(self, name: str, matched: str) -> str:
        """Return ``category`` for ``name`` when it matches, else ``matched``."""
        return self.category if name == self.name else matched


@dc.dataclass(frozen=True, slots=True)
class SectionInfo:
    """Title and sort order looked up from a static section table."""

    title: str
    order: int


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """One leaf in a navigation tree."""

    title: str
    href: str
    order: int = DEFAULT_ORDER

    def to_dict(self) -> dict[str, str]:
        """Return the ``{title, href}`` pair consumed by layouts."""
        return {"title": self.title, "href": self.href}


@dc.dataclass(frozen=True, slots=True)
class NavSection:
    """An ordered group of navigation items."""

    title: str
    order: int
    items: tuple[NavItem, ...]

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the section and its items."""
        return {
            "title": self.title,
            "order": self.order,
            "items": [item.to_dict() for item in self.items],
        }


@dc.dataclass(frozen=True, slots=True)
class SiteNavigation:
    """The three independent navigation trees of the site.

    Attributes
    ----------
    docs : tuple[NavSection, ...]
        General documentation grouped by category.
    api : tuple[NavSection, ...]
        API reference (a single section).
    codelabs : tuple[NavSection, ...]
        Tutorials grouped by codelab directory.
    """

    docs: tuple[NavSection, ...]
    api: tuple[NavSection, ...]
    codelabs: tuple[NavSection, ...]

    def to_dict(self) -> dict[str, list[dict[str, typ.Any]]]:
        """Return a JSON-ready mapping keyed by tree name."""
        return {
            "docs": [section.to_dict() for section in self.docs],
            "api": [section.to_dict() for section in self.api],
            "codelabs": [section.to_dict() for section in self.codelabs],
        }


__all__ = [
    "CategoryRule",
    "ClassificationOverride",
    "NavItem",
    "NavSection",
    "SectionInfo",
    "SiteNavigation",
]
