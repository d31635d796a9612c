"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from docs_site.store import FrontMatter


@dc.dataclass(frozen=True, slots=True)
class PageData:
    """Structured data passed to the doc page template.

    Attributes
    ----------
    slug : str
        Slug of the rendered document.
    href : str
        Site URL of the page (``/docs/<slug>``).
    title : str
        Resolved display title.
    description : str | None
        Front-matter description, if any.
    content_html : str
        Rendered body without the leading heading.
    front_matter : FrontMatter
        Full document metadata for templates that need extra keys.
    """

    slug: str
    href: str
    title: str
    description: str | None
    content_html: str
    front_matter: FrontMatter


__all__ = ["PageData"]
