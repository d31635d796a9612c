"""Helpers for rewriting relative markdown links to site document URLs."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from docs_site._constants import DOCS_HREF_PREFIX

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

MARKDOWN_LINK_SUFFIX = ".md"


class DocLinkExtension(Extension):
    """Rewrite relative ``.md`` links to ``/docs/<slug>`` URLs.

    Insert this extension into a ``markdown.Markdown`` instance to ensure that
    links between source documents (``./start-install.md``,
    ``../api/api-quick-reference.md#props``) point at the rendered pages
    instead of the Markdown files they were written against.
    """

    def __init__(self, base_slug: str) -> None:
        super().__init__()
        self.base_dir = posixpath.dirname(base_slug)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the document-link treeprocessor on the Markdown instance."""
        processor = DocLinkTreeprocessor(md, self.base_dir)
        md.treeprocessors.register(processor, "docs_site_doc_links", 15)


class DocLinkTreeprocessor(Treeprocessor):
    """Rewrite relative markdown links to point at rendered document pages."""

    def __init__(self, md: Markdown, base_dir: str) -> None:
        super().__init__(md)
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree to site URLs."""
        for element in root.iter("a"):
            rewritten = self._rewrite(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the site URL for a relative ``.md`` link, else ``None``."""
        if not target or target.startswith(("#", "/", "//")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc:
            return None
        if not parsed.path.endswith(MARKDOWN_LINK_SUFFIX):
            return None

        joined = posixpath.normpath(posixpath.join(self.base_dir, parsed.path))
        while joined.startswith("../"):
            joined = joined[3:]
        slug = joined.removesuffix(MARKDOWN_LINK_SUFFIX)
        if slug in (".", ""):
            return None

        url = f"{DOCS_HREF_PREFIX}{slug}"
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


__all__ = ["DocLinkExtension", "DocLinkTreeprocessor"]
