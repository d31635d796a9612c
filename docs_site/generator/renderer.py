r"""Render document bodies to HTML fragments.

:class:`MarkdownRenderer` wraps Python-Markdown with the site's extensions:
highlighted code fences with language aliases, admonition containers, tables,
sane lists, and optional rewriting of links between documents. The first
``#`` heading of a body is dropped because page templates render the title
themselves.

Example
-------
>>> from docs_site.generator.renderer import MarkdownRenderer
>>> MarkdownRenderer().render("# Title\n\nHello")
'<p>Hello</p>'
"""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown

from .containers import AdmonitionContainerExtension
from .highlighting import CodeHighlighter, HighlightedFenceExtension
from .link_rewriter import DocLinkExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

LEADING_HEADING_PATTERN = re.compile(r"\A#[ \t]+\S[^\n]*\n*")


def strip_leading_heading(text: str) -> str:
    """Remove one leading ``# heading`` line and the blank lines after it."""
    return LEADING_HEADING_PATTERN.sub("", text, count=1)


class MarkdownRenderer:
    """Render markdown and code snippets with consistent styling.

    The renderer holds configuration only. Each call builds its own
    ``Markdown`` converter, so a single instance may be shared freely.
    """

    def __init__(
        self,
        pygments_style: str = "monokai",
        language_aliases: typ.Mapping[str, str] | None = None,
    ) -> None:
        """Initialize a renderer with an optional pygments style and aliases.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"monokai"``.
        language_aliases : Mapping[str, str], optional
            Additional fence-tag aliases merged over the built-in table.
        """
        self.pygments_style = pygments_style
        self.highlighter = CodeHighlighter(pygments_style, language_aliases)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self.highlighter.stylesheet

    def render(self, body: str, *, slug: str | None = None) -> str:
        """Render a document body into an HTML fragment.

        Parameters
        ----------
        body : str
            Markdown body without front-matter.
        slug : str, optional
            Slug of the document being rendered; when given, relative ``.md``
            links are rewritten to site URLs resolved against it.

        Returns
        -------
        str
            HTML fragment without the leading top-level heading. Empty when
            the body holds nothing but that heading.
        """
        text = strip_leading_heading(body)
        if not text.strip():
            return ""
        return self._converter(slug).convert(text)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` as a standalone highlighted block."""
        return self.highlighter.render(code, language or "")

    def _converter(self, slug: str | None) -> Markdown:
        extensions: list[Extension | str] = [
            HighlightedFenceExtension(self.highlighter),
            AdmonitionContainerExtension(),
            "tables",
            "sane_lists",
        ]
        if slug is not None:
            extensions.append(DocLinkExtension(slug))
        return Markdown(extensions=extensions, output_format="html")


__all__ = ["LEADING_HEADING_PATTERN", "MarkdownRenderer", "strip_leading_heading"]
