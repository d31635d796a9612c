"""Highlight fenced code blocks with Pygments and a language alias table.

Fences are pulled out of the Markdown source before block parsing, rendered
to HTML, and stashed so the converter passes them through untouched. A fence
whose language Pygments does not know, or whose lexer fails, is emitted as
escaped plain text in the same wrapper.
"""

from __future__ import annotations

import logging
import re
import types
import typing as typ
from html import escape

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown import Markdown
    from pygments.lexer import Lexer
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Lexer = typ.Any

logger = logging.getLogger(__name__)

WRAPPER_CLASS = "hljs"

LANGUAGE_ALIASES: typ.Mapping[str, str] = types.MappingProxyType(
    {
        "tsx": "xml",
        "ts": "typescript",
        "objc": "objectivec",
        "kotlin": "java",
        "vue": "xml",
        "sh": "bash",
        "shell": "bash",
    }
)

# Any indent is accepted so fences nested in list items match. A closing run
# may be longer than the opening one; a fence left open runs to the end.
FENCED_BLOCK_PATTERN = re.compile(
    r"^(?P<indent>[ ]*)(?P<fence>(?P<char>[`~])(?P=char){2,})[ \t]*"
    r"(?P<lang>[A-Za-z0-9_+#.-]*)(?P<info>[^\n]*)(?:\n|\Z)"
    r"(?P<code>.*?)"
    r"(?:(?<=\n)(?P<close>[ ]*(?P=fence)(?P=char)*)[ \t]*$|\Z)",
    re.MULTILINE | re.DOTALL,
)


class CodeHighlighter:
    """Render code snippets into ``<pre class="hljs">`` blocks.

    The class holds configuration only, so one instance can be shared by
    every render call.
    """

    def __init__(
        self,
        pygments_style: str = "monokai",
        aliases: typ.Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the highlighter.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used for :attr:`stylesheet`. Defaults to
            ``"monokai"``.
        aliases : Mapping[str, str], optional
            Extra fence-tag aliases merged over ``LANGUAGE_ALIASES``.
        """
        merged = dict(LANGUAGE_ALIASES)
        if aliases:
            merged.update(aliases)
        self.aliases: typ.Mapping[str, str] = types.MappingProxyType(merged)
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS for highlighted blocks, scoped to ``.hljs``."""
        return self._formatter.get_style_defs(f".{WRAPPER_CLASS}")

    def resolve(self, language: str) -> str:
        """Return the canonical lexer name for a fence tag."""
        return self.aliases.get(language, language)

    def lexer_for(self, language: str) -> Lexer | None:
        """Return the Pygments lexer for ``language`` or ``None`` if unknown."""
        if not language:
            return None
        try:
            return get_lexer_by_name(self.resolve(language))
        except ClassNotFound:
            return None

    def render(self, code: str, language: str = "") -> str:
        """Return ``code`` as a highlighted or escaped HTML block.

        Parameters
        ----------
        code : str
            Snippet body.
        language : str, optional
            Fence tag as written by the author. This tag, not the
            resolved alias, is used in the ``language-*`` class.

        Returns
        -------
        str
            ``<pre class="hljs"><code ...>...</code></pre>`` markup.
        """
        lexer = self.lexer_for(language)
        body = None
        if lexer is not None:
            try:
                body = highlight(code, lexer, self._formatter)
            except Exception:  # noqa: BLE001 - any lexer failure degrades to text
                logger.debug("Highlighting failed for %r", language, exc_info=True)
        if body is None:
            body = escape(code)
        return self._wrap(body, language)

    @staticmethod
    def _wrap(body: str, language: str) -> str:
        if language:
            code_open = f'<code class="language-{escape(language, quote=True)}">'
        else:
            code_open = "<code>"
        return f'<pre class="{WRAPPER_CLASS}">{code_open}{body}</code></pre>'


class HighlightedFencePreprocessor(Preprocessor):
    """Replace fenced blocks with stashed, highlighted HTML."""

    def __init__(self, md: Markdown, highlighter: CodeHighlighter) -> None:
        super().__init__(md)
        self.highlighter = highlighter

    def run(self, lines: list[str]) -> list[str]:
        """Highlight every fenced block in ``lines``."""
        text = "\n".join(lines)
        position = 0
        while match := FENCED_BLOCK_PATTERN.search(text, position):
            if match.group("char") == "`" and "`" in match.group("info"):
                # Backticks in the info string make this inline code.
                position = match.end("info")
                continue
            code = _dedent(match.group("code"), len(match.group("indent")))
            if match.group("close") is None:
                code = f"{code.rstrip()}\n" if code.strip() else ""
            html = self.highlighter.render(code, match.group("lang"))
            placeholder = self.md.htmlStash.store(html)
            replacement = f"\n{placeholder}\n"
            text = f"{text[: match.start()]}{replacement}{text[match.end() :]}"
            position = match.start() + len(replacement)
        return text.split("\n")


class HighlightedFenceExtension(Extension):
    """Register :class:`HighlightedFencePreprocessor` on a Markdown instance."""

    def __init__(self, highlighter: CodeHighlighter) -> None:
        super().__init__()
        self.highlighter = highlighter

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fence preprocessor ahead of raw HTML detection."""
        md.registerExtension(self)
        processor = HighlightedFencePreprocessor(md, self.highlighter)
        md.preprocessors.register(processor, "docs_site_fenced_code", 25)


def _dedent(code: str, width: int) -> str:
    """Strip up to ``width`` leading spaces from each line of ``code``."""
    if not width:
        return code
    pattern = re.compile(rf"^ {{0,{width}}}", re.MULTILINE)
    return pattern.sub("", code)


__all__ = [
    "FENCED_BLOCK_PATTERN",
    "LANGUAGE_ALIASES",
    "CodeHighlighter",
    "HighlightedFenceExtension",
    "HighlightedFencePreprocessor",
]
