r"""Admonition containers (``::: Note`` ... ``:::``) for Python-Markdown.

A container opens with three or more colons followed by a directive name and
optional parameter text, and closes with a line of three or more colons. The
enclosed content is parsed as regular Markdown inside a
``<div class="alert alert-<name>">``. Containers nest, and an opener may
follow paragraph text without a blank line.

Example
-------
>>> from markdown import markdown
>>> from docs_site.generator.containers import AdmonitionContainerExtension
>>> html = markdown(
...     "::: Note\nRead this.\n:::", extensions=[AdmonitionContainerExtension()]
... )
>>> html.startswith('<div class="alert alert-note">')
True
"""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown.blockprocessors import BlockProcessor
from markdown.extensions import Extension

if typ.TYPE_CHECKING:
    from markdown import Markdown
    from markdown.blockparser import BlockParser
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    BlockParser = typ.Any

ADMONITION_TYPES: tuple[str, ...] = ("Note", "Warning", "Tip")

CONTAINER_OPEN_PATTERN = re.compile(
    r"^[ ]{0,3}:{3,}[ \t]*(?P<params>[^\n]*?)[ \t]*$", re.MULTILINE
)
CONTAINER_CLOSE_PATTERN = re.compile(r"^[ ]{0,3}:{3,}[ \t]*$", re.MULTILINE)
LINE_PATTERN = re.compile(r"^[^\n]*$", re.MULTILINE)


def directive_pattern(name: str) -> re.Pattern[str]:
    """Return the pattern validating parameter text for directive ``name``."""
    return re.compile(rf"^{re.escape(name)}(?:\s+(?P<title>.*))?$")


class AdmonitionContainerProcessor(BlockProcessor):
    """Parse one admonition container into a styled ``<div>``."""

    def __init__(
        self, parser: BlockParser, directives: typ.Sequence[str] = ADMONITION_TYPES
    ) -> None:
        super().__init__(parser)
        self._validators = [(name, directive_pattern(name)) for name in directives]

    def directive_for(self, params: str) -> str | None:
        """Return the directive named by ``params`` or ``None``."""
        stripped = params.strip()
        for name, validator in self._validators:
            if validator.match(stripped):
                return name
        return None

    def find_opener(self, block: str) -> tuple[re.Match[str], str] | None:
        """Return the first opening line in ``block`` and its directive."""
        for match in CONTAINER_OPEN_PATTERN.finditer(block):
            directive = self.directive_for(match.group("params"))
            if directive is not None:
                return match, directive
        return None

    def find_closer(self, blocks: list[str]) -> tuple[int, int, int] | None:
        """Locate the marker closing a container whose body starts ``blocks``.

        Known openers met on the way nest one level deeper, so each needs its
        own closing line first.

        Returns
        -------
        tuple[int, int, int] or None
            Block index plus start and end offsets of the closing line, or
            ``None`` when the container is never closed.
        """
        depth = 1
        for index, block in enumerate(blocks):
            for line in LINE_PATTERN.finditer(block):
                text = line.group(0)
                if CONTAINER_CLOSE_PATTERN.fullmatch(text):
                    depth -= 1
                    if depth == 0:
                        return index, line.start(), line.end()
                elif self.find_opener(text) is not None:
                    depth += 1
        return None

    def test(self, parent: etree.Element, block: str) -> bool:
        """Return ``True`` when any line of ``block`` opens a known container."""
        return self.find_opener(block) is not None

    def run(self, parent: etree.Element, blocks: list[str]) -> bool:
        """Wrap the blocks up to the closing marker in a container ``<div>``.

        Lines above the opener are parsed first as their own block, the way
        hash headers split a paragraph. Returns ``False`` and leaves
        ``blocks`` untouched when no closing marker follows, so the opening
        line renders as literal text.
        """
        block = blocks[0]
        found = self.find_opener(block)
        if found is None:  # pragma: no cover - guarded by test()
            return False
        opener, directive = found
        body = [block[opener.end() :].removeprefix("\n"), *blocks[1:]]
        closer = self.find_closer(body)
        if closer is None:
            return False

        index, start, end = closer
        before = block[: opener.start()].rstrip("\n")
        inner = [*body[:index], body[index][:start].rstrip("\n")]
        remainder = body[index][end:].lstrip("\n")
        del blocks[: index + 1]
        if remainder:
            blocks.insert(0, remainder)

        if before:
            self.parser.parseBlocks(parent, [before])
        container = etree.SubElement(parent, "div")
        container.set("class", f"alert alert-{directive.lower()}")
        self.parser.parseBlocks(container, inner)
        return True


class AdmonitionContainerExtension(Extension):
    """Enable ``Note``, ``Warning`` and ``Tip`` containers."""

    def __init__(self, directives: typ.Sequence[str] = ADMONITION_TYPES) -> None:
        super().__init__()
        self.directives = tuple(directives)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the container processor ahead of paragraph handling."""
        processor = AdmonitionContainerProcessor(md.parser, self.directives)
        md.parser.blockprocessors.register(processor, "docs_site_admonitions", 105)


__all__ = [
    "ADMONITION_TYPES",
    "AdmonitionContainerExtension",
    "AdmonitionContainerProcessor",
    "directive_pattern",
]
