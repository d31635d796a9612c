r"""Discover Markdown files on disk and load them into a ``DocumentStore``.

Each ``*.md`` file below the content root becomes one
:class:`~docs_site.store.Document`. A leading ``---`` block is parsed as YAML
front-matter; anything malformed there is logged and replaced with empty
metadata so one bad file never stops a build.

Example
-------
>>> from docs_site.content_loader import split_front_matter
>>> meta, body = split_front_matter("---\ntitle: Intro\n---\n# Intro\n")
>>> meta["title"], body
('Intro', '# Intro\n')
"""

from __future__ import annotations

import logging
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .store import Document, DocumentStore, FrontMatter

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<meta>.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
MARKDOWN_SUFFIX = ".md"


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into a front-matter mapping and the remaining body.

    Parameters
    ----------
    text : str
        Raw file contents, optionally starting with a ``---`` delimited YAML
        block.

    Returns
    -------
    tuple[dict[str, Any], str]
        Parsed metadata (empty when absent, malformed, or not a mapping) and
        the body with the front-matter block removed.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    body = text[match.end() :]
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group("meta"))
    except YAMLError as exc:
        logger.warning("Ignoring malformed front-matter: %s", exc)
        return {}, body
    if not isinstance(loaded, dict):
        if loaded is not None:
            logger.warning(
                "Ignoring front-matter of type %s; expected a mapping",
                type(loaded).__name__,
            )
        return {}, body
    return dict(loaded), body


def slug_for(path: Path, root: Path) -> str:
    """Return the slug for ``path``: root-relative, POSIX, without ``.md``."""
    relative = path.relative_to(root).as_posix()
    return relative.removesuffix(MARKDOWN_SUFFIX)


def load_document(path: Path, root: Path) -> Document:
    """Read a single Markdown file into a :class:`Document`."""
    text = path.read_text(encoding="utf-8")
    meta, body = split_front_matter(text)
    return Document(
        slug=slug_for(path, root),
        raw_body=body,
        front_matter=FrontMatter.from_mapping(meta),
        source_path=path,
    )


def load_document_store(root: Path) -> DocumentStore:
    """Load every Markdown file under ``root`` into an immutable store.

    Parameters
    ----------
    root : Path
        Content directory; slugs are derived relative to it.

    Returns
    -------
    DocumentStore
        Documents in sorted path order so repeated loads are identical.

    Raises
    ------
    FileNotFoundError
        If ``root`` does not exist or is not a directory.
    """
    if not root.is_dir():
        msg = f"Content root '{root}' not found."
        raise FileNotFoundError(msg)
    paths = sorted(
        path for path in root.rglob(f"*{MARKDOWN_SUFFIX}") if path.is_file()
    )
    return DocumentStore(load_document(path, root) for path in paths)


__all__ = [
    "FRONT_MATTER_PATTERN",
    "load_document",
    "load_document_store",
    "slug_for",
    "split_front_matter",
]
