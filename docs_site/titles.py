"""Derive human-readable titles for documents.

An explicit front-matter ``title`` always wins. Otherwise the title is built
from the last slug segment: numeric ordering prefixes and one known category
prefix are dropped, separators become spaces, and each word is capitalized.

Examples
--------
>>> from docs_site.titles import title_from_filename
>>> title_from_filename("03-setup-guide")
'Setup Guide'
>>> title_from_filename("core-intro")
'Intro'
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from .store import Document

ORDER_PREFIX_PATTERN = re.compile(r"^\d+-")
CATEGORY_PREFIXES: tuple[str, ...] = (
    "start-",
    "core-",
    "native-",
    "advanced-",
    "performance-",
    "workflow-",
    "help-",
    "stdlib-",
    "client-libraries-",
    "api-",
)
CATEGORY_PREFIX_PATTERN = re.compile(
    "^(?:" + "|".join(re.escape(prefix) for prefix in CATEGORY_PREFIXES) + ")"
)


def _capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def title_from_filename(filename: str) -> str:
    """Return a display title derived from a slug segment."""
    name = ORDER_PREFIX_PATTERN.sub("", filename, count=1)
    name = CATEGORY_PREFIX_PATTERN.sub("", name, count=1)
    name = name.replace("-", " ").replace("_", " ")
    return _capitalize_words(name)


def resolve_title(document: Document) -> str:
    """Return the front-matter title of ``document`` or one derived from its slug.

    Parameters
    ----------
    document : Document
        Document whose title should be displayed.

    Returns
    -------
    str
        The explicit title verbatim when present, otherwise the slug-derived
        title. An empty last slug segment yields ``""``.
    """
    if document.front_matter.title:
        return document.front_matter.title
    return title_from_filename(document.filename)


__all__ = [
    "CATEGORY_PREFIXES",
    "resolve_title",
    "title_from_filename",
]
