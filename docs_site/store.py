"""Immutable document records and the store that serves them.

The store is built once at startup (usually by
:func:`docs_site.content_loader.load_document_store`) and handed to every
consumer explicitly. Nothing in this module mutates a store after
construction, so a single instance can be read from many threads.

Example
-------
>>> from docs_site.store import DocumentStore
>>> store = DocumentStore.from_mapping(
...     {"docs/start-install": {"front_matter": {"title": "Install"}, "raw_body": "Hi"}}
... )
>>> store.get("docs/start-install").front_matter.title
'Install'
>>> store.get("docs/missing") is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class DocumentNotFoundError(LookupError):
    """Raised when a document is requested by a slug the store does not hold.

    Attributes
    ----------
    slug : str
        The slug that could not be resolved.
    status : int
        HTTP-style status code callers can forward (always ``404``).
    """

    status = 404

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Document '{slug}' not found.")


@dc.dataclass(frozen=True, slots=True)
class FrontMatter:
    """Structured metadata attached to a document.

    Attributes
    ----------
    title : str | None
        Explicit title; ``None`` when absent or not a non-empty string.
    description : str | None
        Optional summary shown by page templates.
    extra : Mapping[str, Any]
        Every other front-matter key, exposed read-only.
    """

    title: str | None = None
    description: str | None = None
    extra: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    @classmethod
    def from_mapping(cls, payload: object) -> FrontMatter:
        """Normalize an arbitrary front-matter payload into a ``FrontMatter``.

        Non-mapping payloads (``None``, lists, scalars) yield an empty
        instance rather than an error.
        """
        if not isinstance(payload, cabc.Mapping):
            return cls()
        data = {str(key): value for key, value in payload.items()}
        title = data.pop("title", None)
        description = data.pop("description", None)
        return cls(
            title=title if isinstance(title, str) and title else None,
            description=description if isinstance(description, str) else None,
            extra=types.MappingProxyType(data),
        )


@dc.dataclass(frozen=True, slots=True)
class Document:
    """One loaded Markdown document.

    Attributes
    ----------
    slug : str
        Content-root relative path without extension, ``/``-separated.
    raw_body : str
        Markdown body with any front-matter block removed.
    front_matter : FrontMatter
        Parsed metadata; empty when the source had none.
    source_path : Path | None
        File the document was read from, when loaded from disk.
    """

    slug: str
    raw_body: str
    front_matter: FrontMatter = dc.field(default_factory=FrontMatter)
    source_path: Path | None = None

    @property
    def segments(self) -> list[str]:
        """Return the slug split on ``/``."""
        return self.slug.split("/")

    @property
    def filename(self) -> str:
        """Return the last slug segment."""
        return self.segments[-1]


class DocumentStore:
    """Read-only collection of documents keyed by slug."""

    def __init__(self, documents: cabc.Iterable[Document] = ()) -> None:
        """Build a store from ``documents``, preserving their order.

        Parameters
        ----------
        documents : Iterable[Document]
            Documents to index. Later duplicates of a slug replace earlier
            ones while keeping the first position.
        """
        indexed: dict[str, Document] = {}
        for document in documents:
            indexed[document.slug] = document
        self._documents = types.MappingProxyType(indexed)

    @classmethod
    def from_mapping(
        cls, payload: typ.Mapping[str, typ.Mapping[str, typ.Any]]
    ) -> DocumentStore:
        """Build a store from ``{slug: {"front_matter": ..., "raw_body": ...}}``.

        ``frontMatter`` and ``metadata`` are accepted as aliases for
        ``front_matter`` and ``rawBody``/``content`` for ``raw_body``. A
        missing front-matter entry becomes an empty :class:`FrontMatter`.
        """
        documents = []
        for slug, raw_entry in payload.items():
            entry = raw_entry if isinstance(raw_entry, cabc.Mapping) else {}
            meta = _first_present(entry, ("front_matter", "frontMatter", "metadata"))
            body = _first_present(entry, ("raw_body", "rawBody", "content"))
            documents.append(
                Document(
                    slug=slug,
                    raw_body=body if isinstance(body, str) else "",
                    front_matter=FrontMatter.from_mapping(meta),
                )
            )
        return cls(documents)

    def get(self, slug: str) -> Document | None:
        """Return the document stored under ``slug`` or ``None``."""
        return self._documents.get(slug)

    def require(self, slug: str) -> Document:
        """Return the document for ``slug`` or raise ``DocumentNotFoundError``."""
        document = self.get(slug)
        if document is None:
            raise DocumentNotFoundError(slug)
        return document

    def filter_by_prefix(self, segment: str) -> tuple[Document, ...]:
        """Return documents whose slug lives under the top-level ``segment``."""
        prefix = f"{segment}/"
        return tuple(
            document
            for slug, document in self._documents.items()
            if slug.startswith(prefix)
        )

    @property
    def slugs(self) -> tuple[str, ...]:
        """Return every slug in store order."""
        return tuple(self._documents)

    def __iter__(self) -> cabc.Iterator[Document]:
        return iter(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._documents


def _first_present(entry: typ.Mapping[str, typ.Any], keys: tuple[str, ...]) -> object:
    """Return the value of the first key present in ``entry``."""
    for key in keys:
        if key in entry:
            return entry[key]
    return None


__all__ = ["Document", "DocumentNotFoundError", "DocumentStore", "FrontMatter"]
