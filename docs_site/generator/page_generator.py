"""High-level orchestration for documentation page generation.

This module turns a loaded :class:`~docs_site.store.DocumentStore` into a
static site. :func:`load_page` resolves a single slug into template-ready
:class:`~docs_site.generator.models.PageData`, and :class:`SiteGenerator`
renders every document with the shared Jinja template, writing one
``index.html`` per document plus ``navigation.json``.

Example
-------
>>> from pathlib import Path
>>> from docs_site.config import SiteConfig
>>> from docs_site.content_loader import load_document_store
>>> from docs_site.generator import SiteGenerator
>>> config = SiteConfig()
>>> store = load_document_store(config.content_root)  # doctest: +SKIP
>>> SiteGenerator(store, config).run()  # doctest: +SKIP
[PosixPath('public/docs/docs/start-install/index.html'), ...]
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from docs_site._constants import NAVIGATION_FILENAME, PAGE_TEMPLATE
from docs_site.navigation import build_navigation
from docs_site.navigation.builder import document_href
from docs_site.titles import resolve_title

from .models import PageData
from .renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    from docs_site.config import SiteConfig
    from docs_site.navigation import SiteNavigation
    from docs_site.store import Document, DocumentStore

NAV_TREE_LABELS: tuple[tuple[str, str], ...] = (
    ("docs", "Documentation"),
    ("api", "API"),
    ("codelabs", "Codelabs"),
)


def build_page(document: Document, renderer: MarkdownRenderer) -> PageData:
    """Render ``document`` into template-ready page data."""
    return PageData(
        slug=document.slug,
        href=document_href(document),
        title=resolve_title(document),
        description=document.front_matter.description,
        content_html=renderer.render(document.raw_body, slug=document.slug),
        front_matter=document.front_matter,
    )


def load_page(
    store: DocumentStore, renderer: MarkdownRenderer, slug: str
) -> PageData:
    """Return rendered page data for ``slug``.

    Parameters
    ----------
    store : DocumentStore
        Loaded documents.
    renderer : MarkdownRenderer
        Renderer used for the document body.
    slug : str
        Slug requested by the caller (for example from a URL path).

    Returns
    -------
    PageData
        Title, description, metadata, and rendered HTML for the document.

    Raises
    ------
    DocumentNotFoundError
        If ``store`` holds no document for ``slug``.
    """
    return build_page(store.require(slug), renderer)


class SiteGenerator:
    """Render every stored document into themed HTML files."""

    def __init__(
        self,
        store: DocumentStore,
        site_config: SiteConfig,
        *,
        renderer: MarkdownRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with documents, configuration, and templates.

        Parameters
        ----------
        store : DocumentStore
            Documents to render.
        site_config : SiteConfig
            Output directory, site name, and highlighting settings.
        renderer : MarkdownRenderer, optional
            Renderer override; defaults to one built from ``site_config``.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.store = store
        self.site_config = site_config
        self.renderer = renderer or MarkdownRenderer(
            site_config.pygments_style,
            language_aliases=site_config.language_aliases,
        )
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(PAGE_TEMPLATE)

    def run(self) -> list[Path]:
        """Render all documents and the navigation JSON to the output directory.

        Returns
        -------
        list[Path]
            Paths of the written page files in store order, followed by the
            navigation JSON file.

        Notes
        -----
        Side effects include creating directories below
        ``site_config.output_dir`` and overwriting existing files there.
        """
        navigation = build_navigation(self.store)
        nav_trees = self._build_nav_trees(navigation)
        out_dir = self.site_config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for document in self.store:
            page = build_page(document, self.renderer)
            html = self.template.render(
                page=page,
                nav_trees=nav_trees,
                site_name=self.site_config.site_name,
                html_title=self._format_page_title(page),
                pygments_css=self.renderer.stylesheet,
            )
            output_path = self.page_path(document)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)

        nav_path = out_dir / NAVIGATION_FILENAME
        nav_path.write_text(
            json.dumps(navigation.to_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        written.append(nav_path)
        return written

    def page_path(self, document: Document) -> Path:
        """Return the output file for ``document`` mirroring its site URL."""
        relative = document_href(document).strip("/")
        return self.site_config.output_dir / relative / "index.html"

    @staticmethod
    def _build_nav_trees(navigation: SiteNavigation) -> list[dict[str, typ.Any]]:
        """Return the sidebar trees that contain at least one item."""
        payload = navigation.to_dict()
        trees: list[dict[str, typ.Any]] = []
        for key, label in NAV_TREE_LABELS:
            sections = [section for section in payload[key] if section["items"]]
            if sections:
                trees.append({"key": key, "label": label, "sections": sections})
        return trees

    def _format_page_title(self, page: PageData) -> str:
        """Compose the HTML title from the page title and site name."""
        return f"{page.title} | {self.site_config.site_name}"


__all__ = ["SiteGenerator", "build_page", "load_page"]
