"""Cyclopts CLI entrypoint for building and inspecting the documentation site.

The ``docs-site`` console script defined here renders every Markdown document
under the content root into static HTML, prints the navigation trees as JSON,
and renders single documents for quick previews.

Examples
--------
Build the whole site with the default configuration:

>>> from docs_site.cli import main
>>> main()  # doctest: +SKIP

Render one document to stdout:

>>> from docs_site.cli import app
>>> app(["render", "docs/start-install"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .content_loader import load_document_store
from .generator import MarkdownRenderer, SiteGenerator, load_page
from .navigation import build_navigation
from .store import DocumentNotFoundError

if typ.TYPE_CHECKING:
    from .store import DocumentStore

app = App(name="docs-site", config=cyclopts.config.Env("DOCS_SITE_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to site config", env_var="DOCS_SITE_CONFIG"),
]
ContentRootOption = typ.Annotated[
    Path | None,
    Parameter(help="Override the content root", env_var="DOCS_SITE_CONTENT_ROOT"),
]


def _display_path(path: Path) -> str:
    """Return ``path`` relative to the working directory when it lies below it."""
    cwd = Path.cwd()
    if path.is_absolute() and path.is_relative_to(cwd):
        return path.relative_to(cwd).as_posix()
    return str(path)


def _resolve_config(config: Path | None, content_root: Path | None) -> SiteConfig:
    """Load ``config`` (or defaults) and apply a content root override."""
    site_config = load_site_config(config) if config else SiteConfig()
    if content_root is not None:
        site_config.content_root = content_root
    return site_config


def _load_store(site_config: SiteConfig) -> DocumentStore:
    return load_document_store(site_config.content_root)


@app.command(help="Render every document into static HTML pages.")
def build(
    *,
    config: ConfigOption = None,
    content_root: ContentRootOption = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="DOCS_SITE_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Generate the static site for the configured content root.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file; built-in defaults apply
        when omitted.
    content_root : Path or None, optional
        Override for the directory scanned for Markdown documents.
    output_dir : Path or None, optional
        Override for the directory receiving rendered pages.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    site_config = _resolve_config(config, content_root)
    if output_dir is not None:
        site_config.output_dir = output_dir
    store = _load_store(site_config)
    for path in SiteGenerator(store, site_config).run():
        print(f"wrote {_display_path(path)}")


@app.command(help="Print the navigation trees as JSON.")
def nav(
    *,
    config: ConfigOption = None,
    content_root: ContentRootOption = None,
) -> None:
    """Print the docs, API, and codelabs navigation trees."""
    store = _load_store(_resolve_config(config, content_root))
    payload = build_navigation(store).to_dict()
    print(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command(help="Render a single document body to stdout.")
def render(
    slug: str,
    *,
    config: ConfigOption = None,
    content_root: ContentRootOption = None,
) -> None:
    """Render the document stored under ``slug``.

    Parameters
    ----------
    slug : str
        Document slug, for example ``docs/start-install``.
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file.
    content_root : Path or None, optional
        Override for the directory scanned for Markdown documents.

    Raises
    ------
    SystemExit
        With status ``1`` when no document matches ``slug``.
    """
    site_config = _resolve_config(config, content_root)
    store = _load_store(site_config)
    renderer = MarkdownRenderer(
        site_config.pygments_style, language_aliases=site_config.language_aliases
    )
    try:
        page = load_page(store, renderer, slug)
    except DocumentNotFoundError as exc:
        print(f"{exc} (status {exc.status})", file=sys.stderr)
        raise SystemExit(1) from exc
    print(page.content_html)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs-site`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
