"""Typed dataclasses describing docs_site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Resolved site settings shared by the CLI and the generator.

    Attributes
    ----------
    content_root : Path
        Directory scanned for Markdown documents.
    output_dir : Path
        Directory receiving rendered pages and ``navigation.json``.
    pygments_style : str
        Pygments style used for code highlighting CSS.
    site_name : str
        Name shown in page titles and the sidebar.
    language_aliases : dict[str, str]
        Extra code-fence language aliases merged over the built-in table.
    """

    content_root: Path = Path("src/content")
    output_dir: Path = Path("public")
    pygments_style: str = "monokai"
    site_name: str = "Docs"
    language_aliases: dict[str, str] = dc.field(default_factory=dict)


__all__ = ["SiteConfig", "SiteConfigError"]
