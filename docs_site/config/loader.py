"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing content and output locations.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If ``defaults`` or ``language_aliases`` have the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_site.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.content_root  # doctest: +SKIP
    PosixPath('src/content')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise SiteConfigError(msg)

    base = SiteConfig()
    return SiteConfig(
        content_root=Path(defaults.get("content_root", base.content_root)),
        output_dir=Path(defaults.get("output_dir", base.output_dir)),
        pygments_style=str(defaults.get("pygments_style", base.pygments_style)),
        site_name=str(defaults.get("site_name", base.site_name)),
        language_aliases=_build_language_aliases(raw.get("language_aliases")),
    )


def _build_language_aliases(payload: object) -> dict[str, str]:
    """Validate the ``language_aliases`` mapping from the config file."""
    match payload:
        case None:
            return {}
        case dict():
            aliases: dict[str, str] = {}
            for tag, language in payload.items():
                if not isinstance(language, str) or not language.strip():
                    msg = f"Alias for '{tag}' must be a non-empty string."
                    raise SiteConfigError(msg)
                aliases[str(tag)] = language.strip()
            return aliases
        case _:
            msg = "'language_aliases' must be a mapping of tag to language."
            raise SiteConfigError(msg)


__all__ = ["load_site_config"]
