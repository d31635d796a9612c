"""Load and validate site configuration YAML for docs_site builds.

The primary entry point is :func:`load_site_config`, which reads the
``site.yaml`` file, applies defaults, and returns a :class:`SiteConfig` ready
for the generator and CLI.

Examples
--------
>>> from docs_site.config import SiteConfig
>>> SiteConfig().output_dir
PosixPath('public')
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
