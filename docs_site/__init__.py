"""Build navigable documentation sites from trees of Markdown documents.

This package loads Markdown documents with YAML front-matter, groups them
into ordered navigation trees, and renders their bodies to HTML with
highlighted code fences and admonition containers.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docs_site import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
