"""Shared fixtures for docs_site tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_CONTENT: dict[str, str] = {
    "docs/start-install.md": (
        "---\n"
        "title: Install\n"
        "description: Set up the toolchain.\n"
        "---\n"
        "# Install\n\n"
        "Run the installer.\n\n"
        "::: Tip\n"
        "Use a virtual environment.\n"
        ":::\n"
    ),
    "docs/core-intro.md": (
        "# Intro\n\nStart with [the install guide](./start-install.md#requirements).\n"
    ),
    "api/api-quick-reference.md": "# Quick Reference\n\n```ts\nconst x = 1;\n```\n",
    "codelabs/getting_started/2-second.md": "Second step.\n",
    "codelabs/getting_started/1-first.md": "First step.\n",
}


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Write a small content tree under ``tmp_path`` and return its root."""
    root = tmp_path / "content"
    for relative, text in SAMPLE_CONTENT.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root
