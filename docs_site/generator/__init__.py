"""Utilities for rendering document bodies and generating site pages."""

from .containers import AdmonitionContainerExtension
from .highlighting import LANGUAGE_ALIASES, CodeHighlighter
from .link_rewriter import DocLinkExtension
from .models import PageData
from .page_generator import SiteGenerator, build_page, load_page
from .renderer import MarkdownRenderer

__all__ = [
    "LANGUAGE_ALIASES",
    "AdmonitionContainerExtension",
    "CodeHighlighter",
    "DocLinkExtension",
    "MarkdownRenderer",
    "PageData",
    "SiteGenerator",
    "build_page",
    "load_page",
]
