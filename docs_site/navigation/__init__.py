"""Classify documents and build the site's navigation trees."""

from .builder import (
    build_api_navigation,
    build_codelabs_navigation,
    build_docs_navigation,
    build_navigation,
)
from .classifier import classify
from .models import (
    CategoryRule,
    ClassificationOverride,
    NavItem,
    NavSection,
    SectionInfo,
    SiteNavigation,
)
from .rules import DOCS_CATEGORIES, PROTOBUF_OVERRIDE

__all__ = [
    "DOCS_CATEGORIES",
    "PROTOBUF_OVERRIDE",
    "CategoryRule",
    "ClassificationOverride",
    "NavItem",
    "NavSection",
    "SectionInfo",
    "SiteNavigation",
    "build_api_navigation",
    "build_codelabs_navigation",
    "build_docs_navigation",
    "build_navigation",
    "classify",
]
