"""Static lookup tables that drive classification and section titles.

Table order is precedence order: :func:`docs_site.navigation.classifier.classify`
returns the first rule whose prefixes match. The tables are built once at
import time and never mutated.
"""

from __future__ import annotations

import types
import typing as typ

from .models import CategoryRule, ClassificationOverride, SectionInfo

FALLBACK_CATEGORY = "misc"
CLIENT_LIBRARIES_CATEGORY = "client-libraries"
GENERAL_CODELAB_GROUP = "general"
API_SECTION_TITLE = "API Reference"
API_SECTION_ORDER = 1

DOCS_CATEGORIES: tuple[CategoryRule, ...] = (
    CategoryRule("getting-started", "Getting Started", 1, ("start-",)),
    CategoryRule("core-concepts", "Core Concepts", 2, ("core-", "control-")),
    CategoryRule("native-integration", "Native Integration", 3, ("native-",)),
    CategoryRule("navigation", "Navigation", 4, ("navigation",)),
    CategoryRule(
        CLIENT_LIBRARIES_CATEGORY,
        "Client Libraries",
        5,
        ("client-libraries-", "advanced-protobuf"),
    ),
    CategoryRule("standard-library", "Standard Library", 6, ("stdlib-", "glossary")),
    CategoryRule("advanced", "Advanced Topics", 7, ("advanced-",)),
    CategoryRule("performance", "Performance", 8, ("performance-",)),
    CategoryRule("workflow", "Workflow", 9, ("workflow-", "command-line")),
    CategoryRule(FALLBACK_CATEGORY, "Misc", 10, ("third-party", "faq")),
    CategoryRule("help", "Help", 11, ("help-",)),
)

# Protocol buffer docs live with the client libraries even though their
# name carries the ``advanced-`` prefix.
PROTOBUF_OVERRIDE = ClassificationOverride(
    name="advanced-protobuf", category=CLIENT_LIBRARIES_CATEGORY
)
CLASSIFICATION_OVERRIDES: tuple[ClassificationOverride, ...] = (PROTOBUF_OVERRIDE,)

CATEGORIES_BY_KEY: typ.Mapping[str, CategoryRule] = types.MappingProxyType(
    {rule.key: rule for rule in DOCS_CATEGORIES}
)

API_SECTIONS: typ.Mapping[str, SectionInfo] = types.MappingProxyType(
    {
        "api-quick-reference": SectionInfo("Quick Reference", 1),
        "api-reference-elements": SectionInfo("Elements", 2),
        "api-style-attributes": SectionInfo("Style Attributes", 3),
    }
)

CODELABS_SECTIONS: typ.Mapping[str, SectionInfo] = types.MappingProxyType(
    {
        "getting_started": SectionInfo("Getting Started", 1),
        "advanced_ui": SectionInfo("Advanced UI", 2),
        "integration_with_native": SectionInfo("Integration with Native", 3),
        "shared_business_logic": SectionInfo("Shared Business Logic", 4),
    }
)


__all__ = [
    "API_SECTIONS",
    "API_SECTION_ORDER",
    "API_SECTION_TITLE",
    "CATEGORIES_BY_KEY",
    "CLASSIFICATION_OVERRIDES",
    "CLIENT_LIBRARIES_CATEGORY",
    "CODELABS_SECTIONS",
    "DOCS_CATEGORIES",
    "FALLBACK_CATEGORY",
    "GENERAL_CODELAB_GROUP",
    "PROTOBUF_OVERRIDE",
]
