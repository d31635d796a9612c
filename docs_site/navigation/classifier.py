"""Assign docs to navigation categories by slug prefix.

Example
-------
>>> from docs_site.navigation.classifier import classify
>>> classify("start-install")
'getting-started'
>>> classify("advanced-protobuf")
'client-libraries'
>>> classify("something-else")
'misc'
"""

from __future__ import annotations

import typing as typ

from .rules import CLASSIFICATION_OVERRIDES, DOCS_CATEGORIES, FALLBACK_CATEGORY

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import CategoryRule, ClassificationOverride


def match_rule(
    name: str, rules: cabc.Sequence[CategoryRule] = DOCS_CATEGORIES
) -> CategoryRule | None:
    """Return the first rule in ``rules`` whose prefixes match ``name``."""
    return next((rule for rule in rules if rule.matches(name)), None)


def classify(
    name: str,
    *,
    rules: cabc.Sequence[CategoryRule] = DOCS_CATEGORIES,
    overrides: cabc.Sequence[ClassificationOverride] = CLASSIFICATION_OVERRIDES,
) -> str:
    """Return the category key for a docs-relative document name.

    Parameters
    ----------
    name : str
        Slug with the top-level ``docs/`` segment removed.
    rules : Sequence[CategoryRule], optional
        Rule table in precedence order; defaults to ``DOCS_CATEGORIES``.
    overrides : Sequence[ClassificationOverride], optional
        Exact-name reassignments applied after the general match.

    Returns
    -------
    str
        The matched category key, or ``"misc"`` when nothing matches. Every
        input, including the empty string, yields exactly one key.
    """
    rule = match_rule(name, rules)
    category = rule.key if rule is not None else FALLBACK_CATEGORY
    for override in overrides:
        category = override.apply(name, category)
    return category


__all__ = ["classify", "match_rule"]
