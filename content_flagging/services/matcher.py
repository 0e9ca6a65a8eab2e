"""Scans combined content text against the rule tables."""
from __future__ import annotations

import re
from typing import Iterable

from content_flagging.models.types import Category, ContentItem
from content_flagging.services import moderation_rules, pii_rules


def combine_text(content: ContentItem) -> str:
    """Join text and url with a space; the unit every rule is run against."""

    return f"{content.text or ''} {content.url or ''}".strip()


def find_pattern_matches(text: str, patterns: Iterable[re.Pattern[str]]) -> list[re.Match[str]]:
    """First match of every rule that occurs anywhere in ``text``."""

    matches: list[re.Match[str]] = []
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            matches.append(match)
    return matches


def match_catalog(text: str) -> dict[Category, list[re.Match[str]]]:
    """Matches per hit category, in catalog order. Categories with no match are omitted."""

    hits: dict[Category, list[re.Match[str]]] = {}
    for category, patterns in moderation_rules.CATEGORY_PATTERNS.items():
        matches = find_pattern_matches(text, patterns)
        if matches:
            hits[category] = matches
    return hits


def find_personal_info(text: str) -> list[re.Match[str]]:
    """Always-applied personal-information check, independent of the catalog."""

    return find_pattern_matches(text, (pattern for pattern, _ in pii_rules.PII_PATTERNS))


__all__ = ["combine_text", "find_pattern_matches", "find_personal_info", "match_catalog"]
