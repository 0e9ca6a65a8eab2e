"""Moderation category patterns.

Tip: every category maps to an ordered tuple of regexes. A category is hit
when at least one of its regexes matches; the number of matching regexes
drives confidence. The table is built once at import and never mutated.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from content_flagging.models.types import Category
from content_flagging.services.pii_rules import PII_PATTERNS


def _phrases(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


SPAM_PHRASES = _phrases(
    r"click here",
    r"free money",
    r"make money fast",
    r"guaranteed profit",
    r"limited time offer",
    r"act now",
    r"no risk",
    r"get rich quick",
    r"work from home",
    r"earn \$?\d+",
)
# Five or more of the same character in a row.
SPAM_REPETITION = re.compile(r"(.)\1{4,}")
# Case-sensitive: a run of capitals is the signal.
SPAM_EXCESSIVE_CAPS = re.compile(r"\b[A-Z\s]{10,}\b")
SPAM_SHORT_LINKS = _phrases(r"bit\.ly", r"tinyurl", r"short\.link")

# Placeholder word list; shared with inappropriate_language.
SLURS = _phrases(r"\b(hate|stupid|idiot|moron)\b")
DISCRIMINATORY = _phrases(r"all \w+ are \w+", r"\w+ people are \w+")

THREATS = _phrases(
    r"i will \w+ you",
    r"you should \w+ yourself",
    r"kill yourself",
    r"die",
)
INTIMIDATION = _phrases(r"watch your back", r"you're dead", r"i know where you live")

VIOLENCE_EXPLICIT = _phrases(
    r"kill (?!yourself)\w+",
    r"murder \w+",
    r"beat \w+ up",
    r"punch \w+",
)
WEAPONS = _phrases(r"\b(gun|knife|bomb|weapon)\b")

ADULT_EXPLICIT = _phrases(r"\b(sex|porn|nude|naked)\b", r"adult content")

CONSPIRACY = _phrases(r"conspiracy", r"government cover", r"fake news")
MEDICAL_CLAIMS = _phrases(r"cure for \w+", r"miracle drug", r"doctors don't want")

PHISHING_URGENCY = _phrases(
    r"urgent action required",
    r"verify your account",
    r"suspended account",
    r"click to verify",
)
PHISHING_CREDENTIALS = _phrases(
    r"enter your password",
    r"confirm your details",
    r"update your information",
)


def build_catalog() -> Mapping[Category, tuple[re.Pattern[str], ...]]:
    """Assemble the read-only category -> rules table in category order."""

    table = {
        Category.SPAM: (
            *SPAM_PHRASES,
            SPAM_REPETITION,
            SPAM_EXCESSIVE_CAPS,
            *SPAM_SHORT_LINKS,
        ),
        Category.HATE_SPEECH: (*SLURS, *DISCRIMINATORY),
        Category.HARASSMENT: (*THREATS, *INTIMIDATION),
        Category.VIOLENCE: (*VIOLENCE_EXPLICIT, *WEAPONS),
        Category.ADULT_CONTENT: ADULT_EXPLICIT,
        Category.MISINFORMATION: (*CONSPIRACY, *MEDICAL_CLAIMS),
        # Reserved for future rules.
        Category.COPYRIGHT_VIOLATION: (),
        Category.PHISHING: (*PHISHING_URGENCY, *PHISHING_CREDENTIALS),
        Category.MALWARE: (),
        Category.INAPPROPRIATE_LANGUAGE: SLURS,
        Category.PERSONAL_INFORMATION: tuple(pattern for pattern, _ in PII_PATTERNS),
    }
    return MappingProxyType({category: table[category] for category in Category})


CATEGORY_PATTERNS = build_catalog()


def rules_for(category: Category) -> tuple[re.Pattern[str], ...]:
    return CATEGORY_PATTERNS[category]


__all__ = ["CATEGORY_PATTERNS", "build_catalog", "rules_for"]
