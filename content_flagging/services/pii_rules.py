"""Personal-information rules.

Tip: each rule pairs a regex with the label used when masking the match.
The same rules feed both flagging and log-snippet masking.
"""
from __future__ import annotations

import re

SSN_RE = re.compile(r"\b\d{3}-\d{2}-\d{4}\b")
PHONE_RE = re.compile(r"\b\d{3}-\d{3}-\d{4}\b")
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
CARD_RE = re.compile(r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b")

PII_PATTERNS = (
    (SSN_RE, "[SSN]"),
    (PHONE_RE, "[PHONE]"),
    (EMAIL_RE, "[EMAIL]"),
    (CARD_RE, "[CARD]"),
)


def mask_pii(text: str) -> str:
    """Replace every personal-information match with its label."""

    masked = text
    for pattern, replacement in PII_PATTERNS:
        masked = pattern.sub(replacement, masked)
    return masked


__all__ = ["PII_PATTERNS", "mask_pii"]
