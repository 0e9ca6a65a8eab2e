"""Core domain types for content flagging.

Terms:
- Category (FlagReason): the moderation class content can be flagged under.
- Severity: harm tier, ordered low < medium < high < critical.
- Confidence: 0..1 score of how sure the engine is about a verdict.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, NewType, Optional

ContentId = NewType("ContentId", str)
UserId = NewType("UserId", str)


class ContentType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"


class Category(str, Enum):
    """Moderation categories.

    Declaration order is the catalog iteration order and therefore the order
    of ``FlagResult.reasons``.
    """

    SPAM = "spam"
    HATE_SPEECH = "hate_speech"
    HARASSMENT = "harassment"
    VIOLENCE = "violence"
    ADULT_CONTENT = "adult_content"
    MISINFORMATION = "misinformation"
    COPYRIGHT_VIOLATION = "copyright_violation"
    PHISHING = "phishing"
    MALWARE = "malware"
    INAPPROPRIATE_LANGUAGE = "inappropriate_language"
    PERSONAL_INFORMATION = "personal_information"


FlagReason = Category


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def escalate(self) -> "Severity":
        """One tier up; critical stays critical."""

        return _SEVERITY_ORDER[min(self.rank + 1, len(_SEVERITY_ORDER) - 1)]

    @classmethod
    def max_of(cls, severities: Iterable["Severity"]) -> "Severity":
        return max(severities, key=lambda s: s.rank, default=cls.LOW)


_SEVERITY_ORDER = (Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL)


@dataclass(frozen=True)
class ContentItem:
    id: ContentId
    user_id: UserId
    type: ContentType
    text: Optional[str] = None
    url: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class AnalysisContext:
    platform: Optional[str] = None
    audience: Optional[str] = None
    previous_flags: Optional[int] = None


@dataclass(frozen=True)
class FlagResult:
    is_flagged: bool
    severity: Severity
    reasons: tuple[Category, ...] = field(default_factory=tuple)
    confidence: float = 0.0
    details: Optional[str] = None


@dataclass(frozen=True)
class FlagResponse:
    request_id: str
    result: FlagResult
    processing_time_ms: float
    timestamp: dt.datetime


__all__ = [
    "AnalysisContext",
    "Category",
    "ContentId",
    "ContentItem",
    "ContentType",
    "FlagReason",
    "FlagResponse",
    "FlagResult",
    "Severity",
    "UserId",
]
