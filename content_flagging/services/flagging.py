"""Content flagging service.

Tip: ``analyze_content`` is the pure verdict (same input, same output).
``process_content`` wraps it with a request id, a timestamp and the time it
took; it is the only place the clock or randomness is read.
"""
from __future__ import annotations

import datetime as dt
import logging
import math
import time
import uuid
from typing import Optional, Sequence

from content_flagging.models.types import (
    AnalysisContext,
    Category,
    ContentItem,
    FlagResponse,
    FlagResult,
    Severity,
)
from content_flagging.services import matcher, scoring

LOGGER = logging.getLogger(__name__)

FLAG_THRESHOLD = 0.3
MIN_PROCESSING_TIME_MS = 0.001
CLEAN_DETAILS = "Content appears to be clean"


def clean_result() -> FlagResult:
    return FlagResult(is_flagged=False, severity=Severity.LOW, reasons=(), confidence=0.0)


def generate_details(reasons: Sequence[Category], confidence: float) -> str:
    if not reasons:
        return CLEAN_DETAILS
    reason_text = ", ".join(reason.value for reason in reasons)
    percent = math.floor(confidence * 100 + 0.5)
    return f"Detected {reason_text} with {percent}% confidence"


def analyze_content(content: ContentItem, context: Optional[AnalysisContext] = None) -> FlagResult:
    """Run every rule set over the content and fold the hits into one verdict."""

    text = matcher.combine_text(content)
    if not text:
        return clean_result()

    reasons: list[Category] = []
    severities: list[Severity] = []
    total_confidence = 0.0

    for category, matches in matcher.match_catalog(text).items():
        confidence = scoring.calculate_confidence(len(matches), len(text), context)
        reasons.append(category)
        severities.append(scoring.severity_for_reason(category, confidence))
        total_confidence += confidence

    # Additive with the catalog's own personal_information rules.
    if matcher.find_personal_info(text):
        if Category.PERSONAL_INFORMATION not in reasons:
            reasons.append(Category.PERSONAL_INFORMATION)
        severities.append(Severity.HIGH)
        total_confidence += scoring.PERSONAL_INFO_CONFIDENCE

    confidence = scoring.apply_context_adjustments(total_confidence, len(reasons), context)
    is_flagged = confidence > FLAG_THRESHOLD or len(reasons) > 0

    LOGGER.debug(
        "content analyzed",
        extra={
            "content_id": content.id,
            "reasons": [reason.value for reason in reasons],
            "confidence": confidence,
        },
    )
    return FlagResult(
        is_flagged=is_flagged,
        severity=scoring.overall_severity(severities),
        reasons=tuple(reasons),
        confidence=confidence,
        details=generate_details(reasons, confidence),
    )


def generate_request_id() -> str:
    millis = int(time.time() * 1000)
    return f"req_{millis}_{uuid.uuid4().hex[:9]}"


def process_content(content: ContentItem, context: Optional[AnalysisContext] = None) -> FlagResponse:
    """Analyze content and attach request id, timing and timestamp."""

    start = time.perf_counter()
    result = analyze_content(content, context)
    elapsed_ms = (time.perf_counter() - start) * 1000

    return FlagResponse(
        request_id=generate_request_id(),
        result=result,
        processing_time_ms=max(elapsed_ms, MIN_PROCESSING_TIME_MS),
        timestamp=dt.datetime.now(dt.timezone.utc),
    )


__all__ = ["analyze_content", "generate_details", "process_content"]
