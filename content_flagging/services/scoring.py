"""Confidence scoring, severity classification and context adjustment.

Tip: per-category confidence comes from how many rules matched, nudged by
text length and the author's history. The per-category values are then
summed and adjusted by context into one overall confidence.
"""
from __future__ import annotations

from typing import Optional, Sequence

from content_flagging.models.types import AnalysisContext, Category, Severity

MATCH_WEIGHT = 0.2
MATCH_CAP = 0.8
SHORT_TEXT_LENGTH = 100
SHORT_TEXT_BOOST = 0.2
LONG_TEXT_LENGTH = 1000
LONG_TEXT_PENALTY = 0.1
REPEAT_OFFENDER_FLAGS = 3
REPEAT_OFFENDER_BOOST = 0.1

PERSONAL_INFO_CONFIDENCE = 0.9

ESCALATION_THRESHOLD = 0.8
MULTI_REASON_BONUS = 0.1
REPEAT_OFFENDER_CONTEXT_BOOST = 0.2
REPEAT_OFFENDER_FLOOR = 0.4
PLATFORM_BOOSTS = {"twitter": 0.05}
AUDIENCE_BOOSTS = {"children": 0.1}

BASE_SEVERITY = {
    Category.SPAM: Severity.LOW,
    Category.HATE_SPEECH: Severity.HIGH,
    Category.HARASSMENT: Severity.HIGH,
    Category.VIOLENCE: Severity.CRITICAL,
    Category.ADULT_CONTENT: Severity.MEDIUM,
    Category.MISINFORMATION: Severity.MEDIUM,
    Category.COPYRIGHT_VIOLATION: Severity.MEDIUM,
    Category.PHISHING: Severity.HIGH,
    Category.MALWARE: Severity.CRITICAL,
    Category.INAPPROPRIATE_LANGUAGE: Severity.LOW,
    Category.PERSONAL_INFORMATION: Severity.HIGH,
}

# Harassment never escalates past its base tier.
PINNED_SEVERITY = {Category.HARASSMENT: Severity.HIGH}


def _settle(value: float) -> float:
    """Drop binary float drift (0.6000000000000001 + 0.2) before threshold checks."""

    return round(value, 6)


def _clamp(value: float) -> float:
    return min(max(_settle(value), 0.0), 1.0)


def is_repeat_offender(context: Optional[AnalysisContext]) -> bool:
    return bool(context and context.previous_flags and context.previous_flags > REPEAT_OFFENDER_FLAGS)


def calculate_confidence(
    match_count: int,
    text_length: int,
    context: Optional[AnalysisContext] = None,
) -> float:
    """Confidence for a single hit category."""

    if match_count <= 0:
        return 0.0

    confidence = min(match_count * MATCH_WEIGHT, MATCH_CAP)
    if text_length < SHORT_TEXT_LENGTH:
        confidence += SHORT_TEXT_BOOST
    elif text_length > LONG_TEXT_LENGTH:
        confidence -= LONG_TEXT_PENALTY
    if is_repeat_offender(context):
        confidence += REPEAT_OFFENDER_BOOST
    return _clamp(confidence)


def severity_for_reason(reason: Category, confidence: float) -> Severity:
    if reason in PINNED_SEVERITY:
        return PINNED_SEVERITY[reason]

    severity = BASE_SEVERITY[reason]
    if confidence > ESCALATION_THRESHOLD:
        return severity.escalate()
    return severity


def overall_severity(severities: Sequence[Severity]) -> Severity:
    return Severity.max_of(severities)


def apply_context_adjustments(
    confidence: float,
    reason_count: int,
    context: Optional[AnalysisContext] = None,
) -> float:
    """Fold the summed per-category confidence into one value in [0, 1].

    Order is fixed: multiplicity bonus, then the repeat-offender floor,
    then platform and audience nudges.
    """

    adjusted = confidence
    if reason_count > 1:
        adjusted += MULTI_REASON_BONUS * (reason_count - 1)

    if is_repeat_offender(context):
        adjusted = max(adjusted + REPEAT_OFFENDER_CONTEXT_BOOST, REPEAT_OFFENDER_FLOOR)

    if context is not None:
        adjusted += PLATFORM_BOOSTS.get(context.platform or "", 0.0)
        adjusted += AUDIENCE_BOOSTS.get(context.audience or "", 0.0)

    return _clamp(adjusted)


__all__ = [
    "BASE_SEVERITY",
    "PERSONAL_INFO_CONFIDENCE",
    "PINNED_SEVERITY",
    "apply_context_adjustments",
    "calculate_confidence",
    "overall_severity",
    "severity_for_reason",
]
