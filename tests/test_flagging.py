"""Flagging engine tests: verdicts for representative content."""
from __future__ import annotations

import re

import pytest

from content_flagging.models.types import (
    AnalysisContext,
    Category,
    ContentId,
    ContentItem,
    ContentType,
    Severity,
    UserId,
)
from content_flagging.services.flagging import analyze_content, generate_details, process_content


def make_item(text: str | None = None, url: str | None = None, content_type: ContentType = ContentType.TEXT) -> ContentItem:
    return ContentItem(
        id=ContentId("content_1"),
        user_id=UserId("user_1"),
        type=content_type,
        text=text,
        url=url,
    )


def test_empty_content_is_clean():
    result = analyze_content(make_item(text=""))
    assert result.is_flagged is False
    assert result.severity is Severity.LOW
    assert result.reasons == ()
    assert result.confidence == 0
    assert result.details is None


def test_missing_text_and_url_ignores_context():
    result = analyze_content(make_item(), AnalysisContext(previous_flags=10, audience="children"))
    assert result.is_flagged is False
    assert result.confidence == 0


def test_detects_spam():
    result = analyze_content(make_item("CLICK HERE FOR FREE MONEY!!! ACT NOW!!!"))
    assert result.is_flagged is True
    assert Category.SPAM in result.reasons
    assert result.confidence > 0.3
    # four spam rules hit in a short text, so spam escalates a tier
    assert result.severity is Severity.MEDIUM


def test_detects_hate_speech():
    result = analyze_content(make_item("All people are stupid and I hate them"))
    assert result.is_flagged is True
    assert Category.HATE_SPEECH in result.reasons
    assert result.severity is Severity.HIGH


def test_detects_violence():
    result = analyze_content(make_item("I will kill you with my gun"))
    assert result.is_flagged is True
    assert Category.VIOLENCE in result.reasons
    assert result.severity is Severity.CRITICAL


def test_detects_personal_information_once():
    result = analyze_content(make_item("My SSN is 123-45-6789 and my phone is 555-123-4567"))
    assert result.is_flagged is True
    assert result.reasons == (Category.PERSONAL_INFORMATION,)
    assert result.severity is Severity.HIGH
    assert result.confidence > 0.8


def test_detects_harassment():
    result = analyze_content(make_item("You should kill yourself"))
    assert result.is_flagged is True
    assert Category.HARASSMENT in result.reasons
    assert Category.VIOLENCE not in result.reasons
    assert result.severity is Severity.HIGH


def test_harassment_never_escalates():
    text = "You should kill yourself. Watch your back, you're dead, I know where you live"
    result = analyze_content(make_item(text))
    assert result.reasons == (Category.HARASSMENT,)
    assert result.confidence == 1.0
    assert result.severity is Severity.HIGH


def test_detects_phishing():
    result = analyze_content(make_item("Urgent action required! Verify your account now or it will be suspended!"))
    assert Category.PHISHING in result.reasons
    assert result.severity is Severity.HIGH


def test_detects_adult_content_and_misinformation():
    adult = analyze_content(make_item("Check out this adult content and porn"))
    assert Category.ADULT_CONTENT in adult.reasons
    assert adult.severity is Severity.MEDIUM

    misinformation = analyze_content(make_item("This conspiracy theory about government cover-up is real"))
    assert Category.MISINFORMATION in misinformation.reasons
    assert misinformation.severity is Severity.MEDIUM


def test_multiple_reasons_get_multiplicity_bonus():
    spam_only = analyze_content(make_item("click here"))
    harassment_only = analyze_content(make_item("watch your back"))
    both = analyze_content(make_item("click here or watch your back"))

    assert both.reasons == (Category.SPAM, Category.HARASSMENT)
    assert both.confidence > spam_only.confidence
    assert both.confidence > harassment_only.confidence
    assert both.confidence == 0.9


def test_reasons_follow_catalog_order():
    result = analyze_content(make_item("I hate spam, click here"))
    assert result.reasons == (Category.SPAM, Category.HATE_SPEECH, Category.INAPPROPRIATE_LANGUAGE)


def test_repeat_offender_floor_flags_without_hits():
    result = analyze_content(make_item("This is borderline spam content"), AnalysisContext(previous_flags=5))
    assert result.reasons == ()
    assert result.confidence >= 0.4
    assert result.is_flagged is True
    assert result.details == "Content appears to be clean"


def test_platform_and_audience_raise_confidence():
    twitter = analyze_content(make_item("This is borderline content"), AnalysisContext(platform="twitter"))
    children = analyze_content(make_item("This is borderline content"), AnalysisContext(audience="children"))
    assert twitter.confidence == 0.05
    assert children.confidence == 0.1
    assert twitter.is_flagged is False
    assert children.is_flagged is False


def test_url_only_content_is_scanned():
    result = analyze_content(make_item(url="https://bit.ly/suspicious-link", content_type=ContentType.LINK))
    assert result.is_flagged is True
    assert Category.SPAM in result.reasons


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("spam content", Severity.LOW),
        ("hate speech content", Severity.HIGH),
        ("violence with gun", Severity.CRITICAL),
    ],
)
def test_severity_levels(text, expected):
    assert analyze_content(make_item(text)).severity is expected


def test_long_text_lowers_confidence():
    text = "click here " + "lorem ipsum " * 100
    result = analyze_content(make_item(text))
    assert result.reasons == (Category.SPAM,)
    assert result.confidence == 0.1


@pytest.mark.parametrize(
    "text",
    [
        "CLICK HERE FOR FREE MONEY!!! You should kill yourself!!!",
        "I will kill you with my gun, you idiot, 123-45-6789, bit.ly/x porn conspiracy",
        "ok",
    ],
)
def test_confidence_is_bounded(text):
    result = analyze_content(make_item(text), AnalysisContext(previous_flags=7, platform="twitter", audience="children"))
    assert 0.0 <= result.confidence <= 1.0


def test_details_text():
    assert generate_details([], 0.0) == "Content appears to be clean"
    assert generate_details([Category.SPAM, Category.PHISHING], 0.86) == "Detected spam, phishing with 86% confidence"
    assert analyze_content(make_item("click here")).details == "Detected spam with 40% confidence"


def test_process_content_wraps_result():
    response = process_content(make_item("Clean content that should pass"))
    assert re.fullmatch(r"req_\d+_[a-z0-9]+", response.request_id)
    assert response.result.is_flagged is False
    assert response.result.reasons == ()
    assert 0 < response.processing_time_ms < 1000
    assert response.timestamp.tzinfo is not None


def test_process_content_generates_unique_ids():
    item = make_item("Test content")
    first = process_content(item)
    second = process_content(item)
    assert first.request_id != second.request_id
    assert first.processing_time_ms > 0
    assert second.processing_time_ms > 0
