"""Content flagging API."""
from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Optional

from fastapi import APIRouter, Body, HTTPException, status
from prometheus_client import Counter
from pydantic import ValidationError

from content_flagging.deps.settings import settings
from content_flagging.models.schema import (
    BatchFlagRequest,
    BatchFlagResponse,
    BatchItemError,
    FlagContentRequest,
    FlagContentResponse,
    FlagReasonsResponse,
)
from content_flagging.models.types import Category, FlagResponse
from content_flagging.services.flagging import process_content
from content_flagging.services.matcher import combine_text
from content_flagging.services.pii_rules import mask_pii
from content_flagging.services.validation import (
    ContentValidationError,
    check_batch_size,
    to_analysis_input,
)

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["flagging"])

FLAG_COUNTER = Counter("content_flags_total", "Flagged content by reason", ["reason"])


def _bad_request(exc: ContentValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": exc.message, "code": exc.code},
    )


def _flag(payload: FlagContentRequest) -> FlagResponse:
    content, context = to_analysis_input(payload)
    response = process_content(content, context)
    result = response.result
    if result.is_flagged:
        for reason in result.reasons:
            FLAG_COUNTER.labels(reason.value).inc()
        snippet = mask_pii(combine_text(content)[:100])
        LOGGER.info(
            "content flagged",
            extra={
                "request_id": response.request_id,
                "content_id": content.id,
                "user_id": content.user_id,
                "severity": result.severity.value,
                "snippet": snippet,
            },
        )
    return response


@router.post("/flag-content", response_model=FlagContentResponse)
def flag_content(payload: Optional[FlagContentRequest] = Body(default=None)):
    """Flag a single piece of content."""

    try:
        response = _flag(payload or FlagContentRequest())
    except ContentValidationError as exc:
        raise _bad_request(exc) from exc
    return FlagContentResponse.from_response(response)


@router.post("/flag-content/batch", response_model=BatchFlagResponse)
def flag_content_batch(payload: Optional[BatchFlagRequest] = Body(default=None)):
    """Flag up to ``BATCH_MAX_SIZE`` items; one bad item does not fail the batch."""

    try:
        requests = check_batch_size((payload or BatchFlagRequest()).requests, settings.batch_max_size)
    except ContentValidationError as exc:
        raise _bad_request(exc) from exc

    responses: list[FlagContentResponse | BatchItemError] = []
    for index, item in enumerate(requests):
        try:
            parsed = FlagContentRequest.model_validate(item)
            responses.append(FlagContentResponse.from_response(_flag(parsed)))
        except ContentValidationError as exc:
            responses.append(_batch_error(index, exc.message))
        except ValidationError:
            responses.append(_batch_error(index, "Invalid request format"))

    failed = sum(1 for r in responses if isinstance(r, BatchItemError))
    return BatchFlagResponse(
        batch_id=f"batch_{int(time.time() * 1000)}",
        total_requests=len(requests),
        successful_requests=len(responses) - failed,
        failed_requests=failed,
        responses=responses,
    )


def _batch_error(index: int, message: str) -> BatchItemError:
    return BatchItemError(
        request_id=f"error_{index}_{int(time.time() * 1000)}",
        error=f"Request {index}: {message}",
        timestamp=dt.datetime.now(dt.timezone.utc),
    )


@router.get("/flag-reasons", response_model=FlagReasonsResponse)
def flag_reasons():
    """List every supported flag reason."""

    return FlagReasonsResponse(
        supported_reasons=list(Category),
        description="List of all supported content flagging reasons",
    )
