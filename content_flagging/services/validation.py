"""Request validation for the flagging API.

Tip: the flagging engine assumes valid input. This module turns loosely
shaped request payloads into engine types, or fails with a fixed error code.
"""
from __future__ import annotations

from typing import Optional

from content_flagging.models.schema import ContextPayload, FlagContentRequest
from content_flagging.models.types import (
    AnalysisContext,
    ContentId,
    ContentItem,
    ContentType,
    UserId,
)

MISSING_CONTENT = "MISSING_CONTENT"
INVALID_CONTENT_FORMAT = "INVALID_CONTENT_FORMAT"
INVALID_CONTENT_TYPE = "INVALID_CONTENT_TYPE"
MISSING_CONTENT_DATA = "MISSING_CONTENT_DATA"
INVALID_BATCH_FORMAT = "INVALID_BATCH_FORMAT"
EMPTY_BATCH = "EMPTY_BATCH"
BATCH_SIZE_EXCEEDED = "BATCH_SIZE_EXCEEDED"
INTERNAL_ERROR = "INTERNAL_ERROR"
NOT_FOUND = "NOT_FOUND"

VALID_CONTENT_TYPES = [content_type.value for content_type in ContentType]


class ContentValidationError(ValueError):
    """Invalid request input, carrying the error code sent back to the client."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def build_context(payload: Optional[ContextPayload]) -> Optional[AnalysisContext]:
    """Copy only the context fields that were actually supplied."""

    if payload is None:
        return None
    return AnalysisContext(
        platform=payload.platform or None,
        audience=payload.audience or None,
        previous_flags=payload.previous_flags,
    )


def to_analysis_input(payload: FlagContentRequest) -> tuple[ContentItem, Optional[AnalysisContext]]:
    content = payload.content
    if content is None:
        raise ContentValidationError(MISSING_CONTENT, "Missing required field: content")
    if not content.id or not content.user_id or not content.type:
        raise ContentValidationError(
            INVALID_CONTENT_FORMAT, "Content must include id, userId, and type fields"
        )
    if content.type not in VALID_CONTENT_TYPES:
        raise ContentValidationError(
            INVALID_CONTENT_TYPE,
            f"Invalid content type. Must be one of: {', '.join(VALID_CONTENT_TYPES)}",
        )
    if not content.text and not content.url:
        raise ContentValidationError(
            MISSING_CONTENT_DATA, "Content must include either text or url field"
        )

    item = ContentItem(
        id=ContentId(content.id),
        user_id=UserId(content.user_id),
        type=ContentType(content.type),
        text=content.text or None,
        url=content.url or None,
        metadata=content.metadata or None,
    )
    return item, build_context(payload.context)


def check_batch_size(requests: object, max_size: int) -> list:
    if not isinstance(requests, list):
        raise ContentValidationError(INVALID_BATCH_FORMAT, "Requests must be an array")
    if not requests:
        raise ContentValidationError(EMPTY_BATCH, "Requests array cannot be empty")
    if len(requests) > max_size:
        raise ContentValidationError(
            BATCH_SIZE_EXCEEDED, f"Batch size cannot exceed {max_size} requests"
        )
    return requests


__all__ = [
    "ContentValidationError",
    "build_context",
    "check_batch_size",
    "to_analysis_input",
]
