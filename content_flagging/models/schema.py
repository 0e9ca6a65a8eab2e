"""Pydantic schemas for the HTTP API.

Tip: request models accept loosely shaped JSON so the routers can report
fixed error codes themselves; response models use the camelCase field
names clients expect.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from content_flagging.models.types import Category, FlagResponse, FlagResult, Severity


class ContentPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    user_id: Optional[str] = Field(alias="userId", default=None)
    type: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None


class ContextPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    platform: Optional[str] = None
    audience: Optional[str] = None
    previous_flags: Optional[int] = Field(alias="previousFlags", default=None, ge=0)


class FlagContentRequest(BaseModel):
    content: Optional[ContentPayload] = None
    context: Optional[ContextPayload] = None


class BatchFlagRequest(BaseModel):
    # Checked by the router so a non-list gets INVALID_BATCH_FORMAT.
    requests: Any = None


class FlagResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_flagged: bool = Field(alias="isFlagged")
    severity: Severity
    reasons: list[Category]
    confidence: float
    details: Optional[str] = None

    @classmethod
    def from_result(cls, result: FlagResult) -> "FlagResultModel":
        return cls(
            is_flagged=result.is_flagged,
            severity=result.severity,
            reasons=list(result.reasons),
            confidence=result.confidence,
            details=result.details,
        )


class FlagContentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    request_id: str = Field(alias="requestId")
    result: FlagResultModel
    processing_time_ms: float = Field(alias="processingTimeMs")
    timestamp: dt.datetime

    @classmethod
    def from_response(cls, response: FlagResponse) -> "FlagContentResponse":
        return cls(
            request_id=response.request_id,
            result=FlagResultModel.from_result(response.result),
            processing_time_ms=response.processing_time_ms,
            timestamp=response.timestamp,
        )


class BatchItemError(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    request_id: str = Field(alias="requestId")
    error: str
    result: None = None
    processing_time_ms: float = Field(alias="processingTimeMs", default=0)
    timestamp: dt.datetime


class BatchFlagResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    batch_id: str = Field(alias="batchId")
    total_requests: int = Field(alias="totalRequests")
    successful_requests: int = Field(alias="successfulRequests")
    failed_requests: int = Field(alias="failedRequests")
    responses: list[FlagContentResponse | BatchItemError]


class FlagReasonsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    supported_reasons: list[Category] = Field(alias="supportedReasons")
    description: str


class HealthResponse(BaseModel):
    status: str
    timestamp: dt.datetime
    version: str


class ErrorResponse(BaseModel):
    error: str
    code: str
    message: Optional[str] = None
    path: Optional[str] = None


__all__ = [
    "BatchFlagRequest",
    "BatchFlagResponse",
    "BatchItemError",
    "ContentPayload",
    "ContextPayload",
    "ErrorResponse",
    "FlagContentRequest",
    "FlagContentResponse",
    "FlagReasonsResponse",
    "FlagResultModel",
    "HealthResponse",
]
