"""Health check and API description."""
from __future__ import annotations

import datetime as dt

from fastapi import APIRouter

from content_flagging.deps.settings import settings
from content_flagging.models.schema import HealthResponse

router = APIRouter(tags=["meta"])

CONTENT_BODY = {
    "id": "string (required)",
    "userId": "string (required)",
    "type": "text|image|video|link (required)",
    "text": "string (optional)",
    "url": "string (optional)",
    "metadata": "object (optional)",
}

CONTEXT_BODY = {
    "platform": "string (optional)",
    "audience": "string (optional)",
    "previousFlags": "number (optional)",
}


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="healthy",
        timestamp=dt.datetime.now(dt.timezone.utc),
        version=settings.app_version,
    )


@router.get("/api/docs")
def api_docs():
    """Static description of the public endpoints."""

    return {
        "title": settings.app_name,
        "version": settings.app_version,
        "description": "API for flagging problematic content before posting to social media",
        "endpoints": [
            {
                "method": "POST",
                "path": "/api/flag-content",
                "description": "Flag a single piece of content",
                "body": {"content": CONTENT_BODY, "context": CONTEXT_BODY},
            },
            {
                "method": "POST",
                "path": "/api/flag-content/batch",
                "description": "Flag multiple pieces of content in a single request",
                "body": {"requests": f"array of flag-content requests (max {settings.batch_max_size})"},
            },
            {
                "method": "GET",
                "path": "/api/flag-reasons",
                "description": "Get list of supported flag reasons",
            },
            {
                "method": "GET",
                "path": "/health",
                "description": "Health check endpoint",
            },
            {
                "method": "GET",
                "path": "/metrics",
                "description": "Prometheus metrics",
            },
        ],
    }
