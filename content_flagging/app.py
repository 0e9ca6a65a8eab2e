"""FastAPI entry point for the content flagging service.

Terms:
- Flag: a verdict that content should not be published as-is.
- Reason: the moderation category behind a flag (spam, violence, ...).
- Confidence: 0..1 score of how sure the verdict is.
- Context: optional platform/audience/prior-flag hints that adjust confidence.
"""
from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRouter
from prometheus_client import Counter, Histogram, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_flagging.deps.settings import settings
from content_flagging.routers import flagging, meta
from content_flagging.services.validation import (
    INTERNAL_ERROR,
    INVALID_BATCH_FORMAT,
    INVALID_CONTENT_FORMAT,
    NOT_FOUND,
)

REQUEST_COUNTER = Counter("api_requests_total", "Total API requests", ["method", "path", "status"])
REQUEST_LATENCY = Histogram("api_request_seconds", "API request latency", ["method", "path"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    logging.info("content flagging service starting", extra={"version": settings.app_version})
    yield
    logging.info("content flagging service stopped")


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Reuse the caller's request id when present so logs correlate across services.
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    request.state.request_id = request_id

    start = time.perf_counter()
    try:
        response: Response = await call_next(request)
    except Exception as exc:  # pylint: disable=broad-except
        logging.exception("Unhandled error", extra={"request_id": request_id})
        response = JSONResponse(
            {"error": "Internal server error", "code": INTERNAL_ERROR, "message": str(exc)},
            status_code=500,
        )
    finally:
        elapsed = time.perf_counter() - start
        REQUEST_COUNTER.labels(request.method, request.url.path, response.status_code).inc()
        REQUEST_LATENCY.labels(request.method, request.url.path).observe(elapsed)
        logging.info(
            "request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "elapsed": elapsed,
            },
        )
        response.headers["x-request-id"] = request_id
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render ``{"error", "code"}`` bodies; unknown routes become NOT_FOUND."""

    if isinstance(exc.detail, dict):
        return JSONResponse(exc.detail, status_code=exc.status_code)
    if exc.status_code in (404, 405):
        return JSONResponse(
            {"error": "Endpoint not found", "code": NOT_FOUND, "path": request.url.path},
            status_code=404,
        )
    code = INTERNAL_ERROR if exc.status_code >= 500 else INVALID_CONTENT_FORMAT
    return JSONResponse({"error": str(exc.detail), "code": code}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    code = INVALID_BATCH_FORMAT if request.url.path.endswith("/batch") else INVALID_CONTENT_FORMAT
    return JSONResponse({"error": "Request body is not a valid flagging request", "code": code}, status_code=400)


@app.get("/metrics")
async def metrics():
    """Prometheus scrape endpoint."""

    return Response(generate_latest(), media_type="text/plain; version=0.0.4")


routers: list[tuple[APIRouter, str]] = [
    (flagging.router, "/api"),
    (meta.router, ""),
]

for router, prefix in routers:
    app.include_router(router, prefix=prefix)


__all__ = ["app"]
