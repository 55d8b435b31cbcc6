# services/api/seopages/logging_mw.py

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings

LOG = logging.getLogger("seopages")

REDACT_HEADERS = {"authorization", "cookie", "set-cookie", "x-csrf-token", "x-bootstrap-token"}

_REQUEST_FIELDS = ("request_id", "method", "path", "status", "duration_ms")

def _redact_headers(headers: dict) -> dict:
    out = {}
    for k, v in headers.items():
        lk = k.lower()
        if lk in REDACT_HEADERS:
            out[k] = "[REDACTED]"
        else:
            # keep small; avoid huge header spam
            out[k] = v if len(v) < 200 else (v[:200] + "…")
    return out

class _RequestFieldsFilter(logging.Filter):
    # lets the shared format string work for records logged outside a request
    def filter(self, record: logging.LogRecord) -> bool:
        for name in _REQUEST_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, "-")
        return True

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        rid = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = rid
        start = time.time()

        # Don't log request body (page content can be large)
        safe_headers = _redact_headers(dict(request.headers))

        try:
            response: Response = await call_next(request)
            status = response.status_code
        except Exception:
            status = 500
            raise
        finally:
            dur_ms = int((time.time() - start) * 1000)

            LOG.info(
                "request",
                extra={
                    "request_id": rid,
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.url.query)[:400],
                    "status": status,
                    "duration_ms": dur_ms,
                    "client": request.client.host if request.client else None,
                    "headers": safe_headers,
                },
            )

        response.headers["X-Request-Id"] = rid
        return response

def configure_logging():
    logging.basicConfig(
        level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(levelname)s %(name)s %(message)s | %(request_id)s %(method)s %(path)s %(status)s %(duration_ms)s",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, _RequestFieldsFilter) for f in handler.filters):
            handler.addFilter(_RequestFieldsFilter())
