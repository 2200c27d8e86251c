"""Request logging middleware."""

import logging
import time

from fastapi import FastAPI, Request, status

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    """Log every request and report its handling time in a response header."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        # Stays 500 when the handler raises; the error stage builds that response
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Process-Time"] = f"{time.perf_counter() - start:.4f}"
            return response
        finally:
            elapsed = time.perf_counter() - start
            logger.info(f"{request.method} {request.url.path} -> {status_code} ({elapsed:.3f}s)")
