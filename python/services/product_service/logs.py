"""Logging setup and per-request access logging."""

from __future__ import annotations

import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


async def log_requests(request: Request, call_next):
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("%s %s", request.method, target)

    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, target, response.status_code, elapsed_ms)
    return response
