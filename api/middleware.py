"""Request access logging"""

import logging
import time

from fastapi import Request

logger = logging.getLogger("api.access")


async def access_log_middleware(request: Request, call_next):
    """Log one line per request: client, method, path, status, latency"""
    started = time.perf_counter()
    client = request.client.host if request.client else "-"
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f'{client} "{request.method} {request.url.path}" 500 {elapsed_ms:.1f}ms')
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f'{client} "{request.method} {request.url.path}" {response.status_code} {elapsed_ms:.1f}ms')
    return response
