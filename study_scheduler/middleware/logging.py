import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        logger.info("Request: %s %s", request.method, request.url)
        logger.debug("Headers: %s", dict(request.headers))

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "Response: %s %s -> %d in %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        return response
