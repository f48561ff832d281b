import logging
import time
from typing import Awaitable, Callable
from fastapi import Request, Response

from src.common.exceptions import unexpected_exception_handler

logger = logging.getLogger("src.access")

CallNext = Callable[[Request], Awaitable[Response]]


async def respond_to_unexpected_errors(
    request: Request, call_next: CallNext
) -> Response:
    # Unhandled errors become a 500 here, inside the CORS and security header
    # middleware, instead of in Starlette's outermost error middleware.
    try:
        return await call_next(request)
    except Exception as exc:
        return unexpected_exception_handler(request, exc)


async def log_request(request: Request, call_next: CallNext) -> Response:
    start = time.perf_counter()
    response = await respond_to_unexpected_errors(request, call_next)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.2fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response
