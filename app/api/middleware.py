import time
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.config import settings
from app.core.logger import logger

def format_request_log(method: str, path: str, status_code: int, duration_ms: int,
                       body: Optional[str] = None, max_length: int = 80) -> str:
    """
    'GET /api/bookings 200 in 3ms :: [...]', cut to max_length with a trailing ellipsis.
    """
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if body:
        line += f" :: {body}"
    if len(line) > max_length:
        line = line[:max_length - 1] + "…"
    return line

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per API request, including the JSON it answered with."""

    def __init__(self, app, prefix: str = None, max_length: int = None):
        super().__init__(app)
        self.prefix = prefix or settings.API_PREFIX
        self.max_length = max_length or settings.REQUEST_LOG_MAX_LENGTH

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)

        if not request.url.path.startswith(self.prefix):
            return response

        body_text = None
        if response.headers.get("content-type", "").startswith("application/json"):
            # Streaming body can only be read once, so rebuild the response
            body = b""
            async for chunk in response.body_iterator:
                body += chunk
            body_text = body.decode("utf-8", errors="replace")
            response = Response(
                content=body,
                status_code=response.status_code,
                headers=dict(response.headers),
                media_type=response.media_type,
            )

        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(format_request_log(
            request.method, request.url.path, response.status_code, duration_ms,
            body=body_text, max_length=self.max_length
        ))
        return response
