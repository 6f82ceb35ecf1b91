from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds ``max_bytes``.

    Only the header is checked: chunked bodies without a Content-Length are
    not capped and are buffered in full by the upload handlers.
    """

    def __init__(self, app, max_bytes: int = 20 * 1024 * 1024):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request, call_next):
        length = request.headers.get("content-length")
        try:
            size = int(length) if length is not None else None
        except ValueError:
            size = None
        if size is not None and size > self.max_bytes:
            logger.warning("Rejected %s %s: body of %d bytes", request.method, request.url.path, size)
            return JSONResponse(
                status_code=413,
                content={"detail": "Request body exceeds allowed size."},
            )
        return await call_next(request)
