"""Interface layer error handling.

Protected JSON endpoints answer a missing session with a structured 401,
never a redirect. Login and callback routes handle their own errors by
redirecting to the frontend.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hub.domain.error import UnauthorizedError

logger = logging.getLogger(__name__)


async def unauthorized_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn UnauthorizedError into a 401 JSON body."""
    logger.info(f"Unauthorized request: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"error": "Unauthorized"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register application-wide exception handlers."""
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
