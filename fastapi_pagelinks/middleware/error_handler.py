"""Pagination error handling middleware."""

import logging
from typing import Any

from starlette.responses import PlainTextResponse

from fastapi_pagelinks.core.errors import PaginationError

logger = logging.getLogger(__name__)


class PaginationErrorMiddleware:
    """Turn pagination errors raised during rendering into a 500 response."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Log the error and answer with a plain-text error page."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except PaginationError as exc:
            logger.exception("Pagination links could not be rendered for %s", scope.get("path"))
            response = PlainTextResponse(
                f"Internal Server Error: {exc}",
                status_code=500,
            )
            await response(scope, receive, send)
