"""
Gate for destructive (POST/PUT/DELETE) routes.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request, status

from . import config

logger = logging.getLogger(__name__)

DISABLED_MESSAGE = (
    "This endpoint is disabled to protect the production database. "
    "To enable it locally, set ENABLE_DESTRUCTIVE_ENDPOINTS=true in your environment."
)
DISABLED_DOCUMENTATION = "Run the API locally against your own database to use the write endpoints."


async def require_destructive_endpoints(request: Request) -> None:
    if config.destructive_endpoints_enabled():
        return None

    logger.info("destructive_endpoint_refused method=%s path=%s", request.method, request.url.path)
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail={
            "error": f"{request.method} endpoint is disabled in production",
            "message": DISABLED_MESSAGE,
            "documentation": DISABLED_DOCUMENTATION,
        },
    )
