import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import OrchestrationError

logger = logging.getLogger(__name__)


async def orchestration_error_handler(_request: Request, exc: OrchestrationError) -> JSONResponse:
    logger.error("Scrape run failed: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": exc.message},
    )
