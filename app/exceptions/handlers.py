import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .custom import BatchScrapeError

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = (
    "Invalid request: URLs array is required and must contain at least one URL"
)


async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Rejected scrape request: %s", exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": INVALID_REQUEST_MESSAGE},
    )


async def batch_scrape_error_handler(_request: Request, exc: BatchScrapeError) -> JSONResponse:
    logger.error("Batch scrape error: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": exc.message},
    )
