import logging

from fastapi import APIRouter

from app.dependencies import BatchScraperDep
from app.exceptions.custom import BatchScrapeError
from app.mappers.result_presenter import present_results
from app.schemas.responses import ErrorResponse, ScrapeFailureResponse, ScrapeSuccessResponse
from app.schemas.scrape import ScrapeRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post(
    "/scrape",
    response_model=list[ScrapeSuccessResponse | ScrapeFailureResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def scrape(
    request: ScrapeRequest,
    service: BatchScraperDep,
) -> list[ScrapeSuccessResponse | ScrapeFailureResponse]:
    try:
        results = await service.run(request.urls)
    except Exception as exc:
        logger.exception("Batch scrape of %d URLs failed", len(request.urls))
        raise BatchScrapeError(str(exc) or exc.__class__.__name__) from exc
    return present_results(results)
