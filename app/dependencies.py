from typing import Annotated

from fastapi import Depends, Request

from app.services.batch_scraper import BatchScraperService


def get_batch_scraper(request: Request) -> BatchScraperService:
    return request.app.state.batch_scraper


BatchScraperDep = Annotated[BatchScraperService, Depends(get_batch_scraper)]
