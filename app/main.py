import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.custom import BatchScrapeError
from app.exceptions.handlers import batch_scrape_error_handler, validation_error_handler
from app.routers.scrape import router as scrape_router
from app.services.batch_scraper import BatchScraperService
from app.services.page_fetcher import PageFetcher, build_client

logger = logging.getLogger(__name__)

settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with build_client(settings.fetch_timeout, settings.max_redirects) as client:
        fetcher = PageFetcher(
            client,
            user_agent=settings.user_agent,
            timeout=settings.fetch_timeout,
        )
        app.state.batch_scraper = BatchScraperService(
            fetcher, window_size=settings.window_size
        )
        logger.info(
            "Contact scraper ready: POST /api/scrape (window=%d, timeout=%.0fs)",
            settings.window_size, settings.fetch_timeout,
        )

        yield


app = FastAPI(title="Contact Scraper", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(BatchScrapeError, batch_scrape_error_handler)

app.include_router(scrape_router)
