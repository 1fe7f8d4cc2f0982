import asyncio
import logging
from collections.abc import Iterator, Sequence

from app.exceptions.custom import FetchError
from app.mappers.contact_extractor import (
    extract_emails,
    extract_phones,
    extract_social_links,
    page_text,
)
from app.schemas.scrape import FetchedPage, ScrapeFailure, ScrapeResult, ScrapeSuccess
from app.services.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

WINDOW_SIZE = 3


def iter_windows(urls: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Consecutive slices of at most `size` URLs."""
    if size < 1:
        raise ValueError(f"window size must be >= 1, got {size}")
    for start in range(0, len(urls), size):
        yield urls[start:start + size]


def build_success(page: FetchedPage) -> ScrapeSuccess:
    text = page_text(page.html)
    return ScrapeSuccess(
        website=page.requested_url,
        domain=page.domain,
        emails=extract_emails(text),
        phones=extract_phones(text),
        social=extract_social_links(page.html),
    )


class BatchScraperService:
    """Scrape contact data from URLs, at most `window_size` fetches at a time.

    Each window runs concurrently and must finish before the next one starts.
    Results come back in input order; a failing URL only affects its own record.
    """

    def __init__(self, fetcher: PageFetcher, window_size: int = WINDOW_SIZE):
        if window_size < 1:
            raise ValueError(f"window size must be >= 1, got {window_size}")
        self._fetcher = fetcher
        self._window_size = window_size

    @property
    def window_size(self) -> int:
        return self._window_size

    async def run(self, urls: Sequence[str]) -> list[ScrapeResult]:
        logger.info("Scraping %d URLs (window=%d)", len(urls), self._window_size)
        results: list[ScrapeResult] = []
        for window in iter_windows(urls, self._window_size):
            window_results = await asyncio.gather(
                *(self.scrape_one(url) for url in window)
            )
            results.extend(window_results)

        failed = sum(1 for r in results if isinstance(r, ScrapeFailure))
        logger.info(
            "Scrape finished: %d succeeded, %d failed",
            len(results) - failed, failed,
        )
        return results

    async def scrape_one(self, url: str) -> ScrapeResult:
        """Fetch and extract one URL. Never raises; errors become ScrapeFailure."""
        try:
            page = await self._fetcher.fetch(url)
            return build_success(page)
        except FetchError as exc:
            logger.info("Scrape failed for %s: %s", url, exc.message)
            return ScrapeFailure(website=url, error=exc.message)
        except Exception as exc:
            logger.exception("Unexpected error scraping %s", url)
            return ScrapeFailure(website=url, error=str(exc) or exc.__class__.__name__)
