import logging
import re

import httpx

from app.config import DEFAULT_USER_AGENT
from app.exceptions.custom import FetchError
from app.schemas.scrape import FetchedPage

logger = logging.getLogger(__name__)

_TIMEOUT = 10.0
_MAX_REDIRECTS = 5

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Prepend https:// to URLs without an http(s) scheme."""
    url = url.strip()
    if _SCHEME_RE.match(url):
        return url
    return f"https://{url}"


def strip_www(host: str) -> str:
    return host.removeprefix("www.")


def _error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def build_client(
    timeout: float = _TIMEOUT,
    max_redirects: int = _MAX_REDIRECTS,
) -> httpx.AsyncClient:
    """Shared client for page fetches; the redirect cap lives on the client."""
    return httpx.AsyncClient(
        timeout=timeout,
        max_redirects=max_redirects,
        follow_redirects=True,
    )


class PageFetcher:
    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = _TIMEOUT,
    ):
        self._client = client
        self._user_agent = user_agent
        self._timeout = timeout

    async def fetch(self, url: str) -> FetchedPage:
        """GET a page. Raises FetchError on any transport, status or decode failure."""
        target = normalize_url(url)
        try:
            resp = await self._client.get(
                target,
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
            )
            resp.raise_for_status()
            html = resp.text
            domain = strip_www(httpx.URL(target).host)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError, LookupError) as exc:
            logger.debug("Failed to fetch %s: %r", target, exc)
            raise FetchError(_error_message(exc), url) from exc

        return FetchedPage(
            requested_url=target,
            final_url=str(resp.url),
            domain=domain,
            html=html,
        )
