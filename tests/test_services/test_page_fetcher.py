"""Tests for PageFetcher."""

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import FetchError
from app.services.page_fetcher import PageFetcher, build_client, normalize_url, strip_www


@pytest.fixture
def client():
    return build_client()


@pytest.fixture
def fetcher(client):
    return PageFetcher(client, user_agent="TestBrowser/1.0")


# --- URL helpers ---


def test_normalize_adds_https():
    assert normalize_url("example.com") == "https://example.com"


def test_normalize_keeps_existing_scheme():
    assert normalize_url("http://example.com/a") == "http://example.com/a"
    assert normalize_url("HTTPS://Example.com") == "HTTPS://Example.com"


def test_normalize_scheme_must_be_prefix():
    assert normalize_url("httpbin.org") == "https://httpbin.org"


def test_normalize_trims_whitespace():
    assert normalize_url("  example.com ") == "https://example.com"


def test_strip_www_only_leading():
    assert strip_www("www.acme.com") == "acme.com"
    assert strip_www("shop.www.acme.com") == "shop.www.acme.com"


# --- Fetch ---


@respx.mock
async def test_fetch_returns_page(fetcher):
    route = respx.get("https://www.acme.com").mock(
        return_value=Response(200, html="<html><body>hi</body></html>")
    )

    page = await fetcher.fetch("www.acme.com")

    assert page.requested_url == "https://www.acme.com"
    assert page.domain == "acme.com"
    assert "hi" in page.html
    assert route.calls.last.request.headers["User-Agent"] == "TestBrowser/1.0"


@respx.mock
async def test_fetch_follows_redirect(fetcher):
    respx.get("https://acme.com/new").mock(return_value=Response(200, html="<p>moved</p>"))
    respx.get("https://acme.com").mock(
        return_value=Response(301, headers={"location": "https://acme.com/new"})
    )

    page = await fetcher.fetch("https://acme.com")

    assert page.final_url == "https://acme.com/new"
    assert page.requested_url == "https://acme.com"
    assert "moved" in page.html


@respx.mock
async def test_redirect_limit_raises(fetcher):
    route = respx.get("https://loop.com").mock(
        return_value=Response(302, headers={"location": "https://loop.com"})
    )

    with pytest.raises(FetchError) as excinfo:
        await fetcher.fetch("https://loop.com")

    assert "redirect" in excinfo.value.message.lower()
    assert route.called


def _mock_redirect_chain(hops: int, final_ok: bool = True):
    """hops.com/0 -> /1 -> ... -> /<hops>; the last hop answers 200 when final_ok."""
    routes = [
        respx.get(f"https://hops.com/{i}").mock(
            return_value=Response(302, headers={"location": f"https://hops.com/{i + 1}"})
        )
        for i in range(hops)
    ]
    if final_ok:
        routes.append(
            respx.get(f"https://hops.com/{hops}").mock(
                return_value=Response(200, html="<p>arrived</p>")
            )
        )
    return routes


@respx.mock
async def test_five_redirect_hops_allowed(fetcher):
    routes = _mock_redirect_chain(5)

    page = await fetcher.fetch("https://hops.com/0")

    assert page.final_url == "https://hops.com/5"
    assert "arrived" in page.html
    assert all(r.call_count == 1 for r in routes)


@respx.mock
async def test_sixth_redirect_hop_raises(fetcher):
    routes = _mock_redirect_chain(6, final_ok=False)

    with pytest.raises(FetchError) as excinfo:
        await fetcher.fetch("https://hops.com/0")

    assert "redirect" in excinfo.value.message.lower()
    assert all(r.call_count == 1 for r in routes)


@respx.mock
async def test_request_uses_ten_second_timeout(fetcher):
    route = respx.get("https://acme.com").mock(return_value=Response(200, html="<p>ok</p>"))

    await fetcher.fetch("https://acme.com")

    timeout = route.calls.last.request.extensions["timeout"]
    assert timeout == {"connect": 10.0, "read": 10.0, "write": 10.0, "pool": 10.0}


@respx.mock
async def test_timeout_raises_fetch_error(fetcher):
    respx.get("https://slow.com").mock(side_effect=httpx.ReadTimeout("timed out"))

    with pytest.raises(FetchError) as excinfo:
        await fetcher.fetch("slow.com")

    assert excinfo.value.message == "timed out"
    assert excinfo.value.url == "slow.com"


@respx.mock
async def test_connect_error_without_message_uses_class_name(fetcher):
    respx.get("https://down.com").mock(side_effect=httpx.ConnectError(""))

    with pytest.raises(FetchError) as excinfo:
        await fetcher.fetch("https://down.com")

    assert excinfo.value.message == "ConnectError"


@respx.mock
async def test_error_status_raises(fetcher):
    respx.get("https://acme.com/missing").mock(return_value=Response(404))

    with pytest.raises(FetchError) as excinfo:
        await fetcher.fetch("https://acme.com/missing")

    assert "404" in excinfo.value.message


@respx.mock
async def test_default_user_agent_is_desktop_browser(client):
    route = respx.get("https://acme.com").mock(return_value=Response(200, html="<p>ok</p>"))

    await PageFetcher(client).fetch("https://acme.com")

    assert route.calls.last.request.headers["User-Agent"].startswith("Mozilla/5.0")
