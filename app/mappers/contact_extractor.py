import re
from types import MappingProxyType
from typing import NamedTuple

from bs4 import BeautifulSoup

_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+",
    re.IGNORECASE,
)

# Optional country code, optional parens around the area code, optional
# separators (hyphen, dot, any Unicode space incl. &nbsp;). Loose on purpose:
# any 10-digit run matches. Digits and the trailing boundary are ASCII-only.
_PHONE_RE = re.compile(
    r"(?:\+?[0-9]{1,3}[-.\s\ufeff]?)?\(?[0-9]{3}\)?[-.\s\ufeff]?[0-9]{3}[-.\s\ufeff]?[0-9]{4}"
    r"(?![0-9A-Za-z_])",
)


class SocialPlatform(NamedTuple):
    pattern: re.Pattern[str]
    base: str


def _platform(domain: str) -> SocialPlatform:
    pattern = re.compile(
        r"(?:https?://)?(?:www\.)?" + re.escape(domain) + r"/[a-zA-Z0-9_\-.]+/?"
    )
    return SocialPlatform(pattern=pattern, base=f"https://{domain}/")


SOCIAL_PLATFORMS: MappingProxyType[str, SocialPlatform] = MappingProxyType({
    "twitter": _platform("twitter.com"),
    "facebook": _platform("facebook.com"),
    "linkedin": _platform("linkedin.com"),
    "instagram": _platform("instagram.com"),
})


def _unique(matches: list[str]) -> list[str]:
    return list(dict.fromkeys(matches))


def page_text(html: str) -> str:
    """Visible text of the document body (whole document if there is no <body>)."""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup
    return root.get_text(separator=" ")


def extract_emails(text: str) -> list[str]:
    """Distinct email addresses in first-seen order."""
    return _unique(_EMAIL_RE.findall(text))


def extract_phones(text: str) -> list[str]:
    """Distinct phone-like digit runs in first-seen order."""
    return _unique([m.group(0) for m in _PHONE_RE.finditer(text)])


def _canonical_link(match: str, base: str) -> str | None:
    """Keep scheme-prefixed matches as-is; rebuild the rest from the handle.

    A handle with no letter or digit (e.g. "www.facebook.com/./") yields None.
    """
    if match.startswith("http"):
        return match
    handle = match.rstrip("/").split("/")[-1]
    if not any(c.isalnum() for c in handle):
        return None
    return base + handle


def extract_social_links(html: str) -> dict[str, str]:
    """First profile link per platform found in raw HTML.

    Platforms without a usable match are left out.
    """
    links: dict[str, str] = {}
    for name, platform in SOCIAL_PLATFORMS.items():
        for match in platform.pattern.finditer(html):
            link = _canonical_link(match.group(0), platform.base)
            if link:
                links[name] = link
                break
    return links
