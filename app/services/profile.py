"""
Profile signals: fetch a LinkedIn profile page and recover best-effort fields from its HTML.

Every field is produced by an ordered list of extraction rules. The first rule whose
pattern matches and whose cleaned candidate passes validation wins. When the page
cannot be fetched, the name is derived from the URL slug instead.
"""
import logging
import re
from collections.abc import Awaitable, Callable
from functools import partial
from typing import NamedTuple

import httpx

from app.models.prospect import ProfileSignals

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Awaitable[str]]

FALLBACK_NAME = "Professional"

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9,pt;q=0.8",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Cache-Control": "max-age=0",
}

# --- URL slug -> name ---------------------------------------------------------

_SLUG_RE = re.compile(r"linkedin\.com/in/([a-zA-Z0-9_-]+)")
_HEX_ID_SUFFIX_RE = re.compile(r"-[0-9a-f]{8,}$")
_SLUG_SPLIT_RE = re.compile(r"[-_]+")
NAME_SUFFIXES = frozenset({"jr", "sr", "phd", "mba", "md", "ceo", "cto", "cfo"})


def extract_name_from_url(url: str) -> str:
    """Derive a display name from the /in/<slug> part of a profile URL.

    Trailing hex ids, numbers, one-letter fragments and title suffixes are ignored.
    Returns "Professional" when nothing usable is left.
    """
    match = _SLUG_RE.search(url or "")
    if not match:
        return FALLBACK_NAME

    slug = _HEX_ID_SUFFIX_RE.sub("", match.group(1).lower())
    parts = [
        part
        for part in _SLUG_SPLIT_RE.split(slug)
        if len(part) >= 2 and not part.isdigit() and part not in NAME_SUFFIXES
    ]
    if not parts:
        return FALLBACK_NAME
    return " ".join(part[0].upper() + part[1:] for part in parts[:2])


# --- HTML heuristics ----------------------------------------------------------


class ExtractionRule(NamedTuple):
    label: str
    pattern: re.Pattern
    clean: Callable[[str], str | None]
    accept: Callable[[str], bool]


def _unescape(text: str) -> str:
    return text.replace("&amp;#39;", "'").replace("&#39;", "'").replace("&amp;", "&")


def _first_match(html: str, rules: tuple[ExtractionRule, ...]) -> str | None:
    for rule in rules:
        try:
            match = rule.pattern.search(html)
            if not match or not match.group(1):
                continue
            candidate = rule.clean(match.group(1))
        except (re.error, IndexError, TypeError) as e:
            logger.debug("Extraction rule %s failed: %s", rule.label, e)
            continue
        if candidate is not None and rule.accept(candidate):
            return candidate
    return None


_LINKEDIN_PIPE_SUFFIX = re.compile(r"\s*\|\s*LinkedIn.*$", re.IGNORECASE)
_LINKEDIN_DASH_SUFFIX = re.compile(r"\s*-\s*LinkedIn.*$", re.IGNORECASE)


def _clean_name(raw: str) -> str:
    name = raw.strip()
    name = _LINKEDIN_PIPE_SUFFIX.sub("", name)
    name = _LINKEDIN_DASH_SUFFIX.sub("", name)
    return _unescape(name)


def _valid_name(name: str) -> bool:
    return (
        2 < len(name) < 100
        and not name.isdigit()
        and re.search(r"[a-zA-Z]", name) is not None
        and "invalid" not in name.lower()
    )


NAME_RULES = (
    ExtractionRule("title_tag", re.compile(r"<title>([^-|]+)(?:\s*[-|]|$)", re.IGNORECASE), _clean_name, _valid_name),
    ExtractionRule("h1", re.compile(r"<h1[^>]*>([^<]+)<", re.IGNORECASE), _clean_name, _valid_name),
    ExtractionRule(
        "og_title",
        re.compile(r'<meta[^>]*property="og:title"[^>]*content="([^"]+)"', re.IGNORECASE),
        _clean_name,
        _valid_name,
    ),
    ExtractionRule(
        "meta_title",
        re.compile(r'<meta[^>]*name="title"[^>]*content="([^"]+)"', re.IGNORECASE),
        _clean_name,
        _valid_name,
    ),
)

_HEADLINE_RE = re.compile(r"I['’]?m a (.+?) with", re.IGNORECASE)


def _headline_from_description(content: str) -> str | None:
    match = _HEADLINE_RE.search(_unescape(content))
    if not match:
        return None
    return match.group(1).strip()


TITLE_RULES = (
    ExtractionRule(
        "description_headline",
        re.compile(r'<meta[^>]*name="description"[^>]*content="([^"]*passionate[^"]*developer[^"]*)', re.IGNORECASE),
        _headline_from_description,
        bool,
    ),
)

COMPANY_RULES = (
    ExtractionRule(
        "title_company",
        re.compile(r"<title>[^<]+\s*-\s*([^|]+)\s*\|\s*LinkedIn</title>", re.IGNORECASE),
        str.strip,
        lambda company: 0 < len(company) < 50,
    ),
)

LOCATION_RULES = (
    ExtractionRule(
        "description_location",
        re.compile(r'<meta[^>]*name="description"[^>]*content="[^"]*Location:\s*([^·]+)', re.IGNORECASE),
        str.strip,
        lambda location: 1 < len(location) < 100,
    ),
)

EXPERIENCE_RULES = (
    ExtractionRule(
        "description_years",
        re.compile(
            r'<meta[^>]*name="description"[^>]*content="[^"]*?(\d+\s*years?\s*of\s*experience[^"]*)',
            re.IGNORECASE,
        ),
        str.strip,
        bool,
    ),
)


def extract_name(html: str) -> str | None:
    return _first_match(html, NAME_RULES)


def extract_title(html: str) -> str | None:
    return _first_match(html, TITLE_RULES)


def extract_company(html: str) -> str | None:
    return _first_match(html, COMPANY_RULES)


def extract_location(html: str) -> str | None:
    return _first_match(html, LOCATION_RULES)


def extract_experience(html: str) -> tuple[str, ...]:
    found = _first_match(html, EXPERIENCE_RULES)
    return (found,) if found else ()


def extract_skills(html: str) -> tuple[str, ...]:
    # No reliable skills signal in public profile markup yet.
    return ()


def parse_profile_html(html: str, url: str) -> ProfileSignals:
    """Build profile signals from page HTML; the name falls back to the URL slug."""
    return ProfileSignals(
        name=extract_name(html) or extract_name_from_url(url),
        title=extract_title(html),
        company=extract_company(html),
        location=extract_location(html),
        experience=extract_experience(html),
        skills=extract_skills(html),
    )


# --- fetching -----------------------------------------------------------------


async def fetch_profile_html(url: str, timeout: float = 15.0) -> str:
    """GET the profile page with browser-like headers. Raises on network or HTTP errors."""
    async with httpx.AsyncClient(headers=BROWSER_HEADERS, follow_redirects=True, timeout=timeout) as client:
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.text


class ProfileScraper:
    def __init__(self, fetch_html: FetchFn | None = None, timeout: float = 15.0) -> None:
        self._fetch = fetch_html or partial(fetch_profile_html, timeout=timeout)

    async def scrape(self, url: str) -> ProfileSignals:
        """Fetch and parse the profile; any failure yields URL-derived signals only."""
        try:
            html = await self._fetch(url)
            return parse_profile_html(html, url)
        except Exception as e:
            logger.warning("Profile fetch failed for %s, using URL-derived name: %s", url, e)
            return ProfileSignals(name=extract_name_from_url(url))
