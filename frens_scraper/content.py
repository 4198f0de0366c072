"""HTML parsing and the fixed selector queries run against each page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from .errors import InvalidHtmlError, UrlError
from .models import AssetRef, Link
from .utils import last_segment

logger = logging.getLogger("frens_scraper")


@dataclass(frozen=True)
class Query:
    """Named CSS selector plus the attribute that carries its reference."""

    name: str
    selector: str
    attribute: Optional[str] = "href"


# Index page
INDEX_LINKS = Query("index link", "body > a")

# Profile page
PROFILE_LINKS = Query("profile link", "body > main > a")
PROFILE_IMAGE = Query("profile image", "body > main > img", "src")
PROFILE_HEADING = Query("profile heading", "body > main > h1", None)

# Chrome shared by every page
STYLESHEET = Query("stylesheet link", "head > link[rel='stylesheet']")
BANNER_IMAGE = Query("banner image", "body > header > img", "src")


@dataclass
class ParsedPage:
    """A fetched page parsed into a queryable document."""

    url: str
    soup: BeautifulSoup


def parse_document(html: str, url: str) -> ParsedPage:
    return ParsedPage(url=url, soup=BeautifulSoup(html, "html5lib"))


def resolve_url(base_url: str, reference: str) -> str:
    """Resolve ``reference`` against ``base_url``, raising ``UrlError`` on bad input."""
    try:
        return urljoin(base_url, reference)
    except ValueError as exc:
        raise UrlError(f"Cannot resolve {reference!r} against {base_url}: {exc}") from exc


def extract_links(page: ParsedPage, query: Query) -> List[Link]:
    """Return every link matched by ``query`` in document order."""
    links: List[Link] = []
    for anchor in page.soup.select(query.selector):
        href = anchor.get(query.attribute)
        if href is None:
            raise InvalidHtmlError(f"Missing {query.attribute} for {query.name} on {page.url}")
        links.append(Link(url=href, label=anchor.decode_contents()))
    logger.debug("Found %d %s element(s) on %s", len(links), query.name, page.url)
    return links


def extract_asset(page: ParsedPage, query: Query) -> Optional[AssetRef]:
    """Locate the first element matched by ``query`` and describe its asset.

    The filename comes from the raw attribute value while the download URL is
    resolved against the page's own URL.
    """
    element = page.soup.select_one(query.selector)
    if element is None:
        return None
    reference = element.get(query.attribute)
    if reference is None:
        raise InvalidHtmlError(f"Missing {query.attribute} for {query.name} on {page.url}")
    try:
        filename = last_segment(reference)
    except InvalidHtmlError as exc:
        raise InvalidHtmlError(f"Invalid {query.attribute} for {query.name} on {page.url}") from exc
    return AssetRef(source_url=resolve_url(page.url, reference), filename=filename)


def extract_heading(page: ParsedPage) -> Optional[str]:
    heading = page.soup.select_one(PROFILE_HEADING.selector)
    if heading is None:
        return None
    return heading.decode_contents().strip()


def check_heading(page: ParsedPage, display_name: str) -> bool:
    """Compare the profile heading with the expected display name.

    A mismatch is logged as a warning and never fails the run. Pages without a
    heading pass.
    """
    heading = extract_heading(page)
    if heading is None or heading == display_name:
        return True
    logger.warning('Expected "%s", found "%s"', display_name, heading)
    return False
