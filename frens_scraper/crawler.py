"""High-level orchestration of the index and profile walk."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional
from urllib.parse import urlsplit

from .config import format_timestamp
from .content import (
    INDEX_LINKS,
    PROFILE_LINKS,
    ParsedPage,
    check_heading,
    extract_links,
    parse_document,
    resolve_url,
)
from .errors import UrlError
from .fetch import PageFetcher
from .models import Link, Row
from .snapshot import snapshot_page
from .utils import screen_name_from_href

logger = logging.getLogger("frens_scraper")


def validate_base_url(base_url: str) -> str:
    """Reject base URLs that cannot anchor relative links."""
    try:
        parsed = urlsplit(base_url)
    except ValueError as exc:
        raise UrlError(f"Invalid base URL {base_url!r}: {exc}") from exc
    if not parsed.scheme or not parsed.netloc:
        raise UrlError(f"Invalid base URL {base_url!r}: relative URL without a base")
    return base_url


def get_html(
    fetcher: PageFetcher,
    url: str,
    snapshot_dir: Optional[Path] = None,
) -> ParsedPage:
    """Fetch and parse ``url``, mirroring it to ``snapshot_dir`` when given."""
    text = fetcher.fetch_text(url)
    page = parse_document(text, url)
    snapshot_page(page, text, snapshot_dir, fetcher)
    return page


def get_user(
    fetcher: PageFetcher,
    url: str,
    snapshot_dir: Optional[Path],
    screen_name: str,
    display_name: str,
) -> List[Link]:
    """Fetch one profile page and return its titled links."""
    logger.info("Downloading %s (%s)", screen_name, display_name)
    page = get_html(fetcher, url, snapshot_dir)
    check_heading(page, display_name)
    return extract_links(page, PROFILE_LINKS)


def walk(
    base_url: str,
    snapshot_root: Optional[Path] = None,
    *,
    run_timestamp: Optional[str] = None,
    fetcher: Optional[PageFetcher] = None,
) -> Iterator[Row]:
    """Yield one ``Row`` per profile link, user by user, in document order.

    Pages are mirrored under ``snapshot_root/<run_timestamp>`` when a root is
    given. The timestamp is fixed once for the whole walk.
    """
    validate_base_url(base_url)
    owns_fetcher = fetcher is None
    fetcher = fetcher or PageFetcher()
    try:
        yield from _walk_users(fetcher, base_url, snapshot_root, run_timestamp)
    finally:
        if owns_fetcher:
            fetcher.close()


def _walk_users(
    fetcher: PageFetcher,
    base_url: str,
    snapshot_root: Optional[Path],
    run_timestamp: Optional[str],
) -> Iterator[Row]:
    run_dir: Optional[Path] = None
    if snapshot_root is not None:
        if run_timestamp is None:
            run_timestamp = format_timestamp(datetime.now(timezone.utc))
        run_dir = Path(snapshot_root) / run_timestamp

    index = get_html(fetcher, base_url, run_dir)
    users = extract_links(index, INDEX_LINKS)
    logger.info("Downloading %d users", len(users))

    for user in users:
        user_url = resolve_url(base_url, user.url)
        screen_name = screen_name_from_href(user.url)
        user_dir = run_dir / screen_name if run_dir is not None else None

        for link in get_user(fetcher, user_url, user_dir, screen_name, user.label):
            yield Row(
                screen_name=screen_name,
                display_name=user.label,
                title=link.label,
                url=link.url,
            )
