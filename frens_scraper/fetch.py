"""HTTP retrieval of pages and assets."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .errors import HttpClientError

logger = logging.getLogger("frens_scraper")


class PageFetcher:
    """Issue plain GET requests through a shared ``requests`` session."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise HttpClientError(f"Failed to fetch {url}: {exc}") from exc
        return resp

    def fetch_text(self, url: str) -> str:
        """Return the decoded body of ``url``, as UTF-8 unless a charset is declared."""
        resp = self._get(url)
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = "utf-8"
        return resp.text

    def fetch_bytes(self, url: str) -> bytes:
        """Return the raw body of ``url``."""
        return self._get(url).content
