"""Exception types raised by the scraper.

Every error is fatal to a run; the command line reports the message and exits
with a non-zero status.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for all scraper failures."""


class LogInitError(ScrapeError):
    """Logging could not be configured."""


class FilesystemError(ScrapeError):
    """A snapshot directory or file could not be written."""


class HttpClientError(ScrapeError):
    """A request failed in transport or returned a non-success status."""


class UrlError(ScrapeError):
    """A URL was malformed or could not be resolved against its base."""


class CsvError(ScrapeError):
    """A row could not be serialized to CSV."""


class InvalidHtmlError(ScrapeError):
    """A page is missing an expected attribute or holds an unusable reference."""
