"""Utility helpers for URL path segments."""

from __future__ import annotations

from .errors import InvalidHtmlError


def last_segment(reference: str) -> str:
    """Return the final ``/``-delimited segment of a raw reference, unmodified.

    Query strings and fragments are kept as-is, so ``/img/banner.png?x=1``
    yields ``banner.png?x=1``. An empty final segment is rejected.
    """
    segment = reference.split("/")[-1]
    if not segment:
        raise InvalidHtmlError(f"Invalid reference {reference!r}: no trailing segment")
    return segment


def screen_name_from_href(href: str) -> str:
    """Derive a user's screen name from the raw href of their index link.

    Profiles live under a collection path (``/users/alice/``), so the name is
    the last segment once trailing slashes are trimmed, and it must have a
    parent segment above it. ``/users/`` names the collection itself.
    """
    segments = [segment for segment in href.rstrip("/").split("/") if segment]
    if len(segments) < 2:
        raise InvalidHtmlError(f"Missing screen name in {href!r}")
    return segments[-1]
