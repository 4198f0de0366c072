"""Data models used throughout the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Link:
    """Raw anchor discovered on a page: unresolved href plus inner markup."""

    url: str
    label: str


@dataclass(frozen=True)
class AssetRef:
    """Stylesheet or image referenced by a page and where to store it."""

    source_url: str
    filename: str


@dataclass(frozen=True)
class Row:
    """One output record correlating a user with one of their titled links."""

    screen_name: str
    display_name: str
    title: str
    url: str

    def as_record(self) -> Tuple[str, str, str, str]:
        return (self.screen_name, self.display_name, self.title, self.url)
