"""Configuration objects and constants for the scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

DEFAULT_BASE_URL = "https://findmyfrens.net/"
SNAPSHOT_BASE_DIR = Path("snapshot")
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def format_timestamp(moment: datetime) -> str:
    """Render a moment as the name of a snapshot run directory."""
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass
class ScrapeConfig:
    """Top-level settings that control a single scrape run."""

    base_url: str = DEFAULT_BASE_URL
    snapshot_root: Optional[Path] = SNAPSHOT_BASE_DIR
    verbosity: int = 0
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def run_timestamp(self) -> str:
        return format_timestamp(self.started_at)

    @property
    def snapshot_enabled(self) -> bool:
        return self.snapshot_root is not None
