"""Offline mirroring of a fetched page and the assets it references."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .content import BANNER_IMAGE, PROFILE_IMAGE, STYLESHEET, ParsedPage, extract_asset
from .errors import FilesystemError
from .fetch import PageFetcher

logger = logging.getLogger("frens_scraper")

INDEX_FILENAME = "index.html"
SNAPSHOT_ASSETS = (STYLESHEET, BANNER_IMAGE, PROFILE_IMAGE)


def _write(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise FilesystemError(f"Failed to write {path}: {exc}") from exc


def save_file(fetcher: PageFetcher, url: str, path: Path) -> None:
    """Download ``url`` and store the body at ``path``."""
    data = fetcher.fetch_bytes(url)
    _write(path, data)
    logger.debug("Saved %s to %s (%d bytes)", url, path, len(data))


def snapshot_page(
    page: ParsedPage,
    raw_html: str,
    target_dir: Optional[Path],
    fetcher: PageFetcher,
) -> None:
    """Persist ``raw_html`` and its stylesheet, banner and profile image.

    Does nothing when ``target_dir`` is ``None``. Steps run in a fixed order
    and the first failure aborts the snapshot.
    """
    if target_dir is None:
        return

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Failed to create {target_dir}: {exc}") from exc
    _write(target_dir / INDEX_FILENAME, raw_html.encode("utf-8"))

    for query in SNAPSHOT_ASSETS:
        asset = extract_asset(page, query)
        if asset is not None:
            save_file(fetcher, asset.source_url, target_dir / asset.filename)
    logger.debug("Snapshot of %s written to %s", page.url, target_dir)
