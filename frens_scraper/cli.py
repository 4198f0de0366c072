"""Command-line entry point for the scraper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from . import __version__
from .config import DEFAULT_BASE_URL, SNAPSHOT_BASE_DIR, ScrapeConfig
from .crawler import walk
from .errors import LogInitError, ScrapeError
from .fetch import PageFetcher
from .output import write_rows

logger = logging.getLogger("frens_scraper.cli")

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVELS = (
    logging.CRITICAL + 1,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)


def select_log_level(verbosity: int) -> int:
    """Map the number of ``-v`` flags to a logging level (0 disables logging)."""
    if verbosity < len(LOG_LEVELS):
        return LOG_LEVELS[max(verbosity, 0)]
    return TRACE


def init_logging(verbosity: int) -> None:
    try:
        logging.basicConfig(
            level=select_log_level(verbosity),
            format="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
            force=True,
        )
    except (ValueError, TypeError) as exc:
        raise LogInitError(f"Logging initialization error: {exc}") from exc


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="frens-scraper",
        description="Scrape the user directory into CSV rows on standard output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Level of verbosity (repeat up to five times)",
    )
    parser.add_argument(
        "--base",
        default=DEFAULT_BASE_URL,
        help="The base URL",
    )
    parser.add_argument(
        "--disable-snapshot",
        action="store_true",
        help="Disable local copy",
    )
    parser.add_argument(
        "--snapshot-dir",
        default=SNAPSHOT_BASE_DIR,
        type=Path,
        help="Directory where timestamped snapshots are written",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ScrapeConfig:
    return ScrapeConfig(
        base_url=args.base,
        snapshot_root=None if args.disable_snapshot else args.snapshot_dir,
        verbosity=args.verbose,
    )


def run(config: ScrapeConfig, stream: TextIO | None = None) -> int:
    """Walk the site described by ``config`` and write rows to ``stream``."""
    stream = stream or sys.stdout
    if config.snapshot_enabled:
        logger.info("Writing snapshot to %s", config.snapshot_root / config.run_timestamp)
    with PageFetcher() as fetcher:
        rows = walk(
            config.base_url,
            config.snapshot_root,
            run_timestamp=config.run_timestamp,
            fetcher=fetcher,
        )
        count = write_rows(rows, stream)
    logger.info("Wrote %d rows", count)
    return count


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        init_logging(args.verbose)
        run(build_config(args))
    except ScrapeError as exc:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
