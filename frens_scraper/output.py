"""CSV serialization of scraped rows."""

from __future__ import annotations

import csv
import logging
from typing import Iterable, TextIO

from .errors import CsvError
from .models import Row

logger = logging.getLogger("frens_scraper")


def write_rows(rows: Iterable[Row], stream: TextIO) -> int:
    """Write rows as header-less CSV, flushing each one as it arrives."""
    writer = csv.writer(stream, lineterminator="\n")
    count = 0
    for row in rows:
        try:
            writer.writerow(row.as_record())
        except csv.Error as exc:
            raise CsvError(f"Failed to write row for {row.screen_name}: {exc}") from exc
        stream.flush()
        count += 1
    logger.debug("Wrote %d rows", count)
    return count
