"""Scrape the findmyfrens directory into CSV rows, optionally mirroring pages."""

__version__ = "0.1.0"
