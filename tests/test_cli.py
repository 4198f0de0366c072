import logging

import pytest

from frens_scraper import cli
from frens_scraper.config import DEFAULT_BASE_URL, SNAPSHOT_BASE_DIR

from .conftest import BASE_URL, FakeFetcher


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "count, level",
    [
        (0, logging.CRITICAL + 1),
        (1, logging.ERROR),
        (2, logging.WARNING),
        (3, logging.INFO),
        (4, logging.DEBUG),
        (5, cli.TRACE),
        (9, cli.TRACE),
    ],
)
def test_select_log_level(count, level):
    assert cli.select_log_level(count) == level


def test_defaults():
    config = cli.build_config(cli.parse_args([]))
    assert config.base_url == DEFAULT_BASE_URL
    assert config.snapshot_root == SNAPSHOT_BASE_DIR
    assert config.verbosity == 0


def test_flags():
    args = cli.parse_args(["-vvv", "--base", BASE_URL, "--disable-snapshot"])
    config = cli.build_config(args)
    assert config.verbosity == 3
    assert config.base_url == BASE_URL
    assert config.snapshot_root is None


def test_main_writes_csv(monkeypatch, capsys, site_fetcher):
    monkeypatch.setattr(cli, "PageFetcher", lambda: _Closing(site_fetcher))
    assert cli.main(["--base", BASE_URL, "--disable-snapshot"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[-1] == "bob,Bob,Third,/three"


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr(cli, "PageFetcher", lambda: _Closing(FakeFetcher()))
    assert cli.main(["--base", BASE_URL, "--disable-snapshot"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Failed to fetch " + BASE_URL)


class _Closing:
    def __init__(self, fetcher):
        self.fetcher = fetcher

    def __enter__(self):
        return self.fetcher

    def __exit__(self, *exc_info):
        return None
