import pytest

from frens_scraper.errors import HttpClientError

BASE_URL = "https://frens.example/"

INDEX_HTML = """<!doctype html>
<html>
<head><link rel="stylesheet" href="/static/style.css"></head>
<body>
<header><img src="/static/banner.png"></header>
<a href="/users/alice/">Alice</a>
<a href="/users/bob">Bob</a>
</body>
</html>
"""

ALICE_HTML = """<!doctype html>
<html>
<head><link rel="stylesheet" href="../../static/style.css"></head>
<body>
<header><img src="/static/banner.png"></header>
<main>
<h1>Alice</h1>
<img src="avatar.jpg">
<a href="https://example.org/one">First, the &quot;best&quot;</a>
<a href="https://example.org/two">Second</a>
</main>
</body>
</html>
"""

BOB_HTML = """<!doctype html>
<html>
<head></head>
<body>
<main>
<h1>Bob</h1>
<a href="/three">Third</a>
</main>
</body>
</html>
"""


class FakeFetcher:
    """In-memory stand-in for ``PageFetcher`` that records every request."""

    def __init__(self, pages=None, assets=None):
        self.pages = dict(pages or {})
        self.assets = dict(assets or {})
        self.requests = []

    def fetch_text(self, url):
        self.requests.append(url)
        if url not in self.pages:
            raise HttpClientError(f"Failed to fetch {url}: 404")
        return self.pages[url]

    def fetch_bytes(self, url):
        self.requests.append(url)
        if url not in self.assets:
            raise HttpClientError(f"Failed to fetch {url}: 404")
        return self.assets[url]

    def close(self):
        pass


@pytest.fixture
def site_fetcher():
    return FakeFetcher(
        pages={
            BASE_URL: INDEX_HTML,
            BASE_URL + "users/alice/": ALICE_HTML,
            BASE_URL + "users/bob": BOB_HTML,
        },
        assets={
            BASE_URL + "static/style.css": b"body { color: black; }",
            BASE_URL + "static/banner.png": b"banner-bytes",
            BASE_URL + "users/alice/avatar.jpg": b"avatar-bytes",
        },
    )
