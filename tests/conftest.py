import sys
from pathlib import Path

import pytest


# Make the top-level packages importable when pytest runs from a checkout.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

SEARCH_MARKUP = """
<html><body>
<div class="results">
  <a data-song="" href="/a/wsa/beatles-hey-jude-tab-s1" class="row">
    <div data-field="name">Hey Jude</div>
    <div data-field="artist">The Beatles</div>
  </a>
  <a data-song="" href="/a/wsa/beatles-let-it-be-tab-s2" class="row">
    <div data-field="name">Let It Be</div>
    <div data-field="artist">The Beatles</div>
  </a>
  <a data-song="" href="https://www.songsterr.com/a/wsa/cover-hey-jude-tab-s3">
    <div data-field="name">Hey Jude (Live)</div>
  </a>
</div>
</body></html>
"""


class FakeSearchClient:
    """Stands in for SongsterrSearchClient; records every query it receives."""

    def __init__(self, responses=None, error=None, errors=None):
        self.responses = responses or {}
        self.error = error
        self.errors = errors or {}
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        if query in self.errors:
            raise self.errors[query]
        return self.responses.get(query, "")

    def resolve_url(self, url):
        if url.startswith("http"):
            return url
        return "https://www.songsterr.com" + url


@pytest.fixture
def search_markup() -> str:
    return SEARCH_MARKUP


@pytest.fixture
def fake_search_client():
    return FakeSearchClient
