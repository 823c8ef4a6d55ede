"""Parsers turning tab-site search markup into candidate rows.

The row/field attributes of the search page are an external contract. When
they change, extraction yields no rows instead of raising, and the lookup
reports "no tabs" for every query.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from bs4 import BeautifulSoup

SONG_ROW_ATTR = "data-song"
FIELD_ATTR = "data-field"


@dataclass(frozen=True)
class CandidateEntry:
    title: str
    artist: str
    url: str | None = None


class ResultExtractor(ABC):
    @abstractmethod
    def extract(self, markup: str) -> list[CandidateEntry]:
        """Parse search response markup into candidates, in document order."""
        raise NotImplementedError


class SongsterrMarkupExtractor(ResultExtractor):
    """Structural parser: ``<a data-song href=...>`` rows with ``data-field`` children."""

    def __init__(self, parser: str = "html.parser") -> None:
        self.parser = parser

    def extract(self, markup: str) -> list[CandidateEntry]:
        if not markup:
            return []
        soup = BeautifulSoup(markup, self.parser)
        entries: list[CandidateEntry] = []
        for anchor in soup.find_all("a", attrs={SONG_ROW_ATTR: True}):
            title = _field_text(anchor, "name")
            artist = _field_text(anchor, "artist")
            if not title or not artist:
                continue
            href = anchor.get("href")
            entries.append(CandidateEntry(title=title, artist=artist, url=href or None))
        return entries


def _field_text(anchor, field: str) -> str:
    node = anchor.find(attrs={FIELD_ATTR: field})
    if node is None:
        return ""
    return node.get_text().strip()


_SONG_LINK_RE = re.compile(r"<a[^>]*data-song[^>]*>([\s\S]*?)</a>")
_HREF_RE = re.compile(r'href="([^"]+)"')
_NAME_RE = re.compile(r'<div[^>]*data-field="name"[^>]*>([^<]+)</div>')
_ARTIST_RE = re.compile(r'<div[^>]*data-field="artist"[^>]*>([^<]+)</div>')


class RegexResultExtractor(ResultExtractor):
    """String-search parser kept for parity with the legacy scraper.

    Only ``div`` fields with plain text content are recognized.
    """

    def extract(self, markup: str) -> list[CandidateEntry]:
        entries: list[CandidateEntry] = []
        for match in _SONG_LINK_RE.finditer(markup or ""):
            body = match.group(1)
            name_match = _NAME_RE.search(body)
            artist_match = _ARTIST_RE.search(body)
            if not name_match or not artist_match:
                continue
            href_match = _HREF_RE.search(match.group(0))
            entries.append(
                CandidateEntry(
                    title=name_match.group(1).strip(),
                    artist=artist_match.group(1).strip(),
                    url=href_match.group(1) if href_match else None,
                )
            )
        return entries
