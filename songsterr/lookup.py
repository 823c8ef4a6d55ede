"""Tab lookup: search, extract, match and memoize one ``(title, artist)`` query."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from engine.tab_matching import match_candidate
from songsterr.cache import TabLookupCache, get_tab_lookup_cache
from songsterr.client import SongsterrSearchClient
from songsterr.extractor import ResultExtractor, SongsterrMarkupExtractor

logger = logging.getLogger(__name__)

MATCHED = "matched"
UNMATCHED = "unmatched"
LOOKUP_FAILED = "lookup_failed"


@dataclass(frozen=True)
class TabLookupOutcome:
    status: str
    url: str | None = None
    reason: str | None = None

    @property
    def matched(self) -> bool:
        return self.status == MATCHED


class TabLookupService:
    def __init__(
        self,
        *,
        client: SongsterrSearchClient | None = None,
        extractor: ResultExtractor | None = None,
        cache: TabLookupCache | None = None,
    ) -> None:
        self.client = client or SongsterrSearchClient()
        self.extractor = extractor or SongsterrMarkupExtractor()
        self.cache = cache if cache is not None else get_tab_lookup_cache()

    def lookup(self, title: str, artist: str) -> TabLookupOutcome:
        """Run one uncached lookup. Never raises; failures come back as ``lookup_failed``."""
        query = f"{title} {artist}"
        try:
            markup = self.client.search(query)
            candidates = self.extractor.extract(markup)
        except Exception as exc:
            return TabLookupOutcome(status=LOOKUP_FAILED, reason=str(exc) or type(exc).__name__)

        winner = match_candidate(title, artist, candidates)
        if winner is None:
            return TabLookupOutcome(status=UNMATCHED, reason=f"{len(candidates)} candidates, none matched")
        if not winner.url:
            return TabLookupOutcome(status=UNMATCHED, reason="matched row has no link")
        return TabLookupOutcome(status=MATCHED, url=self.client.resolve_url(winner.url))

    def _compute_url(self, title: str, artist: str) -> str | None:
        outcome = self.lookup(title, artist)
        if outcome.status == LOOKUP_FAILED:
            logger.warning("tab lookup failed title=%r artist=%r reason=%s", title, artist, outcome.reason)
        elif outcome.status == UNMATCHED:
            logger.info("no tab title=%r artist=%r reason=%s", title, artist, outcome.reason)
        else:
            logger.info("tab found title=%r artist=%r url=%s", title, artist, outcome.url)
        return outcome.url

    def find_tab_url(self, title: str, artist: str) -> str | None:
        """Return the tab page URL for the query, or ``None``; the decision is cached either way."""
        return self.cache.get_or_compute(title, artist, lambda: self._compute_url(title, artist))
