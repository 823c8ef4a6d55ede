"""Filter a playlist down to the tracks that have a guitar tab page."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Protocol

from config.settings import TAB_LOOKUP_MAX_WORKERS
from songsterr.lookup import TabLookupService

logger = logging.getLogger(__name__)


class TabFinder(Protocol):
    def find_tab_url(self, title: str, artist: str) -> str | None:
        raise NotImplementedError


def _track_query(track: Any) -> tuple[str, str] | None:
    if not isinstance(track, dict):
        return None
    title = track.get("name")
    artists = track.get("artists") or []
    first_artist = artists[0].get("name") if artists and isinstance(artists[0], dict) else None
    if not title or not first_artist:
        return None
    return str(title), str(first_artist)


class PlaylistEnrichmentPipeline:
    def __init__(self, finder: TabFinder, *, max_workers: int | None = None) -> None:
        self.finder = finder
        self.max_workers = TAB_LOOKUP_MAX_WORKERS if max_workers is None else max_workers

    def _find(self, title: str, artist: str) -> str | None:
        try:
            return self.finder.find_tab_url(title, artist)
        except Exception:
            logger.exception("tab lookup raised title=%r artist=%r; treating as no tab", title, artist)
            return None

    def _resolve_sequential(self, queries: list[tuple[int, str, str]]) -> dict[int, str | None]:
        return {index: self._find(title, artist) for index, title, artist in queries}

    def _resolve_parallel(self, queries: list[tuple[int, str, str]]) -> dict[int, str | None]:
        results: dict[int, str | None] = {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(queries))) as pool:
            futures = {pool.submit(self._find, title, artist): index for index, title, artist in queries}
            for fut, index in futures.items():
                results[index] = fut.result()
        return results

    def enrich(self, tracks: Iterable[Any]) -> list[dict[str, Any]]:
        """Return the tracks with a tab page, in input order, tagged ``isGuitar`` and ``songsterrUrl``.

        Tracks without a name or first artist are skipped. Lookup failures drop
        the track and never abort the scan.
        """
        track_list = list(tracks or [])
        queries: list[tuple[int, str, str]] = []
        for index, track in enumerate(track_list):
            query = _track_query(track)
            if query is None:
                continue
            queries.append((index, query[0], query[1]))

        if not queries:
            return []
        if self.max_workers <= 1 or len(queries) == 1:
            urls = self._resolve_sequential(queries)
        else:
            urls = self._resolve_parallel(queries)

        enriched: list[dict[str, Any]] = []
        for index in sorted(urls):
            url = urls[index]
            if not url:
                continue
            enriched.append({**track_list[index], "isGuitar": True, "songsterrUrl": url})
        logger.info("playlist scan tracks=%d queried=%d with_tabs=%d", len(track_list), len(queries), len(enriched))
        return enriched


def enrich_playlist(
    spotify_client: Any,
    playlist_id: str,
    pipeline: PlaylistEnrichmentPipeline | None = None,
) -> list[dict[str, Any]]:
    """List a playlist's tracks and keep the ones with a tab page.

    Track-listing errors from ``spotify_client`` propagate to the caller.
    """
    if pipeline is None:
        pipeline = PlaylistEnrichmentPipeline(TabLookupService())
    tracks = spotify_client.get_playlist_tracks(playlist_id)
    return pipeline.enrich(tracks)
