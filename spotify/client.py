"""Spotify Web API client for playlists, playlist tracks and audio features."""

from __future__ import annotations

import logging
import time
import urllib.parse
from typing import Any

import requests

from config.settings import SPOTIFY_API_BASE_URL, SPOTIFY_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class SpotifyClient:
    """Bearer-token client acting on behalf of a logged-in user."""

    def __init__(
        self,
        access_token: str,
        *,
        timeout_sec: int | None = None,
        base_url: str | None = None,
        max_rate_limit_retries: int = 3,
    ) -> None:
        self.access_token = (access_token or "").strip()
        if not self.access_token:
            raise ValueError("Spotify access_token is required")
        self.timeout_sec = SPOTIFY_TIMEOUT_SECONDS if timeout_sec is None else timeout_sec
        self.base_url = (base_url or SPOTIFY_API_BASE_URL).rstrip("/")
        self.max_rate_limit_retries = max_rate_limit_retries

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request_json(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET ``url`` and retry on HTTP 429 responses, honoring ``Retry-After``."""
        headers = {"Authorization": f"Bearer {self.access_token}"}
        attempts = 0
        while True:
            attempts += 1
            response = requests.get(url, params=params, headers=headers, timeout=self.timeout_sec)
            if response.status_code == 429:
                if attempts > self.max_rate_limit_retries:
                    raise RuntimeError("Spotify request failed (429: rate limit exceeded retries)")
                retry_after = response.headers.get("Retry-After", "1")
                try:
                    sleep_sec = float(retry_after)
                except (TypeError, ValueError):
                    sleep_sec = 1.0
                logger.info("spotify rate limited url=%s retry_after=%s", url, sleep_sec)
                time.sleep(max(0.0, sleep_sec))
                continue
            if response.status_code != 200:
                raise RuntimeError(f"Spotify request failed ({response.status_code})")
            return response.json()

    def _collect_pages(self, url: str, params: dict[str, Any] | None = None) -> list[Any]:
        items: list[Any] = []
        page = self._request_json(url, params=params)
        while True:
            items.extend(page.get("items") or [])
            next_url = page.get("next")
            if not next_url:
                break
            page = self._request_json(str(next_url))
        return items

    def get_current_user(self) -> dict[str, Any]:
        return self._request_json(self._url("/me"))

    def get_user_playlists(self) -> list[dict[str, Any]]:
        return self._collect_pages(self._url("/me/playlists"), params={"limit": 50})

    def get_playlist_tracks(self, playlist_id: str) -> list[dict[str, Any] | None]:
        """Return the ``track`` object of every playlist item, in playlist order.

        Items whose track was removed from the catalog come back as ``None``.
        """
        playlist_id = (playlist_id or "").strip()
        if not playlist_id:
            raise ValueError("playlist_id is required")
        encoded_id = urllib.parse.quote(playlist_id, safe="")
        items = self._collect_pages(self._url(f"/playlists/{encoded_id}/tracks"), params={"limit": 100})
        return [item.get("track") if isinstance(item, dict) else None for item in items]

    def get_audio_features(self, track_id: str) -> dict[str, Any]:
        track_id = (track_id or "").strip()
        if not track_id:
            raise ValueError("track_id is required")
        encoded_id = urllib.parse.quote(track_id, safe="")
        return self._request_json(self._url(f"/audio-features/{encoded_id}"))
