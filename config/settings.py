"""Application settings constants."""

from __future__ import annotations

import os

# Tab site origin; relative tab page paths are resolved against it.
SONGSTERR_BASE_URL = os.getenv("SONGSTERR_BASE_URL", "https://www.songsterr.com")
SONGSTERR_SEARCH_PATH = os.getenv("SONGSTERR_SEARCH_PATH", "/a/wa/search")

# The search endpoint rejects requests that do not look like a browser.
SONGSTERR_USER_AGENT = os.getenv(
    "SONGSTERR_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
)
SONGSTERR_TIMEOUT_SECONDS = float(os.getenv("SONGSTERR_TIMEOUT_SECONDS", "10"))
SONGSTERR_MIN_INTERVAL_SECONDS = float(os.getenv("SONGSTERR_MIN_INTERVAL_SECONDS", "0"))

# 1 keeps the playlist scan sequential.
TAB_LOOKUP_MAX_WORKERS = int(os.getenv("TAB_LOOKUP_MAX_WORKERS", "1"))

SPOTIFY_API_BASE_URL = os.getenv("SPOTIFY_API_BASE_URL", "https://api.spotify.com/v1")
SPOTIFY_TIMEOUT_SECONDS = int(os.getenv("SPOTIFY_TIMEOUT_SECONDS", "20"))
