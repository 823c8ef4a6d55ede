"""Guitar difficulty estimate from a track's tempo and energy."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

EASY = "easy"
INTERMEDIATE = "intermediate"
HARD = "hard"
DIFFICULTY_LABELS = (EASY, INTERMEDIATE, HARD)

DEFAULT_TEMPO = 120
DEFAULT_ENERGY = 0.5


def difficulty_score(tempo: float, energy: float) -> int:
    score = 0
    if tempo < 120:
        score -= 2
    elif tempo > 120:
        score += 2
    if energy < 0.5:
        score -= 1
    elif energy > 0.5:
        score += 1
    return score


def classify_difficulty(tempo: float | None = None, energy: float | None = None) -> str:
    """Map tempo (BPM) and energy (0-1) to ``easy``, ``intermediate`` or ``hard``.

    Missing or zero inputs fall back to 120 BPM and 0.5 energy. Any negative
    score is easy and any positive score is hard; a zero score is decided by
    tempo alone (below 115 easy, above 125 hard).
    """
    tempo = tempo or DEFAULT_TEMPO
    energy = energy or DEFAULT_ENERGY
    score = difficulty_score(tempo, energy)
    if score < 0:
        return EASY
    if score > 0:
        return HARD
    if tempo < 115:
        return EASY
    if tempo > 125:
        return HARD
    return INTERMEDIATE


def detect_difficulty(spotify_client: Any, track_id: str) -> str:
    """Fetch audio features for ``track_id`` and classify them; any failure yields ``intermediate``."""
    try:
        features = spotify_client.get_audio_features(track_id) or {}
        return classify_difficulty(features.get("tempo"), features.get("energy"))
    except Exception as exc:
        logger.warning("audio features unavailable track_id=%s error=%s", track_id, exc)
        return INTERMEDIATE
