from __future__ import annotations

from typing import Iterable

from engine.tab_normalization import normalize_text
from songsterr.extractor import CandidateEntry


def contains_either_way(left: str, right: str) -> bool:
    return left in right or right in left


def match_candidate(
    title: str | None,
    artist: str | None,
    candidates: Iterable[CandidateEntry],
) -> CandidateEntry | None:
    """Return the first candidate whose title and artist both contain, or are contained in, the query's.

    Candidates are checked in the order given and the first hit wins; there is
    no scoring between several matching rows.
    """
    wanted_title = normalize_text(title)
    wanted_artist = normalize_text(artist)
    for candidate in candidates:
        if not contains_either_way(normalize_text(candidate.title), wanted_title):
            continue
        if contains_either_way(normalize_text(candidate.artist), wanted_artist):
            return candidate
    return None
