"""Songsterr tab search integration."""

from songsterr.client import SongsterrSearchClient, TabSearchError
from songsterr.extractor import CandidateEntry, RegexResultExtractor, ResultExtractor, SongsterrMarkupExtractor
from songsterr.cache import TabLookupCache, get_tab_lookup_cache

__all__ = [
    "CandidateEntry",
    "RegexResultExtractor",
    "ResultExtractor",
    "SongsterrMarkupExtractor",
    "SongsterrSearchClient",
    "TabLookupCache",
    "TabSearchError",
    "get_tab_lookup_cache",
]
