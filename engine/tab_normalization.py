"""Text canonicalization shared by tab matching and the tab lookup cache."""

from __future__ import annotations

import re

# ASCII word characters only; accented and non-Latin letters are stripped.
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
# Unicode-aware; keys must keep non-Latin titles distinct.
_KEY_NON_WORD_RE = re.compile(r"[^\w\s]")
_WS_RE = re.compile(r"\s+")

KEY_SEPARATOR = "::"


def normalize_text(value: str | None) -> str:
    """Lowercase, trim, and strip every character that is not a word character or whitespace."""
    text = str(value or "").lower().strip()
    return _NON_WORD_RE.sub("", text)


def _key_part(value: str | None) -> str:
    text = _KEY_NON_WORD_RE.sub("", str(value or "").lower())
    return _WS_RE.sub(" ", text).strip()


def canonical_key(title: str | None, artist: str | None) -> str:
    """Return the cache identity of a ``(title, artist)`` query.

    Both halves are lowercased, stripped of punctuation and have whitespace
    runs collapsed, so ``("Hey Jude", "The Beatles")`` and
    ``("  hey   jude!", "the beatles")`` share one key. Letters of any script
    are kept.
    """
    return KEY_SEPARATOR.join(_key_part(value) for value in (title, artist))
