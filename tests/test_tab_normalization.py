from __future__ import annotations

from engine.tab_normalization import canonical_key, normalize_text


def test_normalize_text_lowercases_trims_and_strips_punctuation() -> None:
    assert normalize_text("  Don't Stop Me Now!  ") == "dont stop me now"
    assert normalize_text("AC/DC") == "acdc"
    assert normalize_text("Guns N' Roses") == "guns n roses"


def test_normalize_text_keeps_underscores_and_digits() -> None:
    assert normalize_text("Song_2 (1997)") == "song_2 1997"


def test_normalize_text_strips_non_ascii_letters() -> None:
    assert normalize_text("Beyoncé") == "beyonc"


def test_normalize_text_handles_none() -> None:
    assert normalize_text(None) == ""


def test_canonical_key_collapses_case_whitespace_and_punctuation() -> None:
    assert canonical_key("Hey Jude", "The Beatles") == "hey jude::the beatles"
    assert canonical_key("  hey   jude!", "the beatles") == canonical_key("Hey Jude", "The Beatles")


def test_canonical_key_keeps_title_and_artist_apart() -> None:
    assert canonical_key("Hey Jude", "The Beatles") != canonical_key("The Beatles", "Hey Jude")


def test_canonical_key_keeps_non_latin_queries_apart() -> None:
    assert canonical_key("東京", "宇多田ヒカル") != canonical_key("Любовь", "Кино")
    assert canonical_key("Группа крови", "Кино") != canonical_key("Кукушка", "Кино")
    assert canonical_key("Группа Крови!", "  кино") == canonical_key("группа   крови", "Кино")
