from .difficulty import DIFFICULTY_LABELS, classify_difficulty, detect_difficulty
from .tab_normalization import canonical_key, normalize_text

__all__ = [
    "DIFFICULTY_LABELS",
    "canonical_key",
    "classify_difficulty",
    "detect_difficulty",
    "normalize_text",
]
