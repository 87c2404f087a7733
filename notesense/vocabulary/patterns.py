"""Compile alias tables into single alternation patterns."""
from __future__ import annotations

import re
from typing import Iterable

from .tables import BODY_ALIASES, SYMPTOM_SEVERITY


def compile_word_pattern(words: Iterable[str]) -> re.Pattern[str]:
    """Build one case-insensitive, whole-word alternation over ``words``.

    Longer keys come first so that "lower back" wins over "back" at the same
    position. Every key is escaped and matched literally. Word boundaries and
    case folding are ASCII-only, so non-ASCII letters never fold onto a key.
    """
    ordered = sorted(words, key=len, reverse=True)
    if not ordered:
        raise ValueError("cannot compile a pattern from an empty word list")
    alternation = "|".join(re.escape(word) for word in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE | re.ASCII)


BODY_PART_PATTERN = compile_word_pattern(BODY_ALIASES)
SYMPTOM_PATTERN = compile_word_pattern(SYMPTOM_SEVERITY)
