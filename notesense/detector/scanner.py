"""Scan text for body part and symptom tokens."""
from __future__ import annotations

import re
from typing import List

from ..schemas import SemanticToken, TokenType
from ..vocabulary import BODY_PART_PATTERN, SYMPTOM_PATTERN, groups_of


def scan_tokens(
    text: str,
    body_pattern: re.Pattern[str] = BODY_PART_PATTERN,
    symptom_pattern: re.Pattern[str] = SYMPTOM_PATTERN,
) -> List[SemanticToken]:
    """Return body part and symptom tokens of ``text`` ordered by start index.

    Body parts are matched first. A symptom match that intersects any body
    part span is discarded; a body part is never discarded for a symptom.
    """
    if not text or not text.strip():
        return []

    body_parts: List[SemanticToken] = []
    for match in body_pattern.finditer(text):
        groups = groups_of(match.group(0))
        body_parts.append(
            SemanticToken(
                text=match.group(0),
                type=TokenType.body_part,
                start_index=match.start(),
                end_index=match.end(),
                normalized_value=groups[0] if groups else None,
            )
        )

    symptoms: List[SemanticToken] = []
    for match in symptom_pattern.finditer(text):
        start, end = match.span()
        if any(part.overlaps(start, end) for part in body_parts):
            continue
        symptoms.append(
            SemanticToken(text=match.group(0), type=TokenType.symptom, start_index=start, end_index=end)
        )

    return sorted(body_parts + symptoms, key=lambda token: token.start_index)
