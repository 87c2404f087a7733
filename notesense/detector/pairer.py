"""Pair symptom tokens with their nearest body part and expand into issues."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from ..schemas import DetectedIssue, SemanticToken, TokenType
from ..vocabulary import groups_of


def span_distance(first: SemanticToken, second: SemanticToken) -> int:
    """Character gap between the closer pair of edges of two disjoint spans."""
    return min(
        abs(first.start_index - second.end_index),
        abs(second.start_index - first.end_index),
    )


def nearest_body_part(symptom: SemanticToken, body_parts: Iterable[SemanticToken]) -> SemanticToken | None:
    # Strict comparison: on ties the leftmost body part is kept.
    nearest: SemanticToken | None = None
    best: int | None = None
    for part in body_parts:
        distance = span_distance(symptom, part)
        if best is None or distance < best:
            best = distance
            nearest = part
    return nearest


def extract_issues(text: str, tokens: Sequence[SemanticToken]) -> List[DetectedIssue]:
    """Turn a token stream into one issue per (symptom, muscle group) pairing.

    Each symptom attaches to its nearest body part token; the body part's
    alias then fans out into every muscle group it covers. Symptoms with no
    body part anywhere in the text produce nothing.
    """
    body_parts = [token for token in tokens if token.type is TokenType.body_part]
    symptoms = [token for token in tokens if token.type is TokenType.symptom]

    issues: List[DetectedIssue] = []
    for symptom in symptoms:
        part = nearest_body_part(symptom, body_parts)
        if part is None:
            continue
        groups = groups_of(part.text)
        if not groups:
            continue
        start = min(part.start_index, symptom.start_index)
        end = max(part.end_index, symptom.end_index)
        raw_text = text[start:end]
        keyword = symptom.text.lower()
        issues.extend(DetectedIssue(body_part=group, symptom=keyword, raw_text=raw_text) for group in groups)
    return issues
