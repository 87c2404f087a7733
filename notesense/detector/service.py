"""Detection facade: text in, tokens and issues out."""
from __future__ import annotations

import logging
import re
from typing import Dict

from ..schemas import DetectionResult, TokenType
from ..vocabulary import BODY_PART_PATTERN, SYMPTOM_PATTERN
from .pairer import extract_issues
from .scanner import scan_tokens

log = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_LENGTH = 2000


class SemanticDetector:
    """Stateless detector over a pair of compiled patterns.

    Every call is independent, so one instance can be shared across threads
    and callers may memoize ``detect`` on the text alone.
    """

    def __init__(
        self,
        body_pattern: re.Pattern[str] = BODY_PART_PATTERN,
        symptom_pattern: re.Pattern[str] = SYMPTOM_PATTERN,
        *,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        self.body_pattern = body_pattern
        self.symptom_pattern = symptom_pattern
        self.max_text_length = max_text_length

    @classmethod
    def from_config(cls, data: Dict[str, object] | None) -> "SemanticDetector":
        if not data:
            return cls()
        limit = data.get("max_text_length")
        if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
            return cls(max_text_length=limit)
        return cls()

    def accepts(self, text: str) -> bool:
        """Whether ``text`` is within the host-side length cap."""
        return len(text) <= self.max_text_length

    def detect(self, text: str) -> DetectionResult:
        if not text or not text.strip():
            return DetectionResult.empty()

        tokens = scan_tokens(text, self.body_pattern, self.symptom_pattern)
        issues = extract_issues(text, tokens)
        body_part_count = sum(1 for token in tokens if token.type is TokenType.body_part)
        symptom_count = sum(1 for token in tokens if token.type is TokenType.symptom)
        log.debug(
            "detected %d body parts, %d symptoms, %d issues", body_part_count, symptom_count, len(issues)
        )
        return DetectionResult(
            tokens=tuple(tokens),
            issues=tuple(issues),
            has_detections=bool(tokens),
            body_part_count=body_part_count,
            symptom_count=symptom_count,
        )


_default_detector = SemanticDetector()


def detect(text: str) -> DetectionResult:
    """Detect body parts, symptoms and paired issues in ``text``."""
    return _default_detector.detect(text)
