"""Static vocabulary: alias tables and their compiled patterns."""
from .patterns import BODY_PART_PATTERN, SYMPTOM_PATTERN, compile_word_pattern
from .tables import BODY_ALIASES, SYMPTOM_SEVERITY, groups_of, severity_of, vocabulary

__all__ = [
    "BODY_ALIASES",
    "BODY_PART_PATTERN",
    "SYMPTOM_PATTERN",
    "SYMPTOM_SEVERITY",
    "compile_word_pattern",
    "groups_of",
    "severity_of",
    "vocabulary",
]
