"""Pydantic schemas shared by the detector, payload builder and API layers."""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MuscleGroup(str, Enum):
    chest = "chest"
    front_delt = "front_delt"
    triceps = "triceps"
    side_delt = "side_delt"
    lats = "lats"
    traps = "traps"
    biceps = "biceps"
    rear_delt = "rear_delt"
    forearms = "forearms"
    quads = "quads"
    glutes = "glutes"
    hamstrings = "hamstrings"
    calves = "calves"
    lower_back = "lower_back"
    core = "core"


class TokenType(str, Enum):
    body_part = "bodyPart"
    symptom = "symptom"


class IssueSeverity(IntEnum):
    minor = 1
    moderate = 2
    severe = 3


class SemanticToken(BaseModel):
    """A classified span of the source text.

    Offsets are half-open and index the original string, so
    ``text[token.start_index:token.end_index] == token.text`` always holds.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    type: TokenType
    start_index: int = Field(alias="startIndex", ge=0)
    end_index: int = Field(alias="endIndex", ge=0)
    normalized_value: Optional[MuscleGroup] = Field(default=None, alias="normalizedValue")

    @model_validator(mode="after")
    def span_must_be_ordered(self) -> "SemanticToken":
        if self.end_index < self.start_index:
            raise ValueError("end_index must not precede start_index")
        return self

    def overlaps(self, start: int, end: int) -> bool:
        return start < self.end_index and self.start_index < end


class DetectedIssue(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body_part: MuscleGroup = Field(alias="bodyPart")
    symptom: str
    raw_text: str = Field(alias="rawText")


class DetectionResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tokens: Tuple[SemanticToken, ...] = ()
    issues: Tuple[DetectedIssue, ...] = ()
    has_detections: bool = Field(default=False, alias="hasDetections")
    body_part_count: int = Field(default=0, alias="bodyPartCount")
    symptom_count: int = Field(default=0, alias="symptomCount")

    @classmethod
    def empty(cls) -> "DetectionResult":
        return cls()


class Vocabulary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body_parts: List[str] = Field(alias="bodyParts")
    symptoms: List[str]
