"""Build body-issue submission payloads from detected issues.

Detection never assigns severity. This module is the second step: it
resolves severity from the symptom keyword and shapes the request a
persistence service expects.
"""
from __future__ import annotations

from datetime import date as Date
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..schemas import DetectedIssue, IssueSeverity, MuscleGroup
from ..vocabulary import groups_of, severity_of


class EmptyIssuesError(ValueError):
    """Raised when a request would carry no issues."""


class UnknownBodyPartError(ValueError):
    """Raised when a value is neither a muscle group nor a known alias."""


class BodyIssueInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    body_part: MuscleGroup = Field(alias="bodyPart")
    symptom: str
    raw_text: str = Field(alias="rawText")
    session_id: Optional[int] = Field(default=None, alias="sessionId")

    @field_validator("symptom")
    @classmethod
    def symptom_must_not_be_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("symptom must be provided")
        return value.lower()

    @property
    def severity(self) -> IssueSeverity:
        return resolve_severity(self.symptom)


class CreateBodyIssuesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    issues: List[BodyIssueInput]

    @field_validator("date")
    @classmethod
    def date_must_be_iso(cls, value: str) -> str:
        try:
            Date.fromisoformat(value)
        except ValueError as exc:
            raise ValueError("date must be formatted as YYYY-MM-DD") from exc
        return value

    @field_validator("issues")
    @classmethod
    def issues_must_not_be_empty(cls, value: List[BodyIssueInput]) -> List[BodyIssueInput]:
        if not value:
            raise ValueError("at least one issue is required")
        return value


def resolve_severity(symptom: str) -> IssueSeverity:
    """Severity for a symptom keyword; unrecognised keywords count as minor."""
    return severity_of(symptom) or IssueSeverity.minor


def expand_body_part(value: str) -> Tuple[MuscleGroup, ...]:
    """Map a canonical group name or a body alias to muscle groups."""
    try:
        return (MuscleGroup(value.lower()),)
    except ValueError:
        pass
    groups = groups_of(value)
    if not groups:
        raise UnknownBodyPartError(f"Invalid body part: {value}")
    return groups


def build_issue_inputs(issues: Iterable[DetectedIssue], session_id: int | None = None) -> List[BodyIssueInput]:
    return [
        BodyIssueInput(
            body_part=issue.body_part,
            symptom=issue.symptom,
            raw_text=issue.raw_text,
            session_id=session_id,
        )
        for issue in issues
    ]


def build_create_request(
    date: str,
    issues: Iterable[DetectedIssue],
    session_id: int | None = None,
) -> CreateBodyIssuesRequest:
    inputs = build_issue_inputs(issues, session_id=session_id)
    if not inputs:
        raise EmptyIssuesError("At least one issue is required")
    return CreateBodyIssuesRequest(date=date, issues=inputs)


class RawBodyIssue(BaseModel):
    """A client-supplied issue whose body part may still be an alias."""

    model_config = ConfigDict(populate_by_name=True)

    body_part: str = Field(alias="bodyPart")
    symptom: str
    raw_text: str = Field(default="", alias="rawText")
    session_id: Optional[int] = Field(default=None, alias="sessionId")


def expand_raw_issues(raw_issues: Iterable[RawBodyIssue]) -> List[BodyIssueInput]:
    """Validate body parts and fan aliases out into one input per muscle group."""
    inputs: List[BodyIssueInput] = []
    for raw in raw_issues:
        for group in expand_body_part(raw.body_part):
            inputs.append(
                BodyIssueInput(
                    body_part=group,
                    symptom=raw.symptom,
                    raw_text=raw.raw_text,
                    session_id=raw.session_id,
                )
            )
    return inputs
