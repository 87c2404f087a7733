"""Pydantic models exposed via the FastAPI application."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..issues import RawBodyIssue
from ..schemas import IssueSeverity, MuscleGroup


class HealthResponse(BaseModel):
    status: str = Field(default="ok")


class DetectRequest(BaseModel):
    text: str = Field(..., examples=["Left knee sore after squats, wrist a bit tight"])


class PreviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., examples=["2026-10-19"])
    text: str
    session_id: Optional[int] = Field(default=None, alias="sessionId")


class IssuePreview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    body_part: MuscleGroup = Field(alias="bodyPart")
    symptom: str
    severity: IssueSeverity
    raw_text: str = Field(alias="rawText")
    session_id: Optional[int] = Field(default=None, alias="sessionId")


class PreviewResponse(BaseModel):
    date: str
    issues: List[IssuePreview]
    count: int


class NormalizeRequest(BaseModel):
    date: str
    issues: List[RawBodyIssue]
