"""Submission payloads for detected body issues."""
from .payloads import (
    BodyIssueInput,
    CreateBodyIssuesRequest,
    EmptyIssuesError,
    RawBodyIssue,
    UnknownBodyPartError,
    build_create_request,
    build_issue_inputs,
    expand_raw_issues,
    expand_body_part,
    resolve_severity,
)

__all__ = [
    "BodyIssueInput",
    "CreateBodyIssuesRequest",
    "EmptyIssuesError",
    "RawBodyIssue",
    "UnknownBodyPartError",
    "build_create_request",
    "build_issue_inputs",
    "expand_raw_issues",
    "expand_body_part",
    "resolve_severity",
]
