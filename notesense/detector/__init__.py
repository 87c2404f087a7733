"""Token scanning, issue pairing and the detection facade."""
from .pairer import extract_issues
from .scanner import scan_tokens
from .service import SemanticDetector, detect

__all__ = ["SemanticDetector", "detect", "extract_issues", "scan_tokens"]
