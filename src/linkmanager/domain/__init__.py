from .extraction import extract_metadata
from .matching import classify, decide_match
from .models import FileNode, RowResolutionRecord
from .reconciliation import reconcile
from .session import Session, apply_event
from .tokens import tokenize

__all__ = [
    "FileNode",
    "RowResolutionRecord",
    "Session",
    "apply_event",
    "classify",
    "decide_match",
    "extract_metadata",
    "reconcile",
    "tokenize",
]
