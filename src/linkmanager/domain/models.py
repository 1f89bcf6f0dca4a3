from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

FOUND = "FOUND"
NOT_FOUND = "NOT_FOUND"
AMBIGUOUS = "AMBIGUOUS"
NO_QUERY = "NO_QUERY"

MATCH_STATUSES = (FOUND, NOT_FOUND, AMBIGUOUS, NO_QUERY)


@dataclass(eq=False)
class FileNode:
    """A file on disk, identified only by its relative ``path``.

    ``handle`` is an ephemeral reference to the content (an absolute path for
    local folders). It is never serialized and is only ever attached by
    reconciliation.
    """

    path: str
    name: str
    last_modified: float = 0.0
    handle: Any = field(default=None, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileNode):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def has_handle(self) -> bool:
        return self.handle is not None


@dataclass(frozen=True)
class ExtractedReference:
    queries: tuple[str, ...] = ()
    dates: tuple[str, ...] = ()

    @property
    def is_searchable(self) -> bool:
        return bool(self.queries)


@dataclass(frozen=True)
class ScoredCandidate:
    file: FileNode
    score: float


@dataclass(frozen=True)
class MatchOutcome:
    status: str
    file: FileNode | None = None
    candidates: tuple[FileNode, ...] | None = None
    rationale: str = ""


@dataclass(frozen=True)
class RowResolutionRecord:
    row_id: int
    target_folder: str | None
    original_content: str
    extracted_queries: tuple[str, ...]
    extracted_dates: tuple[str, ...]
    match_status: str
    matched_file: FileNode | None = None
    candidates: tuple[FileNode, ...] | None = None
    manual_resolutions: tuple[FileNode, ...] = ()
    is_ignored: bool = False
    ai_suggestion: str | None = None

    def file_nodes(self) -> list[FileNode]:
        nodes: list[FileNode] = []
        if self.matched_file is not None:
            nodes.append(self.matched_file)
        nodes.extend(self.candidates or ())
        nodes.extend(self.manual_resolutions)
        return nodes


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    relative_path: str
    last_modified: float
    handle: Any = None
