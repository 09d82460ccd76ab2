from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal

from .config import MAX_DEPTH, MAX_FILE_CHARS, MAX_TOTAL_TOKENS

# Kinds of non-fatal events recorded during a collection run
EventKind = Literal[
    "truncated",
    "binary",
    "unreadable",
    "directory_unreadable",
    "depth_pruned",
    "budget_exhausted",
]


@dataclass(frozen=True, slots=True)
class Budgets:
    """
    Resource limits for a single collection run.
    Never mutated mid-run.
    """
    max_depth: int = MAX_DEPTH               # Max directory recursion depth (root = 0)
    max_file_chars: int = MAX_FILE_CHARS     # Characters kept per file before truncation
    max_total_tokens: int = MAX_TOTAL_TOKENS  # Aggregate estimated token cap


@dataclass(slots=True)
class CollectedFile:
    """
    Represents a file accepted by the BudgetedCollector.
    This is the unit returned to the caller.
    """
    path: str                  # Path relative to root (e.g., "src/main.py")
    content: str               # Text content, possibly truncated
    original_byte_length: int  # Size on disk before truncation
    truncated: bool = False
    estimated_tokens: int = 0

    @property
    def size(self) -> int:
        """Returns the length of the (possibly truncated) content in characters."""
        return len(self.content)


@dataclass(frozen=True, slots=True)
class CollectionEvent:
    """A recoverable condition met during discovery or reading."""
    kind: EventKind
    path: str
    detail: str = ""

    @property
    def message(self) -> str:
        if self.kind == "binary":
            return f"Skipping {self.path}: appears to be binary"
        if self.kind == "truncated":
            return f"Truncating {self.path}: too large ({self.detail})"
        if self.kind == "unreadable":
            return f"Could not read {self.path}: {self.detail}"
        if self.kind == "directory_unreadable":
            return f"Cannot read directory {self.path}: {self.detail}"
        if self.kind == "depth_pruned":
            return f"Not entering {self.path}: {self.detail}"
        return f"Reached token budget limit at {self.path}: {self.detail}"


@dataclass
class CollectionResult:
    """
    Output of BudgetedCollector.collect().

    `files` is in priority order (highest first). `skipped_count` covers binary,
    unreadable and budget-skipped candidates.
    """
    root: str
    profile: str
    files: List[CollectedFile] = field(default_factory=list)
    events: List[CollectionEvent] = field(default_factory=list)
    total_tokens: int = 0
    budget_skipped: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.files

    @property
    def diagnostics(self) -> List[str]:
        return [event.message for event in self.events]

    @property
    def truncated_count(self) -> int:
        return sum(1 for f in self.files if f.truncated)

    @property
    def skipped_count(self) -> int:
        unread = sum(1 for e in self.events if e.kind in ("binary", "unreadable"))
        return unread + self.budget_skipped

    def to_dict(self) -> Dict[str, Any]:
        """Serializes the result to the JSON payload returned to tool callers."""
        payload: Dict[str, Any] = {
            "repoPath": self.root,
            "filesCollected": len(self.files),
            "depth": self.profile,
            "totalTokens": self.total_tokens,
            "truncatedCount": self.truncated_count,
            "skippedCount": self.skipped_count,
            "diagnostics": self.diagnostics,
        }
        if self.is_empty:
            payload["warning"] = (
                "No relevant files found. This may not be a software repository "
                "or it may use an unsupported structure."
            )
        payload["files"] = [
            {
                "path": f.path,
                "sizeBytes": f.size,
                "originalByteLength": f.original_byte_length,
                "truncated": f.truncated,
                "content": f.content,
            }
            for f in self.files
        ]
        return payload
