# stencil/components/emitter/models.py
"""
Data models shared by the emitter and the persistence gate.
"""
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class DiagnosticKind(str, Enum):
    """Kinds of structural inconsistency recorded on a Document."""
    BLOCK_MISMATCH = "block_mismatch"
    INDENT_UNDERFLOW = "indent_underflow"
    UNBALANCED_BLOCKS = "unbalanced_blocks"


class Diagnostic(BaseModel):
    """A recoverable structural problem found while emitting."""
    kind: DiagnosticKind = Field(..., description="Kind of inconsistency")
    message: str = Field(..., description="Human readable description")
    line_number: int = Field(..., description="1-based output line the problem was detected at")


class CommitStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    EMPTY = "empty"
    UNCHANGED = "unchanged"


class CommitResult(BaseModel):
    """Outcome of committing a Document to disk."""
    path: Path = Field(..., description="Target path")
    status: CommitStatus = Field(..., description="Whether the file was written or skipped")
    reason: Optional[SkipReason] = Field(None, description="Why the commit was skipped")
    created: bool = Field(False, description="Whether the file did not exist before")
    checked_out: bool = Field(False, description="Whether the file was checked out before writing")
    marked_for_add: bool = Field(False, description="Whether the new file was marked for add")
    diagnostics: List[Diagnostic] = Field(default_factory=list, description="Structural diagnostics of the Document")

    @property
    def written(self) -> bool:
        return self.status == CommitStatus.WRITTEN
