# stencil/errors.py
"""
Exception types raised by Stencil.

Structural problems in emitted text (mismatched blocks, indent underflow)
are never raised; they are recorded as diagnostics on the Document.
"""
from pathlib import Path
from typing import Union


class StencilError(Exception):
    """Base class for all Stencil errors."""
    pass


class DocumentSealedError(StencilError):
    """Raised when emitting into a Document that was already committed."""
    pass


class FileSystemError(StencilError):
    """Exception raised for file system operation errors."""
    pass


class VersionControlError(StencilError):
    """Exception raised when a version control command fails."""
    pass


class PersistenceError(StencilError):
    """
    Raised by the persistence gate when a generated file could not be committed.

    Attributes:
        path: Target path of the Document
        stage: One of ``read``, ``checkout``, ``write`` or ``mark_for_add``
        written: Whether the new content reached disk before the failure
    """

    def __init__(self, path: Union[str, Path], stage: str, message: str, written: bool = False):
        super().__init__(f"{stage} failed for {path}: {message}")
        self.path = Path(path)
        self.stage = stage
        self.written = written
