# stencil/components/interfaces/storage.py
"""Interfaces for the storage capabilities used by the persistence gate."""
from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Interface for reading and writing generated files."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    def read_all(self, path: Path) -> bytes:
        """
        Read the full content of a file.

        Raises:
            FileSystemError: If the file cannot be read
        """
        pass

    @abstractmethod
    def write_all(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """
        Replace the content of a file, creating it (and its parents) if needed.

        The write is forced: read-only files are made writable first.

        Raises:
            FileSystemError: If the file cannot be written
        """
        pass


class VersionControl(ABC):
    """Interface for the source control workflow around generated files."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def uses_checkout(self) -> bool:
        """Whether tracked files must be checked out before they are modified."""
        pass

    @abstractmethod
    def check_out(self, path: Path) -> None:
        """
        Raises:
            VersionControlError: If the checkout fails
        """
        pass

    @abstractmethod
    def mark_for_add(self, path: Path) -> None:
        """
        Raises:
            VersionControlError: If the file cannot be marked for add
        """
        pass
