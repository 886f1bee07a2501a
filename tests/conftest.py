# tests/conftest.py
"""
Common test fixtures for Stencil.
"""
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from stencil.components.emitter import DeclarationBuilder, Document, PersistenceGate
from stencil.components.interfaces.storage import FileSystem, VersionControl
from stencil.core.registry import registry


class FakeFileSystem(FileSystem):
    """In-memory file system that records every call."""

    def __init__(self, files: Dict[str, str] = None, calls: List[Tuple[str, Path]] = None):
        self.files: Dict[Path, bytes] = {
            Path(path): content.encode("utf-8") for path, content in (files or {}).items()
        }
        self.calls = calls if calls is not None else []
        self.fail_on: Dict[str, Exception] = {}

    def _maybe_fail(self, operation: str, path: Path) -> None:
        if operation in self.fail_on:
            raise self.fail_on[operation]

    def exists(self, path):
        self.calls.append(("exists", Path(path)))
        return Path(path) in self.files

    def read_all(self, path):
        self.calls.append(("read_all", Path(path)))
        self._maybe_fail("read_all", path)
        return self.files[Path(path)]

    def write_all(self, path, content, encoding="utf-8"):
        self.calls.append(("write_all", Path(path)))
        self._maybe_fail("write_all", path)
        self.files[Path(path)] = content.encode(encoding)

    @property
    def writes(self) -> List[Path]:
        return [path for operation, path in self.calls if operation == "write_all"]


class RecordingVersionControl(VersionControl):
    """Version control double that records checkouts and adds."""

    def __init__(self, enabled: bool = True, checkout: bool = True, log: List[Tuple[str, Path]] = None):
        self.enabled = enabled
        self.checkout = checkout
        self.checked_out: List[Path] = []
        self.added: List[Path] = []
        self.fail_on: Dict[str, Exception] = {}
        self.log = log if log is not None else []

    def is_enabled(self):
        return self.enabled

    def uses_checkout(self):
        return self.checkout

    def check_out(self, path):
        if "check_out" in self.fail_on:
            raise self.fail_on["check_out"]
        self.checked_out.append(Path(path))
        self.log.append(("check_out", Path(path)))

    def mark_for_add(self, path):
        if "mark_for_add" in self.fail_on:
            raise self.fail_on["mark_for_add"]
        self.added.append(Path(path))
        self.log.append(("mark_for_add", Path(path)))


@pytest.fixture
def fake_fs():
    return FakeFileSystem()


@pytest.fixture
def vcs(fake_fs):
    return RecordingVersionControl(log=fake_fs.calls)


@pytest.fixture
def gate(fake_fs, vcs):
    return PersistenceGate(fake_fs, vcs)


@pytest.fixture
def document():
    return Document("Generated/Foo.h")


@pytest.fixture
def builder(document):
    return DeclarationBuilder(document, project_name="MyGame")


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts with an empty service registry."""
    registry.clear()
    yield
    registry.clear()

