# stencil/api/emitter.py
"""
Public API for the emitter components.

Accessors create their service on first use from the active configuration.
"""
from pathlib import Path
from typing import Optional, Union

from stencil.core.registry import registry
from stencil.config import AppConfig, config_manager
from stencil.components.emitter import (
    CommitResult, CommitStatus, DeclarationBuilder, Diagnostic, DiagnosticKind,
    Document, PersistenceGate, SkipReason, check_balanced, export_macro_token,
    split_name,
)
from stencil.components.filesystem import LocalFileSystem
from stencil.components.generation import HeaderGenerator
from stencil.components.interfaces import FileSystem, VersionControl
from stencil.components.vcs import GitVersionControl, NullVersionControl, PerforceVersionControl

__all__ = [
    'CommitResult', 'CommitStatus', 'DeclarationBuilder', 'Diagnostic', 'DiagnosticKind',
    'Document', 'PersistenceGate', 'SkipReason', 'check_balanced', 'export_macro_token',
    'split_name', 'create_version_control', 'get_file_system', 'get_version_control',
    'get_persistence_gate', 'get_header_generator', 'new_document',
]


def create_version_control(config: AppConfig, working_dir: Union[str, Path, None] = None) -> VersionControl:
    """Build the version control backend named by the configuration."""
    backend = config.vcs.backend
    if backend == "git":
        return GitVersionControl(working_dir, uses_checkout=config.vcs.uses_checkout)
    if backend == "perforce":
        return PerforceVersionControl(working_dir, uses_checkout=config.vcs.uses_checkout)
    return NullVersionControl()


def get_file_system() -> FileSystem:
    """Get the file system backend."""
    return registry.get_or_create("file_system", LocalFileSystem, FileSystem)


def get_version_control() -> VersionControl:
    """Get the version control backend selected in the configuration."""
    return registry.get_or_create(
        "version_control",
        lambda: create_version_control(config_manager.config),
        VersionControl
    )


def get_persistence_gate() -> PersistenceGate:
    """Get the persistence gate wired to the registered backends."""
    return registry.get_or_create(
        "persistence_gate",
        lambda: PersistenceGate(get_file_system(), get_version_control()),
        PersistenceGate
    )


def get_header_generator(project_name: Optional[str] = None) -> HeaderGenerator:
    """Build a header generator for the configured (or given) project."""
    config = config_manager.config
    return HeaderGenerator(
        get_persistence_gate(),
        project_name or config.project.name,
        config.emitter
    )


def new_document(path: Union[str, Path]) -> Document:
    """Create an empty Document using the configured indent unit."""
    return Document(path, indent_unit=config_manager.config.emitter.indent_unit)
