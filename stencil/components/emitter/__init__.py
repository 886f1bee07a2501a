# stencil/components/emitter/__init__.py
"""
Structured source emitter: Document, DeclarationBuilder and PersistenceGate.
"""
from stencil.components.emitter.models import (
    CommitResult, CommitStatus, Diagnostic, DiagnosticKind, SkipReason,
)
from stencil.components.emitter.document import Document
from stencil.components.emitter.declarations import DeclarationBuilder
from stencil.components.emitter.naming import export_macro_token, split_name
from stencil.components.emitter.persistence import PersistenceGate
from stencil.components.emitter.validation import check_balanced

__all__ = [
    'CommitResult', 'CommitStatus', 'Diagnostic', 'DiagnosticKind', 'SkipReason',
    'Document', 'DeclarationBuilder', 'PersistenceGate',
    'export_macro_token', 'split_name', 'check_balanced',
]
