# stencil/components/emitter/document.py
"""
Line buffer and indent/block tracking for a single generated file.

A Document accumulates text for exactly one target path. Block and indent
bookkeeping is best-effort: a mismatched ``end_block`` or an indent
underflow is recorded as a ``Diagnostic`` and generation carries on, so a
partially wrong file can still be written and inspected.
"""
from pathlib import Path
from typing import List, Union

from stencil.constants import (
    BLOCK_CLOSE, BLOCK_OPEN, INDENT_UNIT, LINE_BREAK, STATEMENT_TERMINATOR,
)
from stencil.components.emitter.models import Diagnostic, DiagnosticKind
from stencil.errors import DocumentSealedError
from stencil.utils.logging import get_logger

logger = get_logger(__name__)


class Document:
    """
    Accumulated output for one target file.
    """

    def __init__(self, path: Union[str, Path], indent_unit: str = INDENT_UNIT):
        self.path = Path(path)
        self.indent_unit = indent_unit
        self._lines: List[str] = []
        self._indent_depth = 0
        self._block_count = 0
        self._diagnostics: List[Diagnostic] = []
        self._sealed = False
        self._pending_add = False
        self._logger = logger.with_context(document=str(self.path))

    # -------------------------------------------------------------- state

    @property
    def text(self) -> str:
        return "".join(self._lines)

    @property
    def indent_depth(self) -> int:
        return self._indent_depth

    @property
    def block_count(self) -> int:
        return self._block_count

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def is_consistent(self) -> bool:
        return not self._diagnostics

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def pending_add(self) -> bool:
        """Whether the file was written but never marked for add."""
        return self._pending_add

    def set_pending_add(self, pending: bool) -> None:
        self._pending_add = pending

    def seal(self) -> None:
        """Mark the Document as consumed; further emission raises."""
        self._sealed = True

    def record(self, kind: DiagnosticKind, message: str) -> Diagnostic:
        """Attach a structural diagnostic to this Document."""
        diagnostic = Diagnostic(kind=kind, message=message, line_number=len(self._lines) + 1)
        self._diagnostics.append(diagnostic)
        if kind == DiagnosticKind.BLOCK_MISMATCH:
            self._logger.error(f"{message} (line {diagnostic.line_number})")
        else:
            self._logger.warning(f"{message} (line {diagnostic.line_number})")
        return diagnostic

    # -------------------------------------------------------- line buffer

    def line(
        self,
        text: str = "",
        terminate: bool = False,
        indent: bool = True,
        indent_offset: int = 0
    ) -> None:
        """
        Append one line of output.

        Args:
            text: Line content without line break
            terminate: Whether to append the statement terminator
            indent: Whether to prefix the current indentation
            indent_offset: Added to the current depth; the sum is clamped at zero
        """
        if self._sealed:
            raise DocumentSealedError(f"Document for {self.path} was already committed")

        prefix = ""
        # Blank lines carry no indentation
        if indent and text:
            prefix = self.indent_unit * max(0, self._indent_depth + indent_offset)

        suffix = STATEMENT_TERMINATOR if terminate else ""
        self._lines.append(f"{prefix}{text}{suffix}{LINE_BREAK}")

    # ------------------------------------------------- indent/block tracker

    def push_indent(self) -> None:
        self._indent_depth += 1

    def pop_indent(self) -> None:
        if self._indent_depth == 0:
            self.record(DiagnosticKind.INDENT_UNDERFLOW, "Indent underflow")
            return
        self._indent_depth -= 1

    def start_block(self, indent: bool = True) -> None:
        """Open a block: emit the opening delimiter and optionally indent."""
        self._block_count += 1
        self.line(BLOCK_OPEN)
        if indent:
            self.push_indent()

    def end_block(self, unindent: bool = True, terminate: bool = False) -> None:
        """
        Close the innermost block.

        A close without an open block is recorded as a block mismatch; the
        closing delimiter is still emitted.
        """
        if self._block_count == 0:
            self.record(DiagnosticKind.BLOCK_MISMATCH, "Block end mismatch")
        else:
            self._block_count -= 1

        if unindent:
            self.pop_indent()

        self.line(BLOCK_CLOSE, terminate)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"Document(path={str(self.path)!r}, lines={len(self._lines)}, "
            f"indent_depth={self._indent_depth}, block_count={self._block_count})"
        )
