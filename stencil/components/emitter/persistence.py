# stencil/components/emitter/persistence.py
"""
Persistence gate: commit a generated Document to disk.

Unchanged content is never rewritten, so regeneration leaves timestamps,
diffs and source control locks alone. Existing files are checked out
before writing when the version control backend requires it; new files
are marked for add after they were written.
"""
from pathlib import Path
from typing import Optional

from stencil.constants import OUTPUT_ENCODING
from stencil.components.emitter.document import Document
from stencil.components.emitter.models import (
    CommitResult, CommitStatus, DiagnosticKind, SkipReason,
)
from stencil.components.interfaces.storage import FileSystem, VersionControl
from stencil.components.vcs.base import NullVersionControl
from stencil.errors import FileSystemError, PersistenceError, VersionControlError
from stencil.utils.logging import get_logger

logger = get_logger(__name__)


class PersistenceGate:
    """
    Decides whether and how a Document reaches its target file.

    Args:
        filesystem: File system capability
        vcs: Version control capability; disabled when omitted
    """

    def __init__(self, filesystem: FileSystem, vcs: Optional[VersionControl] = None):
        self.filesystem = filesystem
        self.vcs = vcs or NullVersionControl()

    def commit(self, document: Document) -> CommitResult:
        """
        Commit a Document to its target path.

        The Document is sealed once the commit succeeds or is skipped.

        Args:
            document: The Document to persist
            
        Returns:
            CommitResult describing what happened
            
        Raises:
            PersistenceError: If reading, checking out, writing or adding fails
        """
        path = document.path
        log = logger.with_context(path=str(path))

        if document.is_empty:
            log.debug(f"Nothing generated for {path}, skipping")
            document.seal()
            return self._result(document, CommitStatus.SKIPPED, reason=SkipReason.EMPTY)

        if document.block_count > 0 and not any(
            d.kind == DiagnosticKind.UNBALANCED_BLOCKS for d in document.diagnostics
        ):
            document.record(
                DiagnosticKind.UNBALANCED_BLOCKS,
                f"Block count is {document.block_count} when writing to file"
            )

        content = document.text
        existed = self.filesystem.exists(path)

        if existed:
            try:
                old_content = self.filesystem.read_all(path)
            except FileSystemError as e:
                log.exception(f"Could not read existing {path}")
                raise PersistenceError(path, "read", str(e)) from e

            if old_content == content.encode(OUTPUT_ENCODING):
                log.debug(f"{path} is up to date")
                marked_for_add = False
                # A previous commit wrote the file but failed to add it
                if document.pending_add and self.vcs.is_enabled():
                    self._mark_for_add(document, log)
                    marked_for_add = True
                document.seal()
                return self._result(
                    document,
                    CommitStatus.SKIPPED,
                    reason=SkipReason.UNCHANGED,
                    marked_for_add=marked_for_add
                )

        vcs_enabled = self.vcs.is_enabled()
        checked_out = False

        if existed and vcs_enabled and self.vcs.uses_checkout():
            try:
                self.vcs.check_out(path)
            except VersionControlError as e:
                log.exception(f"Could not check out {path}")
                raise PersistenceError(path, "checkout", str(e)) from e
            checked_out = True

        try:
            self.filesystem.write_all(path, content, encoding=OUTPUT_ENCODING)
        except FileSystemError as e:
            log.exception(f"Could not write {path}")
            raise PersistenceError(path, "write", str(e)) from e

        marked_for_add = False
        if not existed and vcs_enabled:
            self._mark_for_add(document, log)
            marked_for_add = True

        log.info(f"{'Created' if not existed else 'Updated'} {path}")
        document.seal()
        return self._result(
            document,
            CommitStatus.WRITTEN,
            created=not existed,
            checked_out=checked_out,
            marked_for_add=marked_for_add
        )

    def _mark_for_add(self, document: Document, log) -> None:
        path = document.path
        try:
            self.vcs.mark_for_add(path)
        except VersionControlError as e:
            document.set_pending_add(True)
            log.exception(f"Wrote {path} but could not mark it for add")
            raise PersistenceError(path, "mark_for_add", str(e), written=True) from e
        document.set_pending_add(False)

    @staticmethod
    def _result(document: Document, status: CommitStatus, **fields) -> CommitResult:
        return CommitResult(
            path=Path(document.path),
            status=status,
            diagnostics=document.diagnostics,
            **fields
        )
