# stencil/components/filesystem/local.py
"""
File system operations for generated files.

Writes go through a temporary file in the target directory followed by an
atomic rename, so readers see either the old or the new content.
"""
import os
import stat
import tempfile
from pathlib import Path

from stencil.components.interfaces.storage import FileSystem
from stencil.errors import FileSystemError
from stencil.utils.logging import get_logger

logger = get_logger(__name__)


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_all(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise FileSystemError(f"Failed to read {path}: {e}") from e

    def write_all(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        path_obj = Path(path)
        data = content.encode(encoding)
        tmp_name = None

        try:
            path_obj.parent.mkdir(parents=True, exist_ok=True)

            mode = 0o644
            if path_obj.exists():
                # Force: a read-only target (e.g. locked by source control) is replaced writable
                mode = stat.S_IMODE(path_obj.stat().st_mode) | stat.S_IWUSR

            fd, tmp_name = tempfile.mkstemp(dir=path_obj.parent, prefix=f".{path_obj.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path_obj)
            tmp_name = None

        except OSError as e:
            logger.exception(f"Error writing {path_obj}: {e}")
            raise FileSystemError(f"Failed to write {path_obj}: {e}") from e

        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug(f"Wrote {len(data)} bytes to {path_obj}")
