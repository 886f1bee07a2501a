# stencil/components/vcs/base.py
"""
Shared plumbing for command-line version control backends.
"""
import subprocess
from abc import abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from stencil.constants import VCS_COMMAND_TIMEOUT
from stencil.components.interfaces.storage import VersionControl
from stencil.errors import VersionControlError
from stencil.utils.logging import get_logger

logger = get_logger(__name__)


class NullVersionControl(VersionControl):
    """Version control disabled: never checks out, never adds."""

    def is_enabled(self) -> bool:
        return False

    def uses_checkout(self) -> bool:
        return False

    def check_out(self, path: Path) -> None:
        pass

    def mark_for_add(self, path: Path) -> None:
        pass


class CommandVersionControl(VersionControl):
    """
    Base class for backends driven through a command-line client.

    Args:
        working_dir: Directory commands run in when no file path applies
        uses_checkout: Override for the backend's checkout requirement
    """

    executable: str = ""
    requires_checkout: bool = False

    def __init__(self, working_dir: Union[str, Path, None] = None, uses_checkout: Optional[bool] = None):
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self._uses_checkout = self.requires_checkout if uses_checkout is None else uses_checkout
        self._enabled: Optional[bool] = None
        self._logger = logger.with_context(vcs=self.executable)

    def uses_checkout(self) -> bool:
        return self._uses_checkout

    def is_enabled(self) -> bool:
        if self._enabled is None:
            self._enabled = self._probe()
            self._logger.debug(f"{self.executable} enabled: {self._enabled}")
        return self._enabled

    def _probe(self) -> bool:
        """Check that the client is installed and the working dir is under control."""
        try:
            self._run(self.probe_args(), self._probe_dir())
        except VersionControlError as e:
            self._logger.debug(f"{self.executable} probe failed: {e}")
            return False
        return True

    def _probe_dir(self) -> Path:
        """Nearest existing ancestor of the working dir; output dirs may not exist yet."""
        probe_dir = self.working_dir
        while not probe_dir.is_dir() and probe_dir != probe_dir.parent:
            probe_dir = probe_dir.parent
        return probe_dir

    @abstractmethod
    def probe_args(self) -> List[str]:
        """Arguments for the command that checks the client is usable."""
        pass

    def _run(self, args: List[str], cwd: Path) -> str:
        command = [self.executable, *args]
        self._logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                cwd=str(cwd),
                capture_output=True,
                text=True,
                timeout=VCS_COMMAND_TIMEOUT
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise VersionControlError(f"Could not run {self.executable}: {e}") from e

        if result.returncode != 0:
            raise VersionControlError(
                f"'{' '.join(command)}' exited with {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout
