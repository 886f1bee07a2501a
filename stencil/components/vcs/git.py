# stencil/components/vcs/git.py
"""
Git backend.

Git never locks files, so checkout is a no-op; new files are staged with
``git add``.
"""
from pathlib import Path
from typing import List

from stencil.components.vcs.base import CommandVersionControl


class GitVersionControl(CommandVersionControl):
    executable = "git"
    requires_checkout = False

    def probe_args(self) -> List[str]:
        return ["rev-parse", "--is-inside-work-tree"]

    def check_out(self, path: Path) -> None:
        self._logger.debug(f"git has no checkout step for {path}")

    def mark_for_add(self, path: Path) -> None:
        path = Path(path)
        self._logger.info(f"Staging new file {path}")
        self._run(["add", "--", path.name], path.parent)
