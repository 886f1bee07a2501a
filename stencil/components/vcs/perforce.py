# stencil/components/vcs/perforce.py
"""
Perforce backend.

Tracked files are read-only until opened with ``p4 edit``; new files are
opened with ``p4 add``.
"""
from pathlib import Path
from typing import List

from stencil.components.vcs.base import CommandVersionControl


class PerforceVersionControl(CommandVersionControl):
    executable = "p4"
    requires_checkout = True

    def probe_args(self) -> List[str]:
        return ["info"]

    def check_out(self, path: Path) -> None:
        path = Path(path)
        self._logger.info(f"Checking out {path}")
        self._run(["edit", str(path)], path.parent)

    def mark_for_add(self, path: Path) -> None:
        path = Path(path)
        self._logger.info(f"Marking {path} for add")
        self._run(["add", str(path)], path.parent)
