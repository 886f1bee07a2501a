# stencil/components/vcs/__init__.py
"""Version control backends for generated files."""
from stencil.components.vcs.base import CommandVersionControl, NullVersionControl
from stencil.components.vcs.git import GitVersionControl
from stencil.components.vcs.perforce import PerforceVersionControl

__all__ = ['CommandVersionControl', 'NullVersionControl', 'GitVersionControl', 'PerforceVersionControl']
