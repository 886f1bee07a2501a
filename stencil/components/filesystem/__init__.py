# stencil/components/filesystem/__init__.py
"""Local file system backend."""
from stencil.components.filesystem.local import LocalFileSystem

__all__ = ['LocalFileSystem']
