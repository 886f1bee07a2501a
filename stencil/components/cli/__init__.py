# stencil/components/cli/__init__.py
"""Command-line interface for Stencil."""
from stencil.components.cli.main import app

__all__ = ['app']
