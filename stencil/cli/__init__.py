# stencil/cli/__init__.py
"""
CLI forwarding module for Stencil.
"""
from stencil.components.cli import app

__all__ = ['app']
