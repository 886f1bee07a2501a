# stencil/utils/__init__.py
"""
Utility functions for Stencil.

This package provides logging setup and the context-aware logger wrapper.
"""

from .logging import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
