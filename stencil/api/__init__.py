# stencil/api/__init__.py
"""
Public API for Stencil.

This module provides a stable interface to Stencil's components.
"""
from stencil.api import emitter

__all__ = ['emitter']
