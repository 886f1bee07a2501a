# stencil/core/__init__.py
"""Core infrastructure for Stencil."""
from stencil.core.registry import registry, ServiceRegistry

__all__ = ['registry', 'ServiceRegistry']
