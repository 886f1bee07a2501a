# stencil/components/__init__.py
"""
Implementation components for Stencil.

Prefer the accessors in ``stencil.api`` over importing from here directly.
"""
