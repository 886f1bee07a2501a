# stencil/__init__.py
"""
Stencil: structured source-code emitter for generated C++ headers.
"""

__version__ = '0.1.0'
