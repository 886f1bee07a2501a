# stencil/__main__.py
"""
Entry point for Stencil.
"""
from stencil.components.cli import app

if __name__ == "__main__":
    app()
