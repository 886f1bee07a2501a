# stencil/components/interfaces/__init__.py
"""Interfaces for Stencil's external collaborators."""
from stencil.components.interfaces.storage import FileSystem, VersionControl
from stencil.components.interfaces.capabilities import HasBodyText, HasDisplayName, HasSpeaker

__all__ = ['FileSystem', 'VersionControl', 'HasDisplayName', 'HasBodyText', 'HasSpeaker']
