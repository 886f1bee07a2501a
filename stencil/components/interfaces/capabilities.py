# stencil/components/interfaces/capabilities.py
"""
Capability interfaces for objects described by generated code.

Objects declare the capabilities they implement by inheriting from these
classes; consumers ask ``isinstance(obj, HasSpeaker)`` and so on.
"""
from abc import ABC, abstractmethod


class HasDisplayName(ABC):
    """Object with a human readable display name."""

    @abstractmethod
    def get_display_name(self) -> str:
        pass


class HasBodyText(ABC):
    """Object carrying a block of (localized) text."""

    @abstractmethod
    def get_text(self) -> str:
        pass


class HasSpeaker(ABC):
    """Object spoken by another object, referenced by id."""

    @abstractmethod
    def get_speaker_id(self) -> str:
        pass
