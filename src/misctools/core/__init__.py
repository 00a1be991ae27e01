"""Core types, enums and configuration for misctools."""

from misctools.core.config import Settings, settings
from misctools.core.enums import EqualityPolicy
from misctools.core.types import Container, Record, SequenceList

__all__ = [
    "Settings",
    "settings",
    "EqualityPolicy",
    "Container",
    "Record",
    "SequenceList",
]
