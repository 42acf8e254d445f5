"""Installed shell model."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FoundShell:
    """A shell identity paired with the executable path that was found on disk."""

    shell: Enum
    path: str
