"""Platform-independent contract shared by every shell backend."""

import subprocess
from abc import ABC, abstractmethod
from enum import Enum

from termlaunch.models import FoundShell, ShellLaunchConfig
from termlaunch.shells.probe import PathExists, path_exists
from termlaunch.shells.spawn import SpawnProcess, spawn_process


class ShellBackend(ABC):
    """Discover and launch the terminal emulators of one operating system.

    Subclasses set ``name``, ``shells`` (the enum of known identities) and
    ``default`` (returned by ``parse`` for labels it does not know).
    """

    name: str
    shells: type[Enum]
    default: Enum

    def __init__(
        self,
        exists: PathExists = path_exists,
        spawn: SpawnProcess = spawn_process,
    ) -> None:
        self._exists = exists
        self._spawn = spawn

    def labels(self) -> list[str]:
        """Return every known label in catalog order."""
        return [shell.value for shell in self.shells]

    @abstractmethod
    def parse(self, label: str) -> Enum: ...

    @abstractmethod
    async def get_available_shells(self) -> list[FoundShell]: ...

    @abstractmethod
    def build_launch_config(self, found_shell: FoundShell, directory: str) -> ShellLaunchConfig: ...

    @abstractmethod
    def launch(self, found_shell: FoundShell, directory: str) -> subprocess.Popen: ...
