"""Terminal emulator discovery and launch, one backend per operating system."""

import logging
import sys

from termlaunch.shells.base import ShellBackend
from termlaunch.shells.linux import LinuxShellBackend
from termlaunch.shells.probe import PathExists, path_exists
from termlaunch.shells.spawn import SpawnProcess, spawn_process

log = logging.getLogger(__name__)

__all__ = [
    "LinuxShellBackend",
    "ShellBackend",
    "UnsupportedPlatformError",
    "get_backend",
]


class UnsupportedPlatformError(RuntimeError):
    """Raised when no shell backend exists for the host platform."""


def get_backend(
    platform: str | None = None,
    exists: PathExists = path_exists,
    spawn: SpawnProcess = spawn_process,
) -> ShellBackend:
    """Return the shell backend for ``platform`` (defaults to ``sys.platform``)."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("linux"):
        backend = LinuxShellBackend(exists=exists, spawn=spawn)
        log.debug("using %s shell backend for platform %r", backend.name, platform)
        return backend
    raise UnsupportedPlatformError(f"No terminal backend for platform {platform!r}.")
