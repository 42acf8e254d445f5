"""Terminal emulators known on Linux and how to open each at a directory."""

import asyncio
import logging
import subprocess
from enum import Enum
from typing import assert_never

from termlaunch.models import FoundShell, ShellLaunchConfig
from termlaunch.shells.base import ShellBackend
from termlaunch.shells.probe import PathExists, get_path_if_available, path_exists
from termlaunch.shells.spawn import SpawnProcess, spawn_process

log = logging.getLogger(__name__)


class LinuxShell(Enum):
    GNOME = "GNOME Terminal"
    TILIX = "Tilix"
    URXVT = "URxvt"
    KONSOLE = "Konsole"
    XTERM = "XTerm"
    POWERSHELL_CORE = "PowerShell Core"


DEFAULT = LinuxShell.GNOME


def parse(label: str) -> LinuxShell:
    """Return the shell named by ``label``, or DEFAULT when nothing matches."""
    for shell in LinuxShell:
        if label == shell.value:
            return shell
    return DEFAULT


def get_shell_path(shell: LinuxShell) -> str:
    """Return the one well-known install path probed for ``shell``."""
    match shell:
        case LinuxShell.GNOME:
            return "/usr/bin/gnome-terminal"
        case LinuxShell.TILIX:
            return "/usr/bin/tilix"
        case LinuxShell.URXVT:
            return "/usr/bin/urxvt"
        case LinuxShell.KONSOLE:
            return "/usr/bin/konsole"
        case LinuxShell.XTERM:
            return "/usr/bin/xterm"
        case LinuxShell.POWERSHELL_CORE:
            return "/usr/bin/pwsh"
        case _:
            assert_never(shell)


async def get_available_shells(exists: PathExists = path_exists) -> list[FoundShell]:
    """Probe every known shell concurrently and return the installed ones.

    The result follows LinuxShell declaration order no matter which probe
    finishes first.
    """
    shells = list(LinuxShell)
    paths = await asyncio.gather(
        *(get_path_if_available(get_shell_path(shell), exists) for shell in shells)
    )
    found = [
        FoundShell(shell=shell, path=path)
        for shell, path in zip(shells, paths)
        if path is not None
    ]
    log.debug("found %d of %d shells: %s", len(found), len(shells), [f.shell.value for f in found])
    return found


def _powershell_literal(value: str) -> str:
    # '' is the only escape inside a PowerShell single-quoted string.
    return "'" + value.replace("'", "''") + "'"


def build_launch_config(found_shell: FoundShell, directory: str) -> ShellLaunchConfig:
    """Build the argument vector that opens ``found_shell`` at ``directory``."""
    shell = found_shell.shell
    match shell:
        case LinuxShell.URXVT:
            args, cwd = ["-cd", directory], None
        case LinuxShell.KONSOLE:
            args, cwd = ["--workdir", directory], None
        case LinuxShell.XTERM:
            args, cwd = ["-e", "/bin/bash"], directory
        case LinuxShell.TILIX | LinuxShell.GNOME:
            args, cwd = ["--working-directory", directory], None
        case LinuxShell.POWERSHELL_CORE:
            command = f"Set-Location -LiteralPath {_powershell_literal(directory)}"
            args, cwd = ["-NoExit", "-Command", command], None
        case _:
            assert_never(shell)
    return ShellLaunchConfig(shell=shell, executable=found_shell.path, args=args, cwd=cwd)


def launch(
    found_shell: FoundShell, directory: str, spawn: SpawnProcess = spawn_process
) -> subprocess.Popen:
    """Spawn ``found_shell`` opened at ``directory`` and return its process handle."""
    config = build_launch_config(found_shell, directory)
    log.debug("launching %s at %s", found_shell.shell.value, directory)
    return spawn(config)


class LinuxShellBackend(ShellBackend):
    """ShellBackend for Linux desktops."""

    name = "linux"
    shells = LinuxShell
    default = DEFAULT

    def parse(self, label: str) -> LinuxShell:
        return parse(label)

    async def get_available_shells(self) -> list[FoundShell]:
        return await get_available_shells(self._exists)

    def build_launch_config(self, found_shell: FoundShell, directory: str) -> ShellLaunchConfig:
        return build_launch_config(found_shell, directory)

    def launch(self, found_shell: FoundShell, directory: str) -> subprocess.Popen:
        return launch(found_shell, directory, self._spawn)
