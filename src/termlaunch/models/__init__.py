"""Model package for termlaunch."""

from termlaunch.models.found_shell import FoundShell
from termlaunch.models.shell_launch_config import ShellLaunchConfig
from termlaunch.models.termlaunch_config import TermlaunchConfig

__all__ = [
    "FoundShell",
    "ShellLaunchConfig",
    "TermlaunchConfig",
]
