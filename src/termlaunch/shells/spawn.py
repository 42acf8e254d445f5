"""Process creation for launched terminals."""

import logging
import shlex
import subprocess
from collections.abc import Callable

from termlaunch.models import ShellLaunchConfig

log = logging.getLogger(__name__)

SpawnProcess = Callable[[ShellLaunchConfig], subprocess.Popen]


def spawn_process(config: ShellLaunchConfig) -> subprocess.Popen:
    """Start the terminal described by ``config`` and return without waiting.

    Standard streams are inherited from the caller. ``OSError`` from the
    operating system (missing executable, bad working directory) propagates.
    """
    log.debug("spawning %s (cwd=%s)", shlex.join(config.argv), config.cwd)
    return subprocess.Popen(config.argv, cwd=config.cwd)
