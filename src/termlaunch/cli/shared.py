"""Shared CLI helpers."""

import asyncio
import logging
import os
import sys

from termlaunch.constants import BOLD, CYAN, DIM, RESET
from termlaunch.models import FoundShell
from termlaunch.shells import ShellBackend


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def discover(backend: ShellBackend) -> list[FoundShell]:
    """Run shell discovery to completion from synchronous CLI code."""
    return asyncio.run(backend.get_available_shells())


def format_found_shell(found: FoundShell, preferred: bool = False) -> str:
    """Return one listing line: a preference marker, the label and the path."""
    marker = "*" if preferred else " "
    label = found.shell.value
    if supports_color():
        if preferred:
            label = f"{BOLD}{CYAN}{label}{RESET}"
        return f"{marker} {label}  {DIM}{found.path}{RESET}"
    return f"{marker} {label}  {found.path}"
