"""Command-line interface for termlaunch."""

from termlaunch.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
