"""Default command: open a terminal at a directory."""

import argparse
import logging
import os
import sys

from termlaunch import __version__
from termlaunch.cli.shared import configure_logging, discover
from termlaunch.config import load_config
from termlaunch.shells import UnsupportedPlatformError, get_backend

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for open mode."""
    parser = argparse.ArgumentParser(
        prog="termlaunch",
        description="Open an installed terminal emulator at a directory",
        epilog="Other commands: `termlaunch list`, `termlaunch configure`.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-s",
        "--shell",
        metavar="LABEL",
        help="Terminal to open, by label (overrides the configured preference)",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=os.curdir,
        help="Directory to open the terminal in (default: current directory)",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute open mode."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    directory = os.path.abspath(args.directory)
    if not os.path.isdir(directory):
        print(f"Error: {args.directory} is not a directory", file=sys.stderr)
        return 2

    try:
        backend = get_backend()
    except UnsupportedPlatformError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.shell is not None and args.shell not in backend.labels():
        print(
            f"Error: unknown terminal {args.shell!r}. "
            "Choose one of: " + ", ".join(backend.labels()),
            file=sys.stderr,
        )
        return 2

    label = args.shell if args.shell is not None else load_config().shell
    preferred = backend.parse(label) if label else backend.default
    log.debug("preferred shell: %s", preferred.value)

    available = discover(backend)
    if not available:
        print("Error: no supported terminal emulator is installed", file=sys.stderr)
        return 1

    found = next((f for f in available if f.shell is preferred), None)
    if found is None:
        found = available[0]
        print(
            f"Warning: {preferred.value} is not installed, using {found.shell.value}",
            file=sys.stderr,
        )

    try:
        process = backend.launch(found, directory)
    except OSError as e:
        print(f"Error: could not start {found.shell.value}: {e}", file=sys.stderr)
        return 1

    log.debug("started %s with pid %s", found.shell.value, process.pid)
    return 0
