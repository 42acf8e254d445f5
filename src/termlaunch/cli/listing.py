"""`termlaunch list` command implementation."""

import argparse
import sys

from termlaunch.cli.shared import configure_logging, discover, format_found_shell
from termlaunch.config import load_config
from termlaunch.shells import UnsupportedPlatformError, get_backend


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the list command."""
    parser = argparse.ArgumentParser(
        prog="termlaunch list",
        description="List the terminal emulators installed on this machine",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    return parser


def run(argv: list[str]) -> int:
    """Execute the list command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        backend = get_backend()
    except UnsupportedPlatformError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = load_config()
    preferred = backend.parse(config.shell) if config.shell else backend.default
    available = discover(backend)
    if not available:
        print("No supported terminal emulators found.")
        print("Known terminals: " + ", ".join(backend.labels()))
        return 0

    for found in available:
        print(format_found_shell(found, preferred=found.shell is preferred))
    return 0
