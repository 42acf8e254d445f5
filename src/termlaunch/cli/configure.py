"""`termlaunch configure` command implementation."""

import argparse
import sys

from termlaunch.cli.shared import configure_logging
from termlaunch.config import CONFIG_FILE, save_config
from termlaunch.models import TermlaunchConfig
from termlaunch.shells import UnsupportedPlatformError, get_backend


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the configure command."""
    parser = argparse.ArgumentParser(
        prog="termlaunch configure",
        description="Set the terminal emulator termlaunch opens by default",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    shell_group = parser.add_mutually_exclusive_group(required=True)
    shell_group.add_argument(
        "--shell",
        metavar="LABEL",
        help='Preferred terminal, by label (example: "GNOME Terminal")',
    )
    shell_group.add_argument(
        "--clear-shell",
        action="store_true",
        help="Forget the stored preference and use the default terminal",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute the configure command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

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

    config = TermlaunchConfig(shell=None if args.clear_shell else args.shell)
    try:
        save_config(config)
    except OSError as e:
        print(f"Error: could not write {CONFIG_FILE}: {e}", file=sys.stderr)
        return 1

    print(f"Configuration saved to {CONFIG_FILE}")
    print(f"  shell: {config.shell or '(default: ' + backend.default.value + ')'}")
    return 0
