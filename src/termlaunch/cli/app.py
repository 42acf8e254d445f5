"""Top-level CLI router."""

import sys

from . import configure as configure_cmd
from . import launch as launch_cmd
from . import listing as listing_cmd


def main(argv: list[str] | None = None) -> int:
    """Route to list, configure, or open mode (the default)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "list":
        return listing_cmd.run(args[1:])
    if args and args[0] == "configure":
        return configure_cmd.run(args[1:])
    if args and args[0] == "open":
        args = args[1:]
    return launch_cmd.run(args)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
