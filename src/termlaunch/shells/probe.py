"""Filesystem existence checks used to discover installed shells."""

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable

log = logging.getLogger(__name__)

PathExists = Callable[[str], Awaitable[bool]]


def _stat_exists(path: str) -> bool:
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        log.debug("cannot stat %s, treating as unavailable: %s", path, e)
        return False
    return True


async def path_exists(path: str) -> bool:
    """Return whether ``path`` exists, without blocking the event loop."""
    return await asyncio.to_thread(_stat_exists, path)


async def get_path_if_available(path: str, exists: PathExists = path_exists) -> str | None:
    """Return ``path`` when it exists, otherwise None.

    An ``OSError`` from ``exists`` counts as unavailable.
    """
    try:
        found = await exists(path)
    except OSError as e:
        log.debug("probe of %s failed, treating as unavailable: %s", path, e)
        return None
    return path if found else None
