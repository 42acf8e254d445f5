"""Shared fixtures for termlaunch tests."""

import asyncio
from unittest.mock import MagicMock

import pytest

from termlaunch.shells import LinuxShellBackend


def fake_filesystem(*present: str, delays: dict[str, float] | None = None):
    """Return an async existence check that only knows about ``present``."""
    delays = delays or {}

    async def exists(path: str) -> bool:
        await asyncio.sleep(delays.get(path, 0))
        return path in present

    return exists


@pytest.fixture
def spawn():
    process = MagicMock()
    process.pid = 4242
    return MagicMock(return_value=process)


@pytest.fixture
def make_backend(spawn):
    def _make(*present: str) -> LinuxShellBackend:
        return LinuxShellBackend(exists=fake_filesystem(*present), spawn=spawn)

    return _make
