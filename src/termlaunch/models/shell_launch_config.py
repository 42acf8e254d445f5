"""Shell launch model."""

from dataclasses import dataclass
from enum import Enum


@dataclass
class ShellLaunchConfig:
    """How to spawn a terminal so it opens at the requested directory."""

    shell: Enum
    executable: str
    args: list[str]
    cwd: str | None = None

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]
