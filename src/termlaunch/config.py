"""Persisted preferences for termlaunch."""

import json
import logging
import os
import time
from pathlib import Path

from pydantic import ValidationError

from termlaunch.models import TermlaunchConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".termlaunch"
CONFIG_FILE = CONFIG_DIR / "config.json"
SHELL_ENV_VAR = "TERMLAUNCH_SHELL"


def load_config() -> TermlaunchConfig:
    """Load stored preferences, letting TERMLAUNCH_SHELL override the shell."""
    config = TermlaunchConfig()
    try:
        with open(CONFIG_FILE, encoding="utf-8") as f:
            config = TermlaunchConfig.model_validate(json.load(f))
    except FileNotFoundError:
        log.debug("no config at %s, using defaults", CONFIG_FILE)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        log.debug("ignoring unreadable config %s: %s", CONFIG_FILE, e)

    override = os.environ.get(SHELL_ENV_VAR, "").strip()
    if override:
        log.debug("%s=%r overrides stored shell %r", SHELL_ENV_VAR, override, config.shell)
        config.shell = override
    return config


def save_config(config: TermlaunchConfig) -> None:
    """Write preferences atomically, readable only by the current user."""
    os.makedirs(CONFIG_DIR, mode=0o700, exist_ok=True)
    temp_file = CONFIG_FILE.with_name(f".{CONFIG_FILE.name}.{os.getpid()}.{time.time_ns()}.tmp")
    fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(exclude_none=True), f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, CONFIG_FILE)
    except OSError:
        temp_file.unlink(missing_ok=True)
        raise
    log.debug("saved config to %s", CONFIG_FILE)
