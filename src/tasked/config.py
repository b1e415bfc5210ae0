"""Configuration management for Tasked."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.tasks import FILTERS, SORT_MODES

logger = logging.getLogger(__name__)

TASKED_HOME = Path(os.environ.get("TASKED_HOME", Path.home() / "tasked"))
CONFIG_FILE = TASKED_HOME / "config" / "tasked.conf"
DATA_DIR = TASKED_HOME / "data"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Tasked configuration."""

    tasks_file: str = ""
    default_sort: str = "priority"
    default_filter: str = "all"
    # Whether "move" into/out of completed also stamps/clears completed_at
    move_stamps_completion: bool = False
    due_soon_days: int = 3

    @property
    def tasks_path(self) -> Path:
        if self.tasks_file:
            return Path(self.tasks_file).expanduser()
        return DATA_DIR / "tasks.json"


def _strip_value(value: str) -> str:
    """Handle quoted values with inline comments: "value" # comment"""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from tasked.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "tasks_file":
                config.tasks_file = value
            case "default_sort":
                if value in SORT_MODES:
                    config.default_sort = value
                else:
                    logger.warning(f"Unknown DEFAULT_SORT {value!r}, keeping {config.default_sort}")
            case "default_filter":
                if value in FILTERS:
                    config.default_filter = value
                else:
                    logger.warning(f"Unknown DEFAULT_FILTER {value!r}, keeping {config.default_filter}")
            case "move_stamps_completion":
                lowered = value.lower()
                if lowered in TRUE_VALUES:
                    config.move_stamps_completion = True
                elif lowered in FALSE_VALUES:
                    config.move_stamps_completion = False
                else:
                    logger.warning(f"Invalid MOVE_STAMPS_COMPLETION value: {value!r}")
            case "due_soon_days":
                try:
                    config.due_soon_days = int(value)
                except ValueError:
                    logger.warning(f"Invalid DUE_SOON_DAYS value: {value!r}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
