"""Configuration management for moodlog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MOODLOG_HOME = Path(os.environ.get("MOODLOG_HOME", Path.home() / "moodlog"))
CONFIG_FILE = MOODLOG_HOME / "config" / "moodlog.conf"
DATA_DIR = MOODLOG_HOME / "data"

BACKENDS = ("file", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Config:
    """moodlog configuration."""

    data_dir: str = ""
    backend: str = "file"
    # Fail listings on a corrupt entry instead of skipping it
    strict_listing: bool = False
    log_level: str = "WARNING"


def _parse_bool(value: str) -> bool | None:
    match value.lower():
        case "1" | "true" | "yes" | "on":
            return True
        case "0" | "false" | "no" | "off":
            return False
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from moodlog.conf file."""
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
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_dir":
                config.data_dir = value
            case "backend":
                if value.lower() in BACKENDS:
                    config.backend = value.lower()
                else:
                    logger.warning(f"Unknown BACKEND {value!r}, using {config.backend}")
            case "strict_listing":
                parsed = _parse_bool(value)
                if parsed is None:
                    logger.warning(f"Failed to parse STRICT_LISTING: {value!r}")
                else:
                    config.strict_listing = parsed
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Unknown LOG_LEVEL {value!r}")

    return config
