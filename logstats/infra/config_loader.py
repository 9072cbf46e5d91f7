from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from logstats.infra.logging_config import get_logger

logger = get_logger(__name__)


# =========================
# CONFIG MODELS
# =========================

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """
    Logging knobs. The default level keeps stderr quiet on successful runs,
    so the only thing a user sees there is a failure description.
    """

    level: str = "WARNING"
    format: Literal["json", "text"] = "json"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LEVELS)}")
        return v


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =========================
# LOADER
# =========================

CONFIG_FILENAME = "logstats.yml"


def _read_raw_yaml(path: Path) -> Dict[str, Any]:
    """Read YAML safely. Missing file -> {}; unreadable or non-mapping -> {} plus an error log."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.debug(
            "Config file not found, using defaults",
            extra={"extra_data": {"config_path": str(path)}},
        )
        return {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.error(
            "Error reading config file, using defaults",
            extra={"extra_data": {"config_path": str(path), "error": str(exc)}},
        )
        return {}

    if not isinstance(data, dict):
        logger.error(
            "Config YAML root is not a mapping, falling back to defaults",
            extra={"extra_data": {"config_path": str(path)}},
        )
        return {}
    return data


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Load `logstats.yml` (from the working directory unless `path` is given)
    and validate it with pydantic.

    - No file -> defaults.
    - Malformed or invalid file -> defaults.
    """
    config_path = Path(path) if path is not None else Path.cwd() / CONFIG_FILENAME
    raw = _read_raw_yaml(config_path)

    try:
        app_config = AppConfig(**raw)
    except (ValidationError, TypeError) as exc:
        logger.error(
            "Invalid config, using defaults",
            extra={"extra_data": {"config_path": str(config_path), "error": str(exc)}},
        )
        return AppConfig()

    logger.debug(
        "Config loaded",
        extra={"extra_data": {"config_path": str(config_path)}},
    )
    return app_config
