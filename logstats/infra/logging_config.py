from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from logstats.infra.config_loader import LoggingConfig


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            log_entry.update(getattr(record, "extra_data"))

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def build_handler(config: LoggingConfig) -> logging.Handler:
    if config.format == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    # stdout carries the report, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger once. Importing this module does nothing;
    if the root logger already has handlers (test runner, embedding app)
    only the level is applied.
    """
    log_level = getattr(logging, config.level.upper(), logging.WARNING)
    logging.basicConfig(level=log_level, handlers=[build_handler(config)])
    logging.getLogger("logstats").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
