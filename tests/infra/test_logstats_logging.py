from __future__ import annotations

import json
import logging
import sys

import pytest

from logstats.infra.config_loader import LoggingConfig
from logstats.infra.logging_config import (
    StructuredFormatter,
    build_handler,
    get_logger,
    setup_logging,
)


def test_structured_formatter_emits_json_with_extra_data() -> None:
    rec = logging.makeLogRecord(
        {"msg": "File opened", "levelname": "DEBUG", "extra_data": {"path": "x.ndjson"}}
    )
    entry = json.loads(StructuredFormatter().format(rec))
    assert entry["message"] == "File opened"
    assert entry["level"] == "DEBUG"
    assert entry["path"] == "x.ndjson"


def test_build_handler_writes_to_stderr() -> None:
    h = build_handler(LoggingConfig(format="json"))
    assert isinstance(h, logging.StreamHandler)
    assert h.stream is sys.stderr
    assert isinstance(h.formatter, StructuredFormatter)


def test_build_handler_text_format() -> None:
    h = build_handler(LoggingConfig(format="text"))
    assert not isinstance(h.formatter, StructuredFormatter)


@pytest.fixture()
def restore_level():
    lg = logging.getLogger("logstats")
    before = lg.level
    yield
    lg.setLevel(before)


def test_setup_logging_applies_level(restore_level) -> None:
    setup_logging(LoggingConfig(level="debug"))
    assert get_logger("logstats.aggregator").getEffectiveLevel() == logging.DEBUG

    setup_logging(LoggingConfig())
    assert get_logger("logstats.aggregator").getEffectiveLevel() == logging.WARNING
