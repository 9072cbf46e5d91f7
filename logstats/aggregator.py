from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Union

import deal

from logstats.errors import LogStatsError, io_error, overflow_error
from logstats.infra.logging_config import get_logger
from logstats.line_source import SourceLine, read_lines
from logstats.record_decoder import decode_type
from logstats.result import Err, Ok, Result

logger = get_logger(__name__)

# total_bytes is an unsigned 64-bit counter
MAX_TOTAL_BYTES = 2**64 - 1


@dataclass
class TypeStats:
    # Number of entries with this type
    count: int = 0
    # Bytes used by all entries with this type, line terminators excluded
    total_bytes: int = 0


StatsTable = Dict[str, TypeStats]


@deal.pre(lambda table, label, byte_length: byte_length >= 0, message="byte_length must be >= 0")
@deal.post(lambda result: isinstance(result, Result), message="returns Result")
def record(table: StatsTable, label: str, byte_length: int) -> Result[TypeStats, LogStatsError]:
    """Count one entry of `label` that used `byte_length` bytes."""
    stats = table.get(label)
    current = stats.total_bytes if stats is not None else 0
    new_total = current + byte_length
    if new_total > MAX_TOTAL_BYTES:
        return Err(overflow_error(label))
    if stats is None:
        stats = table[label] = TypeStats()
    stats.count += 1
    stats.total_bytes = new_total
    return Ok(stats)


def _process_line(table: StatsTable, line: SourceLine) -> Result[TypeStats, LogStatsError]:
    return (
        decode_type(line.text)
        .bind(lambda label: record(table, label, line.byte_length))
        .map_err(lambda e: e.at_line(line.number))
    )


def process_lines(
    lines: Iterable[Result[SourceLine, LogStatsError]],
) -> Result[StatsTable, LogStatsError]:
    """
    Aggregate a sequence of lines into a fresh StatsTable.

    Stops at the first Err (read, decode, parse or overflow) and returns it;
    the partially filled table is dropped.
    """
    table: StatsTable = {}
    n_lines = 0
    for item in lines:
        res = item.bind(lambda line: _process_line(table, line))
        if res.is_err():
            return res  # type: ignore[return-value]
        n_lines += 1

    logger.debug(
        "Lines aggregated",
        extra={"extra_data": {"lines": n_lines, "types": len(table)}},
    )
    return Ok(table)


def process_file(path: Union[str, Path]) -> Result[StatsTable, LogStatsError]:
    """Aggregate every line of the file at `path`; the file is always closed."""
    path_str = str(path)
    try:
        fh = open(path, "rb")
    except OSError as exc:
        return Err(io_error("Could not open the file", exc).in_file(path_str))

    logger.debug("File opened", extra={"extra_data": {"path": path_str}})
    with fh:
        result = process_lines(read_lines(fh))

    if result.is_err():
        logger.debug(
            "Aborted processing",
            extra={"extra_data": {"path": path_str, "error": str(result.error)}},  # type: ignore[union-attr]
        )
    return result.map_err(lambda e: e.in_file(path_str))
