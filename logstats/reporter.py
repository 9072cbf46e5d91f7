from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List

import deal

from logstats.aggregator import StatsTable


@dataclass(frozen=True)
class ReportRow:
    label: str
    count: int
    total_bytes: int


def _strictly_ascending(result: List[ReportRow]) -> bool:
    return all(a.label < b.label for a, b in zip(result, result[1:]))


@deal.post(_strictly_ascending, message="rows sorted by label")
def sorted_rows(table: StatsTable) -> List[ReportRow]:
    """Rows of the table ordered by label, so output is reproducible."""
    return [
        ReportRow(label=label, count=stats.count, total_bytes=stats.total_bytes)
        for label, stats in sorted(table.items(), key=lambda kv: kv[0])
    ]


def format_row(row: ReportRow) -> str:
    label = json.dumps(row.label, ensure_ascii=False)
    return f"Type {label}: Number of Objects: {row.count}; Total Bytes: {row.total_bytes}"


def format_report(table: StatsTable) -> List[str]:
    return [format_row(row) for row in sorted_rows(table)]
