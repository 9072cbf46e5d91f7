from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    IO = "io"
    DECODE = "decode"
    PARSE = "parse"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class LogStatsError:
    """
    Failure of a run, as a value.

    Created where the failure happens (one line, or the file open) and then
    enriched while it travels up: `at_line` adds the 1-based line number and
    `in_file` adds the path. `describe()` renders the whole chain for humans;
    tests look at the fields.
    """

    kind: ErrorKind
    message: str
    path: Optional[str] = None
    line_no: Optional[int] = None
    raw_line: Optional[str] = None
    cause: Optional[BaseException] = None

    def at_line(self, line_no: int) -> LogStatsError:
        return replace(self, line_no=line_no)

    def in_file(self, path: str) -> LogStatsError:
        return replace(self, path=path)

    def describe(self) -> str:
        parts: List[str] = []
        if self.path is not None:
            parts.append(f"Could not process file {self.path!r}")
        if self.line_no is not None:
            parts.append(f"Could not process line number {self.line_no}")
        parts.append(self.message)
        if self.cause is not None:
            cause = str(self.cause).strip() or type(self.cause).__name__
            parts.append(cause)
        return ": ".join(parts)

    def __str__(self) -> str:
        return self.describe()


def io_error(message: str, cause: Optional[BaseException] = None) -> LogStatsError:
    return LogStatsError(ErrorKind.IO, message, cause=cause)


def decode_error(cause: UnicodeDecodeError) -> LogStatsError:
    return LogStatsError(ErrorKind.DECODE, "Line is not valid UTF-8", cause=cause)


def parse_error(raw_line: str, cause: Optional[BaseException] = None) -> LogStatsError:
    return LogStatsError(
        ErrorKind.PARSE,
        f"Could not parse `{raw_line}`",
        raw_line=raw_line,
        cause=cause,
    )


def overflow_error(label: str) -> LogStatsError:
    return LogStatsError(
        ErrorKind.OVERFLOW,
        f"Total number of bytes processed for type {label!r} exceeded 2^64",
    )
