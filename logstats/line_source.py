from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator

from logstats.errors import LogStatsError, decode_error, io_error
from logstats.result import Err, Ok, Result


@dataclass(frozen=True)
class SourceLine:
    number: int
    text: str
    byte_length: int


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def read_lines(stream: BinaryIO) -> Iterator[Result[SourceLine, LogStatsError]]:
    """
    Yield the lines of a binary stream, numbered from 1.

    The terminator (`\\n` or `\\r\\n`) is not part of the text nor of the
    byte length. The first read or UTF-8 failure is yielded as Err and ends
    the sequence.
    """
    number = 0
    while True:
        number += 1
        try:
            raw = stream.readline()
        except OSError as exc:
            yield Err(io_error("Could not read from the file", exc).at_line(number))
            return
        if not raw:
            return

        data = _strip_terminator(raw)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            yield Err(decode_error(exc).at_line(number))
            return

        yield Ok(SourceLine(number=number, text=text, byte_length=len(data)))
