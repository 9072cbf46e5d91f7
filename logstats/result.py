from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E]):
    """
    Ok/Err result for the fallible steps of a run.

    Every step that can fail (reading a line, decoding a record, adding to a
    counter) returns a Result instead of raising, so the orchestrator can
    attach context to the first failure and stop there:

        r = decode_type(line.text)
        if r.is_err():
            return r.map_err(lambda e: e.at_line(line.number))
    """

    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_err(self) -> bool:
        raise NotImplementedError

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the error on Err; Ok passes through untouched."""
        raise NotImplementedError

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible step (and_then)."""
        raise NotImplementedError

    def unwrap(self) -> T:
        raise NotImplementedError


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Ok(self.value)  # type: ignore[return-value]

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Err(fn(self.error))

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Err(self.error)  # type: ignore[return-value]

    def unwrap(self) -> T:
        raise ValueError(f"Called unwrap() on Err: {self.error}")
