from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from logstats.result import Err, Ok, Result


def test_ok_and_err_flags() -> None:
    r1: Result[int, str] = Ok(10)
    r2: Result[int, str] = Err("boom")

    assert r1.is_ok()
    assert not r1.is_err()
    assert not r2.is_ok()
    assert r2.is_err()


@given(st.integers())
def test_ok_bind_and_map_err(value: int) -> None:
    r: Result[int, str] = Ok(value)

    assert r.bind(lambda x: Ok(x + 1)).unwrap() == value + 1
    assert r.map_err(len).unwrap() == value


@given(st.text())
def test_err_short_circuits_bind(error: str) -> None:
    r: Result[int, str] = Err(error)

    def boom(_: int) -> Result[int, str]:
        raise RuntimeError("must not be called")

    out = r.bind(boom)
    assert isinstance(out, Err)
    assert out.error == error


@given(st.text())
def test_err_map_err_transforms(error: str) -> None:
    out = Err[int, str](error).map_err(len)
    assert isinstance(out, Err)
    assert out.error == len(error)


def test_unwrap_err_raises() -> None:
    with pytest.raises(ValueError, match="boom"):
        Err("boom").unwrap()


def test_base_result_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        Result().is_ok()
