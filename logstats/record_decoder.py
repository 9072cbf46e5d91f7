from __future__ import annotations

import json
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from logstats.errors import LogStatsError, parse_error
from logstats.result import Err, Ok, Result


class Record(BaseModel):
    """One log entry. Only the `type` discriminator is read; the rest is ignored."""

    model_config = ConfigDict(extra="ignore")

    # Only string labels are accepted; numbers, arrays etc. are rejected.
    type: StrictStr = Field(..., description="Entry type used as grouping key")


class _JsonObject(dict):
    # how many times `type` appeared as a key of this object
    type_keys: int = 0


def _object_pairs(pairs: List[Tuple[str, Any]]) -> _JsonObject:
    obj = _JsonObject(pairs)
    obj.type_keys = sum(1 for key, _ in pairs if key == "type")
    return obj


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_type(text: str) -> Result[str, LogStatsError]:
    try:
        data = json.loads(
            text,
            object_pairs_hook=_object_pairs,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as exc:
        return Err(parse_error(text, exc))

    if isinstance(data, _JsonObject) and data.type_keys > 1:
        return Err(parse_error(text, ValueError("duplicate field `type`")))

    # pydantic's ValidationError is a ValueError
    try:
        rec = Record.model_validate(data)
    except ValueError as exc:
        return Err(parse_error(text, exc))
    return Ok(rec.type)
