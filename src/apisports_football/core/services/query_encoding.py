"""Query-string encoding of parameter objects.

Rules:
- Absent (`None`) fields are omitted; no empty placeholders.
- Dates render as `YYYY-MM-DD`, booleans as `true`/`false`, enums as their value.
- Pairs are sorted by key so the same filters always give the same string.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import parse_qsl, urlencode

from apisports_football.core.domain.params import QueryParams

P = TypeVar("P", bound=QueryParams)


def render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, dt.datetime):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)


def encode_params(params: QueryParams) -> list[tuple[str, str]]:
    model = type(params)
    pairs: list[tuple[str, str]] = []
    for name in model.model_fields:
        value = getattr(params, name)
        if value is None:
            continue
        pairs.append((model.wire_name(name), render_value(value)))
    return sorted(pairs)


def to_query_string(pairs: list[tuple[str, str]]) -> str:
    return urlencode(pairs)


def decode_query(model: type[P], query: str) -> P:
    """Rebuild a parameter object from a query string.

    Raises `ValueError` on a repeated key; unknown keys and unparsable values
    surface as pydantic's `ValidationError`.
    """

    data: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        if key in data:
            raise ValueError(f"duplicated query parameter: {key}")
        data[key] = value
    return model.model_validate(data)
