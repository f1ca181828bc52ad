"""Response decoding.

Status bands:
- 200-399: decode the envelope (which may still carry an API error).
- 400-500: decode `{"message": ...}` into an `APIResponseError`.
- anything else: `UnknownHTTPCodeError`.

The envelope is first parsed into untyped JSON, then the polymorphic slots
are normalized by their runtime shape. `response` is re-serialized to bytes
and left for the resource projector: it is an array for most endpoints and
an object for a few.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from apisports_football.core.domain.envelope import ErrorPayload, RawEnvelope, ResponseOK
from apisports_football.core.errors import (
    APIResponseError,
    DecodingError,
    UnknownHTTPCodeError,
)


def decode_response(status_code: int, body: bytes) -> ResponseOK:
    if 200 <= status_code < 400:
        return parse_result(body, status_code)
    if 400 <= status_code <= 500:
        raise parse_error(body, status_code)
    raise UnknownHTTPCodeError(status_code)


def _load_object(body: bytes, what: str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodingError(f"failed to unmarshal json {what}: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodingError(f"failed to unmarshal json {what}: expected an object, got {type(data).__name__}")
    return data


def format_error_map(errors: dict[str, Any]) -> str:
    return "\n".join(f"{key} : {value}" for key, value in errors.items())


def parse_result(body: bytes, status_code: int = 200) -> ResponseOK:
    data = _load_object(body, "raw response")
    try:
        raw = RawEnvelope.model_validate(data)
    except ValidationError as exc:
        raise DecodingError(f"failed to unmarshal json raw response: {exc}") from exc

    # An errors object means the call failed, whatever the HTTP status said.
    if isinstance(raw.errors, dict) and raw.errors:
        raise APIResponseError(format_error_map(raw.errors), status_code)

    parameters = raw.parameters if isinstance(raw.parameters, dict) else {}

    return ResponseOK(
        get=raw.get,
        parameters=parameters,
        errors={},
        results=raw.results,
        paging=raw.paging,
        response=json.dumps(raw.response).encode("utf-8"),
    )


def parse_error(body: bytes, status_code: int) -> APIResponseError:
    data = _load_object(body, "error response")
    try:
        payload = ErrorPayload.model_validate(data)
    except ValidationError as exc:
        raise DecodingError(f"failed to unmarshal json error response: {exc}") from exc
    return APIResponseError(payload.message, status_code)
