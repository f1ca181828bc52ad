"""Response envelope shared by every endpoint.

The API is inconsistent about some slots: `parameters` and `errors` arrive as
objects or as empty arrays, and `response` is an array for most endpoints but
a single object for a few. `RawEnvelope` keeps those slots untyped so the
decoder can branch on their runtime shape; `ResponseOK` is the normalized
result handed to resource projectors.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    get: str = ""
    parameters: Any = None
    errors: Any = None
    results: int = 0
    paging: dict[str, int] = Field(default_factory=dict)
    response: Any = None


class ResponseOK(BaseModel):
    """A successful envelope, `response` still undecoded (raw JSON bytes)."""

    get: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, Any] = Field(default_factory=dict)
    results: int = 0
    paging: dict[str, int] = Field(default_factory=dict)
    response: bytes = b""


class ErrorPayload(BaseModel):
    """Body of a 4xx/500 answer."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""
