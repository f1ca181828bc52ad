"""Endpoint contract.

Each API resource (countries, fixtures, ...) is an adapter exposing one
`fetch` operation; the client facade only composes them.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from apisports_football.core.domain.envelope import ResponseOK


@runtime_checkable
class ResourceEndpoint(Protocol):
    """Minimal contract for one resource.

    - `path` is the fixed resource path ('/countries').
    - `fetch(None)` must be valid: callers can skip building parameters.
    """

    path: str

    async def fetch(self, params: Any | None = None) -> ResponseOK:
        ...
