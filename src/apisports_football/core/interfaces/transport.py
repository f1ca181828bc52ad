"""Transport contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The pipeline only needs "send this request, give me status/headers/body";
  tests and alternative HTTP stacks can plug in without touching the core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import httpx


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@runtime_checkable
class Transport(Protocol):
    """Minimal contract for sending a fully built request.

    Design rules:
    - `send` is async because it performs network I/O.
    - Implementations attach the credential and raise `TransportError` for any
      failure of the exchange itself; HTTP error statuses are NOT failures here.
    """

    async def send(self, request: httpx.Request) -> TransportResponse:
        ...

    async def aclose(self) -> None:
        ...
