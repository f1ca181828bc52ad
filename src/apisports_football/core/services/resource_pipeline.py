"""Per-call orchestration shared by every endpoint.

Sequence: build (validate + encode) -> send -> decode -> project.
Every stage failure is logged on the client logger and re-raised unchanged;
nothing is retried and no state survives the call.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from apisports_football.core.config import ClientConfig
from apisports_football.core.domain.envelope import ResponseOK
from apisports_football.core.domain.params import QueryParams
from apisports_football.core.errors import ApiSportsError, DecodingError
from apisports_football.core.interfaces.transport import Transport
from apisports_football.core.services.request_builder import prepare_request
from apisports_football.core.services.response_decoder import decode_response

T = TypeVar("T")


class ResourcePipeline:
    def __init__(
        self,
        config: ClientConfig,
        transport: Transport,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    async def execute(self, path: str, params: QueryParams | None) -> ResponseOK:
        log = self.logger

        try:
            request = prepare_request(self.config, path, params)
        except ApiSportsError as exc:
            log.error("error while building query", extra={"path": path, "error_code": exc.code})
            raise

        try:
            response = await self.transport.send(request)
        except ApiSportsError as exc:
            log.error("failed to execute request", extra={"path": path, "error_code": exc.code})
            raise

        log.debug(
            "response code : %s",
            response.status_code,
            extra={"path": path, "status_code": response.status_code},
        )

        try:
            return decode_response(response.status_code, response.body)
        except ApiSportsError as exc:
            log.error(
                "error while executing query",
                extra={"path": path, "status_code": response.status_code, "error_code": exc.code},
            )
            raise

    def project(self, envelope: ResponseOK, adapter: TypeAdapter[T]) -> T:
        """Decode the deferred `response` bytes into resource records."""

        try:
            return adapter.validate_json(envelope.response)
        except ValidationError as exc:
            self.logger.error("error while parsing response field", extra={"error_code": "DECODING_ERROR"})
            raise DecodingError(f"error while parsing response field: {exc}") from exc
