"""Request building.

`prepare_request` is the entry point used by endpoints: with `params=None`
the request goes out without a query string and neither validation nor
encoding runs. Nothing here touches the network.
"""

from __future__ import annotations

import logging

import httpx

from apisports_football.core.config import ClientConfig
from apisports_football.core.domain.params import QueryParams
from apisports_football.core.errors import FieldValidationError, TransportError
from apisports_football.core.services.query_encoding import encode_params
from apisports_football.core.services.validation import validate_params

logger = logging.getLogger(__name__)


def build_request(
    config: ClientConfig,
    path: str,
    query: list[tuple[str, str]] | None = None,
) -> httpx.Request:
    """Build a GET request for `path` (format: '/path/to/endpoint')."""

    url = f"{config.base_url}{path}"
    try:
        if query is None:
            return httpx.Request("GET", url)
        return httpx.Request("GET", url, params=query)
    except httpx.InvalidURL as exc:
        raise TransportError(f"failed to generate new http request: {exc}", "INVALID_URL") from exc


def prepare_request(
    config: ClientConfig,
    path: str,
    params: QueryParams | None,
) -> httpx.Request:
    if params is None:
        return build_request(config, path)

    try:
        validate_params(params)
    except FieldValidationError:
        logger.error("error while validating query parameters", extra={"path": path})
        raise

    return build_request(config, path, encode_params(params))
