"""Base class for query parameter objects."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from apisports_football.core.domain.constraints import Constraint


class QueryParams(BaseModel):
    """Immutable set of optional filters for one endpoint.

    Every field defaults to `None` (absent). A present `False` or `0` is a
    real filter value and is serialized; `None` never is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    constraints: ClassVar[dict[str, Constraint]] = {}

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        info = cls.model_fields[field_name]
        return info.alias or field_name
