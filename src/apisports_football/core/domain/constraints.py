"""Field constraints for query parameters.

Each parameter model declares a static table `field name -> constraint`; a
single generic validator walks it (see `core.services.validation`). `None`
values are never checked: absence is always valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Constraint(Protocol):
    def check(self, value: Any) -> bool: ...

    def describe(self) -> str: ...


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class NonNegative:
    def check(self, value: Any) -> bool:
        return value >= 0

    def describe(self) -> str:
        return "greater than or equal to 0"


@dataclass(frozen=True)
class Range:
    low: int
    high: int

    def check(self, value: Any) -> bool:
        return self.low <= value <= self.high

    def describe(self) -> str:
        return f"between {self.low} and {self.high}"


@dataclass(frozen=True)
class Length:
    size: int

    def check(self, value: Any) -> bool:
        return len(_text(value)) == self.size

    def describe(self) -> str:
        return f"exactly {self.size} characters long"


@dataclass(frozen=True)
class MinLength:
    size: int

    def check(self, value: Any) -> bool:
        return len(_text(value)) >= self.size

    def describe(self) -> str:
        return f"at least {self.size} characters long"


SEASON = Range(1000, 9999)
LAST_N = Range(0, 99)
