"""Generic parameter validator.

Walks the constraint table declared on the parameter class and reports every
violation at once, so a caller fixing a request sees all offending fields.
"""

from __future__ import annotations

from apisports_football.core.domain.params import QueryParams
from apisports_football.core.errors import FieldValidationError, FieldViolation


def collect_violations(params: QueryParams) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    for name, constraint in type(params).constraints.items():
        value = getattr(params, name)
        if value is None:
            continue
        if not constraint.check(value):
            violations.append(
                FieldViolation(
                    field=type(params).wire_name(name),
                    constraint=constraint.describe(),
                    value=value,
                )
            )
    return violations


def validate_params(params: QueryParams | None) -> None:
    """Raise `FieldValidationError` listing all violations; no-op for `None`."""

    if params is None:
        return
    violations = collect_violations(params)
    if violations:
        raise FieldValidationError(violations)
