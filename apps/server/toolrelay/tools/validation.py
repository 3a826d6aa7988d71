from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..domain.schemas import Violation

M = TypeVar("M", bound=BaseModel)


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "(root)"


def validate_arguments(model: Type[M], raw_args: Any) -> tuple[M | None, list[Violation]]:
    """
    Validate raw tool arguments against an input model.
    Returns (validated, []) on success or (None, violations) on mismatch.
    Never raises for bad input.
    """
    if not isinstance(raw_args, Mapping):
        return None, [
            Violation(
                field="(root)",
                message=f"Expected an object, got {type(raw_args).__name__}",
                kind="model_type",
            )
        ]

    try:
        return model.model_validate(dict(raw_args)), []
    except ValidationError as e:
        violations = [
            Violation(field=_field_path(err.get("loc", ())), message=err.get("msg", ""), kind=err.get("type", ""))
            for err in e.errors()
        ]
        return None, violations


def describe_violations(violations: list[Violation]) -> str:
    return "; ".join(f"{v.field}: {v.message}" for v in violations)
