"""
Argument validation against a tool's declared input model.

Validation is structural only: required strings, enumerated strings and
arrays of strings. It never runs tool-specific logic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

import pydantic
import structlog
from pydantic import BaseModel

from kotlin_senior.dispatch.errors import FieldError, MissingArgumentsError, ValidationError
from kotlin_senior.dispatch.registry import ToolDescriptor

logger = structlog.get_logger(__name__)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


def _to_field_errors(exc: pydantic.ValidationError) -> List[FieldError]:
    """Convert pydantic error details to one FieldError per violation."""
    result = []
    for err in exc.errors(include_url=False):
        problem = "field required" if err["type"] == "missing" else err["msg"]
        result.append(FieldError(field=_field_name(err["loc"]), problem=problem))
    return result


def validate_arguments(descriptor: ToolDescriptor, raw: Any) -> BaseModel:
    """
    Validate raw caller-supplied arguments for ``descriptor``.

    Returns an instance of ``descriptor.input_model``. Raises
    MissingArgumentsError when ``raw`` is None and ValidationError when the
    payload is not an object or violates a field constraint.
    """
    if raw is None:
        raise MissingArgumentsError(descriptor.name)
    if not isinstance(raw, Mapping):
        raise ValidationError(
            descriptor.name,
            [FieldError(field="arguments", problem=f"expected an object, got {type(raw).__name__}")],
        )
    payload: Dict[str, Any] = dict(raw)
    try:
        return descriptor.input_model.model_validate(payload)
    except pydantic.ValidationError as e:
        errors = _to_field_errors(e)
        logger.debug("arguments_rejected", tool=descriptor.name, fields=[fe.field for fe in errors])
        raise ValidationError(descriptor.name, errors) from None
