"""Shared helpers for validating required payload fields."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import ResponseFormatError


def validate_required_fields(payload: Any, required_fields: Iterable[str], *, label: str) -> Mapping[str, Any]:
    """
    Ensure all required fields are present in *payload*.

    Args:
        payload: Decoded JSON value to inspect.
        required_fields: Field names that must be present.
        label: Human readable name of the payload used in error messages.

    Returns:
        The payload, narrowed to a mapping.

    Raises:
        ResponseFormatError: If payload is not a mapping or any field is absent.
    """
    if not isinstance(payload, Mapping):
        raise ResponseFormatError(f"{label} must be a JSON object, got {type(payload).__name__}", payload)
    missing_fields = sorted(set(required_fields) - set(payload))
    if missing_fields:
        fields_display = ", ".join(missing_fields)
        raise ResponseFormatError(f"{label} missing required field(s): {fields_display}", payload)
    return payload


__all__ = ["validate_required_fields"]
