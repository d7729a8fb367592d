"""Error types raised by the Helium API client."""

from __future__ import annotations

from typing import Any, Optional


class HeliumErrorBase(RuntimeError):
    """Base error that attaches provided keyword fields as attributes."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class HeliumClientError(HeliumErrorBase):
    """Raised when Helium REST operations fail."""


# Context dispatch exceptions
class UnsupportedContextError(HeliumClientError):
    """Operation was invoked with a context it does not support."""

    def __init__(self, context: Any, operation: str = "list") -> None:
        super().__init__(
            f"Cannot {operation} transactions for context of type {type(context).__name__}",
            context=context,
            operation=operation,
        )


class InvalidBlockReferenceError(HeliumClientError):
    """Block context carries neither a height nor a hash."""

    def __init__(self) -> None:
        super().__init__("Block must have either height or hash")


# Transport exceptions
class TransportError(HeliumClientError):
    """HTTP request failed or returned a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        path: str,
        status: Optional[int] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message, path=path, status=status, payload=payload)


class NotFoundError(TransportError):
    """Requested resource does not exist (HTTP 404)."""

    def __init__(self, path: str, payload: Any = None) -> None:
        super().__init__(f"Helium resource not found: {path}", path=path, status=404, payload=payload)


# Payload exceptions
class ResponseFormatError(HeliumClientError):
    """Response payload is missing a structurally required field."""

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message, payload=payload)


__all__ = [
    "HeliumErrorBase",
    "HeliumClientError",
    "UnsupportedContextError",
    "InvalidBlockReferenceError",
    "TransportError",
    "NotFoundError",
    "ResponseFormatError",
]
