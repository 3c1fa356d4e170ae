"""
core/errors.py
---------------

Exceptions raised by the SDK.

Only :class:`ApiError` carries data returned by the API.  It is raised
for every non-2xx response and always exposes the same four fields
(``status``, ``message``, ``type``, ``errors``), so callers can branch on
``status`` or ``type`` regardless of which endpoint failed.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class TranzaktError(Exception):
    """Base class for all SDK errors."""


class ConfigurationError(TranzaktError):
    """Missing or invalid client configuration."""


class TransportError(TranzaktError):
    """No response was obtained (network, DNS or timeout failure)."""

    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class MalformedResponseError(TranzaktError):
    """A response body that could not be decoded.

    Raised for a 2xx body that is not JSON, and for a body httpx could
    not decode at all (``status`` is ``None`` then).
    """

    def __init__(self, message: str, *, status: Optional[int], text: str) -> None:
        super().__init__(message)
        self.status = status
        self.text = text


class ApiError(TranzaktError):
    """Normalized error for a response that did not indicate success."""

    def __init__(
        self,
        status: int,
        message: str,
        type: str,
        errors: Optional[List[str]] = None,
        *,
        body: Any = None,
    ) -> None:
        super().__init__(f"{status} {type}: {message}")
        self.status = status
        self.message = message
        self.type = type
        self.errors: List[str] = list(errors or [])
        self.body = body

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "message": self.message,
            "type": self.type,
            "errors": list(self.errors),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        return (
            f"ApiError(status={self.status!r}, message={self.message!r}, "
            f"type={self.type!r}, errors={self.errors!r})"
        )
