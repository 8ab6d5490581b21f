from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class GatewayError(Exception):
    """An error reported by, or on the way to, the storefront API."""

    status: Optional[int]
    message: str
    code: str = "gateway_error"
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status} {self.code}: {self.message}"


class NotFoundError(GatewayError):
    pass


class ConflictError(GatewayError):
    pass


class UnauthorizedError(GatewayError):
    pass


class BadRequestError(GatewayError):
    pass


class MalformedPayloadError(GatewayError):
    pass


class TransportError(GatewayError):
    """Network failure; the request never produced an HTTP response."""


def error_from_response(status: int, payload: Any) -> GatewayError:
    """Map an error response (``{"error": {...}}`` envelope) onto the taxonomy."""
    body = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(body, dict):
        body = {}
    code = str(body.get("code") or "http_error")
    message = str(body.get("message") or f"HTTP {status}")
    details = body.get("details") if isinstance(body.get("details"), dict) else {}

    if status == 404:
        cls = NotFoundError
    elif status == 401 or code in ("unauthorized", "invalid_credentials"):
        cls = UnauthorizedError
    elif status == 409 or code == "conflict":
        cls = ConflictError
    elif status == 400:
        cls = BadRequestError
    else:
        cls = GatewayError
    return cls(status=status, message=message, code=code, details=details)
