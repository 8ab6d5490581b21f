from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NoReturn, Optional


@dataclass
class ApiError(Exception):
    """Raise to return a consistent JSON error response.

    Codes used by the API: ``not_found`` (404), ``conflict`` (duplicate
    email, 400), ``invalid_credentials`` (400), ``unauthorized`` (401,
    bad or missing token), ``validation_error`` / ``invalid_json`` (400).
    """

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details or {},
                "request_id": request_id,
            }
        }


def abort_json(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> NoReturn:
    raise ApiError(status_code=status_code, code=code, message=message, details=details)
