"""Signed bearer tokens.

A token is the user id signed with the app's SECRET_KEY. There is no
server-side session, refresh or revocation; a token is valid until it
expires (TOKEN_MAX_AGE seconds).
"""

from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from flask import current_app, g, request
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from shopfront.app.common.errors import abort_json

F = TypeVar("F", bound=Callable[..., Any])

TOKEN_SALT = "shopfront-auth"


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"], salt=TOKEN_SALT)


def issue_token(user_id: int) -> str:
    return _serializer().dumps({"user_id": user_id})


def read_token(token: str) -> Optional[int]:
    """User id carried by ``token``, or None if it is invalid or expired."""
    try:
        data = _serializer().loads(token, max_age=current_app.config.get("TOKEN_MAX_AGE"))
    except SignatureExpired:
        current_app.logger.info("Rejected expired token")
        return None
    except BadSignature:
        return None
    user_id = data.get("user_id") if isinstance(data, dict) else None
    return user_id if isinstance(user_id, int) else None


def token_required(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            abort_json(401, "unauthorized", "Authentication required")
        user_id = read_token(token.strip())
        if user_id is None:
            abort_json(401, "unauthorized", "Invalid or expired token")
        g.user_id = user_id
        return fn(*args, **kwargs)

    return wrapper  # type: ignore
