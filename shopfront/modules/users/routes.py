from __future__ import annotations

import re

from flask import Blueprint, current_app, g
from pydantic import Field, field_validator
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from shopfront.app.common.auth import issue_token, token_required
from shopfront.app.common.errors import abort_json
from shopfront.app.common.validation import parse_body
from shopfront.app.extensions import db
from shopfront.app.models import User
from shopfront.schemas import AuthResult, UserOut, WireModel

bp = Blueprint("users", __name__)

EMAIL_REGEX = r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$"


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not re.match(EMAIL_REGEX, value):
        raise ValueError("Invalid email format")
    return value


class RegisterRequest(WireModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str
    password: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return _normalize_email(value)


class LoginRequest(WireModel):
    email: str
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return value.strip().lower()


def _auth_response(user: User) -> dict:
    return AuthResult(token=issue_token(user.id), user=UserOut.model_validate(user.to_dict())).to_wire()


@bp.post("/users/register")
def register():
    """POST /api/users/register - Create an account and return a token."""
    data = parse_body(RegisterRequest)

    if User.query.filter_by(email=data.email).first():
        abort_json(400, "conflict", "User already exists")

    user = User(
        name=data.name,
        email=data.email,
        password_hash=generate_password_hash(data.password),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.session.rollback()
        abort_json(400, "conflict", "User already exists")
    current_app.logger.info("Registered user %s", user.id)

    return _auth_response(user), 201


@bp.post("/users/login")
def login():
    """POST /api/users/login - Check credentials and return a token."""
    data = parse_body(LoginRequest)

    user = User.query.filter_by(email=data.email).first()
    if not user or not check_password_hash(user.password_hash, data.password):
        abort_json(400, "invalid_credentials", "Invalid credentials")

    return _auth_response(user), 200


@bp.get("/users/me")
@token_required
def me():
    """GET /api/users/me - Account behind the bearer token."""
    user = db.session.get(User, g.user_id)
    if not user:
        abort_json(401, "unauthorized", "Invalid token")
    return UserOut.model_validate(user.to_dict()).to_wire(), 200
