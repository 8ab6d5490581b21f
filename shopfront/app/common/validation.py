from __future__ import annotations

from typing import Any, Dict, Mapping, Type, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from shopfront.app.common.errors import abort_json

M = TypeVar("M", bound=BaseModel)


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        abort_json(400, "invalid_json", "Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        abort_json(400, "invalid_json", "Malformed JSON body")
    return data


def _field_errors(err: ValidationError) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for e in err.errors(include_url=False):
        name = ".".join(str(part) for part in e["loc"]) or "body"
        fields.setdefault(name, e["msg"])
    return fields


def validate(model: Type[M], data: Mapping[str, Any]) -> M:
    """Validate ``data`` against ``model`` or abort with a 400."""
    try:
        return model.model_validate(dict(data))
    except ValidationError as err:
        abort_json(400, "validation_error", "Invalid request", {"fields": _field_errors(err)})


def parse_body(model: Type[M]) -> M:
    return validate(model, get_json())


def parse_args(model: Type[M]) -> M:
    return validate(model, request.args.to_dict())
