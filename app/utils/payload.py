# app/utils/payload.py
"""Helpers for raw JSON form submissions"""
import json
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import InvalidPayloadError, MissingFieldsError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_object(raw: bytes) -> Dict[str, Any]:
    """
    Decode a request body that must be a JSON object.

    Raises:
        InvalidPayloadError: on malformed JSON or a non-object document
    """
    try:
        data = json.loads(raw or b"")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidPayloadError("Invalid JSON in request body", details=str(e))

    if not isinstance(data, dict):
        raise InvalidPayloadError("Request body must be a JSON object")

    return data


def find_missing_fields(data: Dict[str, Any], required_fields: Iterable[str]) -> List[str]:
    """Required fields that are absent or empty (None, "", 0, [] or {})"""
    return [field for field in required_fields if not data.get(field)]


def require_fields(data: Dict[str, Any], required_fields: Iterable[str]) -> None:
    missing = find_missing_fields(data, required_fields)
    if missing:
        raise MissingFieldsError(missing)


def validate_payload(schema: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """
    Validate a submission against a pydantic schema.

    Raises:
        InvalidPayloadError: listing each offending field and the reason
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        details = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        raise InvalidPayloadError("Invalid field values", details=details)
