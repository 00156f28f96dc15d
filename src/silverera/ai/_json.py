from __future__ import annotations

import json
from typing import Any, Optional

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from .errors import ResponseShapeError

CHAT_COMPLETION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["choices"],
    "properties": {
        "choices": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["message"],
                "properties": {
                    "message": {
                        "type": "object",
                        "required": ["content"],
                        "properties": {"content": {"type": "string"}},
                    }
                },
            },
        }
    },
}

IMAGE_GENERATION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["data"],
    "properties": {
        "data": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["url"],
                "properties": {"url": {"type": "string"}},
            },
        }
    },
}


def error_message(payload: Any) -> Optional[str]:
    """Return the provider error text when the payload carries an error indicator.

    The relay sends ``{"error": "text"}``; OpenAI-compatible providers send
    ``{"error": {"code": ..., "message": ...}}``.
    """

    if not isinstance(payload, dict):
        return None
    err = payload.get("error")
    if not err:
        return None
    if isinstance(err, str):
        return err
    if isinstance(err, dict) and isinstance(err.get("message"), str):
        return err["message"]
    return json.dumps(err, ensure_ascii=False)


def validate_shape(payload: Any, schema: dict[str, Any], *, context: str) -> None:
    try:
        validate(instance=payload, schema=schema)
    except _SchemaValidationError as e:
        raise ResponseShapeError(
            f"Unexpected response shape from {context}: {e.message}"
        ) from e


def decode_chat_content(payload: Any, *, context: str) -> str:
    validate_shape(payload, CHAT_COMPLETION_SCHEMA, context=context)
    return payload["choices"][0]["message"]["content"]


def decode_image_url(payload: Any, *, context: str) -> str:
    validate_shape(payload, IMAGE_GENERATION_SCHEMA, context=context)
    return payload["data"][0]["url"]
