"""Pure helpers for request parsing and validation."""
import base64
import binascii
import json
from decimal import Decimal
from typing import Any, Dict, Optional

from items_api.errors import ValidationError


def path_id(event: Dict[str, Any]) -> Optional[str]:
    # GET /items/{id}
    params = event.get("pathParameters") or {}
    return params.get("id") or None


def raw_body(event: Dict[str, Any]) -> Optional[str]:
    body = event.get("body")
    if not body:
        return None
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError("request body is not valid base64 text") from e
    return body


def parse_body(raw: str) -> Any:
    # Decimal, not float: the DynamoDB resource layer refuses floats.
    # Malformed JSON propagates as an unexpected failure.
    return json.loads(raw, parse_float=Decimal)


def validate_item(item: Any) -> Dict[str, Any]:
    if not isinstance(item, dict) or not item.get("id"):
        raise ValidationError("Missing id in request body")
    return item
