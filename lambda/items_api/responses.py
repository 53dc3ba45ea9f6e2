"""API Gateway proxy responses."""
import base64
import json
from decimal import Decimal
from typing import Any, Dict

from boto3.dynamodb.types import Binary

HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": "no-store",
}


def _default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, set):
        return sorted(value, key=str)
    if isinstance(value, Binary):
        # Binary attributes travel as base64 text, like the DynamoDB JSON API.
        return base64.b64encode(value.value).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(body: Any) -> str:
    return json.dumps(body, default=_default)


def response(status: int, body: Any) -> Dict[str, Any]:
    return {"statusCode": status, "headers": dict(HEADERS), "body": dumps(body)}


def message(status: int, text: str) -> Dict[str, Any]:
    return response(status, {"message": text})


def internal_error() -> Dict[str, Any]:
    return message(500, "Internal server error")
