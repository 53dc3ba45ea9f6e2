"""Write handler: POST /items."""
from typing import Any, Dict, Optional

from items_api.boundary import invoke
from items_api.config import current_settings
from items_api.errors import ValidationError
from items_api.logic import parse_body, raw_body, validate_item
from items_api.observability import configure_logging
from items_api.responses import response
from items_api.storage import ItemStore, default_store

OPERATION = "PutItem"


def put_item(event: Dict[str, Any], store: ItemStore,
             metrics_namespace: Optional[str] = None) -> Dict[str, Any]:
    def work(fields: Dict[str, Any]) -> Dict[str, Any]:
        raw = raw_body(event)
        if raw is None:
            raise ValidationError("Missing request body")
        item = validate_item(parse_body(raw))
        fields["id"] = item["id"]
        store.put(item)
        return response(201, {"message": "Item created successfully", "item": item})

    return invoke(OPERATION, work, metrics_namespace)


def handler(event: Dict[str, Any], _context: Any) -> Dict[str, Any]:
    settings = current_settings()
    configure_logging(settings.log_level)
    return put_item(event, default_store(), settings.metrics_namespace)
