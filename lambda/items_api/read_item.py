"""Read handler: GET /items/{id}."""
from typing import Any, Dict, Optional

from items_api.boundary import invoke
from items_api.config import current_settings
from items_api.errors import NotFoundError, ValidationError
from items_api.logic import path_id
from items_api.observability import configure_logging
from items_api.responses import response
from items_api.storage import ItemStore, default_store

OPERATION = "GetItem"


def get_item(event: Dict[str, Any], store: ItemStore,
             metrics_namespace: Optional[str] = None) -> Dict[str, Any]:
    def work(fields: Dict[str, Any]) -> Dict[str, Any]:
        item_id = path_id(event)
        if not item_id:
            raise ValidationError("Missing id parameter")
        fields["id"] = item_id
        item = store.get(item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return response(200, item)

    return invoke(OPERATION, work, metrics_namespace)


def handler(event: Dict[str, Any], _context: Any) -> Dict[str, Any]:
    settings = current_settings()
    configure_logging(settings.log_level)
    return get_item(event, default_store(), settings.metrics_namespace)
