"""DynamoDB access for items.

The boto3 resource is created once per execution context and reused by
every invocation that lands there. Handlers receive the store as an argument,
so tests pass an ItemStore wrapping a fake table instead.
"""
import functools
from typing import Any, Dict, Optional

import boto3

from items_api.config import Settings, current_settings


class ItemStore:
    def __init__(self, table: Any) -> None:
        self.table = table

    def get(self, item_id: str) -> Optional[Dict[str, Any]]:
        resp = self.table.get_item(Key={"id": item_id})
        return resp.get("Item")

    def put(self, item: Dict[str, Any]) -> None:
        # Unconditional overwrite; last write wins.
        self.table.put_item(Item=item)


def table_from_settings(settings: Settings) -> Any:
    dynamodb = boto3.resource("dynamodb", endpoint_url=settings.endpoint_url)
    return dynamodb.Table(settings.table_name)


@functools.lru_cache(maxsize=None)
def default_store() -> ItemStore:
    return ItemStore(table_from_settings(current_settings()))
