import copy

import pytest

from items_api.storage import ItemStore


class FakeTable:
    """Just enough of a boto3 DynamoDB Table for the handlers."""

    def __init__(self):
        self.rows = {}
        self.calls = []

    def get_item(self, Key):
        self.calls.append(("get_item", Key))
        row = self.rows.get(Key["id"])
        return {"Item": copy.deepcopy(row)} if row is not None else {}

    def put_item(self, Item):
        self.calls.append(("put_item", Item))
        if not isinstance(Item.get("id"), str):
            raise RuntimeError("ValidationException: key type mismatch for id")
        self.rows[Item["id"]] = copy.deepcopy(Item)
        return {}


class FailingTable:
    def get_item(self, Key):
        raise RuntimeError("storage unavailable")

    def put_item(self, Item):
        raise RuntimeError("storage unavailable")


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def store(table):
    return ItemStore(table)


@pytest.fixture
def failing_store():
    return ItemStore(FailingTable())
