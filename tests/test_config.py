import pytest

from items_api.config import Settings
from items_api.errors import ConfigError


def test_from_env_defaults():
    s = Settings.from_env({"TABLE_NAME": "items"})
    assert s.table_name == "items"
    assert s.log_level == "INFO"
    assert s.metrics_namespace == "ItemsService"
    assert s.endpoint_url is None


def test_from_env_overrides():
    s = Settings.from_env({
        "TABLE_NAME": "t",
        "LOG_LEVEL": "debug",
        "METRICS_NAMESPACE": "Custom",
        "AWS_ENDPOINT_URL_DYNAMODB": "http://localhost:8000",
    })
    assert s.log_level == "DEBUG"
    assert s.metrics_namespace == "Custom"
    assert s.endpoint_url == "http://localhost:8000"


@pytest.mark.parametrize("env", [{}, {"TABLE_NAME": ""}, {"TABLE_NAME": "  "}])
def test_missing_table_name(env):
    with pytest.raises(ConfigError):
        Settings.from_env(env)
