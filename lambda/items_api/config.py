"""Runtime settings, read from the Lambda environment."""
import functools
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from items_api.errors import ConfigError

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_METRICS_NAMESPACE = "ItemsService"


@dataclass(frozen=True)
class Settings:
    table_name: str
    log_level: str = DEFAULT_LOG_LEVEL
    metrics_namespace: str = DEFAULT_METRICS_NAMESPACE
    endpoint_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        table_name = (env.get("TABLE_NAME") or "").strip()
        if not table_name:
            raise ConfigError("TABLE_NAME environment variable is required")
        return cls(
            table_name=table_name,
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            metrics_namespace=env.get("METRICS_NAMESPACE") or DEFAULT_METRICS_NAMESPACE,
            endpoint_url=env.get("AWS_ENDPOINT_URL_DYNAMODB") or None,
        )


@functools.lru_cache(maxsize=None)
def current_settings() -> Settings:
    """Settings for this execution context, read once at first use."""
    return Settings.from_env()
