"""Logging setup and CloudWatch embedded metrics."""
import json
import logging
import time
from typing import Optional

from items_api.config import DEFAULT_LOG_LEVEL, DEFAULT_METRICS_NAMESPACE


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    # The Lambda runtime installs its own handler on the root logger.
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(levelname)s %(name)s %(message)s")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def emit_metric(op: str, status: int, start_ts: float,
                namespace: Optional[str] = None) -> None:
    """Print one EMF record; CloudWatch Logs turns it into metrics."""
    duration_ms = int((time.time() - start_ts) * 1000)
    print(json.dumps({
        "_aws": {
            "Timestamp": int(time.time() * 1000),
            "CloudWatchMetrics": [{
                "Namespace": namespace or DEFAULT_METRICS_NAMESPACE,
                "Dimensions": [["Operation"]],
                "Metrics": [
                    {"Name": "Requests", "Unit": "Count"},
                    {"Name": "Errors", "Unit": "Count"},
                    {"Name": "LatencyMs", "Unit": "Milliseconds"},
                ],
            }],
        },
        "Operation": op,
        "StatusCode": status,
        "Requests": 1,
        "Errors": 1 if status >= 500 else 0,
        "LatencyMs": duration_ms,
    }))
