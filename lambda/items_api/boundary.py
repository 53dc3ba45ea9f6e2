"""The outermost scope of every handler invocation."""
import logging
import time
from typing import Any, Callable, Dict, Optional

from items_api.errors import ItemsApiError
from items_api.observability import emit_metric
from items_api.responses import internal_error, message

logger = logging.getLogger(__name__)


def invoke(op: str, work: Callable[[Dict[str, Any]], Dict[str, Any]],
           metrics_namespace: Optional[str] = None) -> Dict[str, Any]:
    """Run one request, mapping every failure to a JSON response.

    ``work`` receives a dict of log fields and records the item id there as
    soon as it knows it. ItemsApiError subclasses become their own status
    and message. Anything else is logged with its traceback and returned as
    a generic 500.
    """
    start = time.time()
    fields: Dict[str, Any] = {"id": None}
    try:
        resp = work(fields)
    except ItemsApiError as e:
        resp = message(e.status_code, e.message)
    except Exception:
        logger.exception("%s failed id=%s", op, fields["id"])
        resp = internal_error()
    logger.info("%s id=%s -> %s", op, fields["id"], resp["statusCode"])
    emit_metric(op, resp["statusCode"], start, metrics_namespace)
    return resp
