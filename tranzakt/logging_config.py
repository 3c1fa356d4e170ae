"""
logging_config.py
------------------

Shared logging utilities for the Tranzakt SDK.  Everything goes through
Python's built-in ``logging`` module under the ``tranzakt`` logger name,
so applications embedding the SDK can route or silence it with their
usual handler configuration.  Messages are serialised as JSON to make
them easier to parse downstream.

Being a library, the SDK does not configure the root logger on import;
a ``NullHandler`` is attached instead.  Applications that want the SDK
output on stdout can call :func:`configure_logging`.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

logger = logging.getLogger("tranzakt")
logger.addHandler(logging.NullHandler())

# Header names (lower-case) that must never reach the logs.
SENSITIVE_HEADERS = {"authorization", "x-api-key"}


def configure_logging(level: int = logging.INFO) -> None:
    """Send ``tranzakt`` log records to stdout.

    The format matches the one used across our services: timestamp,
    level and the raw (JSON) message.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys containing 'token', 'password', 'secret' or
    'key' removed.  Lists and tuples are processed element-wise and
    byte strings are replaced by a size marker.  Anything that is not
    JSON serialisable is turned into its ``str`` form.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in ("token", "password", "secret", "key")):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump(mode="json"))
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of ``headers`` without credentials."""
    return {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     json_body: Any = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Called by the request processor once before the request is sent and
    once after a response arrives.  Credentials are removed from the
    headers and only high-level information (method, URL, status and
    duration) is recorded.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    json_body : Any, optional
        JSON payload for non-GET requests.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = redact_headers(headers)
    if json_body is not None:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
