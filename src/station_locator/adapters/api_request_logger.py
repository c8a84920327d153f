"""Debug logging of outbound API exchanges, enabled by STATION_LOCATOR_LOG_REQUESTS."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "STATION_LOCATOR_LOG_REQUESTS"
REDACTED = "***REDACTED***"
CREDENTIAL_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
MAX_LOGGED_BODY_CHARS = 2000


def should_log_requests() -> bool:
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _truncate(text: str) -> str:
    if len(text) <= MAX_LOGGED_BODY_CHARS:
        return text
    return f"{text[:MAX_LOGGED_BODY_CHARS]}... ({len(text)} chars)"


def describe_headers(headers: dict[str, str]) -> str:
    """Render headers one per line with credential values replaced."""
    return "\n".join(
        f"  {name}: {REDACTED if name.lower() in CREDENTIAL_HEADERS else value}"
        for name, value in sorted(headers.items())
    )


def describe_body(body: Any) -> str:
    """Render a request or response body for the log.

    Bytes are decoded as UTF-8, JSON-compatible values are pretty printed and
    anything longer than ``MAX_LOGGED_BODY_CHARS`` is cut.
    """
    if isinstance(body, bytes):
        text = body.decode("utf-8", errors="replace")
    else:
        try:
            text = json.dumps(body, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            text = str(body)
    return _truncate(text)


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an outbound request when request logging is enabled."""
    if not should_log_requests():
        return

    lines = [f"API Request: {method} {url}"]
    if headers:
        lines.append("Headers:")
        lines.append(describe_headers(headers))
    if payload is not None:
        lines.append(f"Body: {describe_body(payload)}")
    logger.info("\n".join(lines))


def log_api_response(url: str, status: int, body: bytes) -> None:
    """Log the status and body of a response when request logging is enabled."""
    if not should_log_requests():
        return

    logger.info(f"API Response: {status} from {url}\nBody: {describe_body(body)}")
