"""Utility for logging API requests when SNCF_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via SNCF_LOG_REQUESTS environment variable."""
    return os.getenv("SNCF_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: list[tuple[str, str]] | None) -> str:
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in params)
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact credentials from headers before they reach the log."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: list[tuple[str, str]] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if SNCF_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        params: Query parameters, in order (repeated keys allowed).
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_sensitive_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, payload: Any = None) -> None:
    """Log the status and a truncated body of an API response if enabled."""
    if not should_log_requests():
        return

    body = ""
    if payload is not None:
        try:
            body = json.dumps(payload)[:500]
        except (TypeError, ValueError):
            body = str(payload)[:500]
    logger.info(f"API Response {status} for {url}: {body}")
