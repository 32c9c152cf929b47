"""
Observability helpers for the Blog API.

Usage
-----
>>> from blog_api.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger(__name__)
"""

from blog_api.monitoring.logging import (
    bind_request_id,
    bind_user_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "bind_user_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
]
