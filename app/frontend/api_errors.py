"""Helpers for turning API error responses into readable messages."""
from typing import Any


def error_detail(body: Any, fallback: str) -> str:
    """
    Extract a human readable message from a FastAPI error body.

    Validation errors carry a list of error dicts under ``detail``; other
    HTTP errors carry a plain string.
    """
    if not isinstance(body, dict):
        return fallback
    detail = body.get("detail", fallback)
    if isinstance(detail, list):
        if not detail:
            return fallback
        first = detail[0]
        message = first.get("msg", fallback) if isinstance(first, dict) else first
        return str(message).removeprefix("Value error, ")
    return str(detail)
