from collections.abc import MutableMapping
from datetime import UTC, datetime
from math import ceil
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

from blog_api.configs.settings import WORDS_PER_MINUTE


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def utcnow() -> datetime:
    """Return the current timezone-aware UTC time."""
    return datetime.now(tz=UTC)


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def calculate_word_count(text: str) -> int:
    """
    Count whitespace-separated words in text.

    Args:
        text: Text to count words in

    Returns:
        int: Number of words
    """
    return len(text.split())


def calculate_reading_time(text: str) -> int:
    """
    Estimate reading time in whole minutes at a fixed reading speed.

    Args:
        text: Post body

    Returns:
        int: Reading time in minutes, never less than 1
    """
    return max(1, ceil(calculate_word_count(text) / WORDS_PER_MINUTE))


def format_reading_time(minutes: int) -> str:
    """Render reading time the way clients display it, e.g. ``3 min read``."""
    return f"{minutes} min read"
