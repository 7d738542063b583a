from collections.abc import MutableMapping
from datetime import datetime
from typing import Any

from bs4 import BeautifulSoup
from bs4.exceptions import ParserRejectedMarkup
from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


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


def strip_html(html: str) -> str:
    """
    Convert an HTML fragment to plain text.

    WordPress renders excerpts as HTML (``<p>...</p>`` plus entities such as
    ``&hellip;``); BeautifulSoup drops the tags and decodes the entities.
    """
    if not html:
        return ""

    try:
        return BeautifulSoup(html, "html.parser").get_text().strip()
    except ParserRejectedMarkup:
        return html.strip()
