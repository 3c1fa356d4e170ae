"""
utils/pagination.py
--------------------

Helper for walking paginated API responses.

List endpoints return a page envelope (``items``, ``page``,
``hasNextPage``...).  ``paginate`` abstracts the control flow and
enforces limits from the settings to avoid infinite loops or API
misuse.  It yields items page after page and stops when one of the
following conditions is met:

* A page returns an empty list of items.
* The next token is missing from the response.
* The next token is identical to the current one.
* The configured maximum number of pages or items is reached.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable, List, Optional, Tuple

from tranzakt.core.config import Settings, get_settings


def next_page_token(page: dict) -> Tuple[List[Any], Optional[int]]:
    """Extract ``(items, next_page)`` from a standard page envelope."""
    items = page.get("items") or []
    if not page.get("hasNextPage"):
        return items, None
    current = page.get("page")
    return items, (current + 1) if isinstance(current, int) else None


async def paginate(
    fetch_page: Callable[[Any], Awaitable[dict]],
    extract: Callable[[dict], Tuple[List[Any], Optional[Any]]] = next_page_token,
    initial_token: Any = 1,
    settings: Optional[Settings] = None,
) -> AsyncIterator[Any]:
    """Iterate through pages of an API until termination criteria are met.

    :param fetch_page: coroutine function accepting a page token and
        returning the raw JSON page
    :param extract: function taking the raw JSON and returning a tuple of
        (items, next_token); ``None`` signals that no further pages exist
    :param initial_token: starting token (defaults to page number ``1``)
    :param settings: source of the ``max_pages``/``max_items`` guards
    """
    settings = settings or get_settings()
    token = initial_token
    page_count = 0
    item_count = 0

    while True:
        page_count += 1
        if page_count > settings.max_pages:
            return
        response_json = await fetch_page(token)
        page_items, next_token = extract(response_json)
        if not page_items:
            return
        for item in page_items:
            yield item
            item_count += 1
            if item_count >= settings.max_items:
                return
        if next_token is None or next_token == token:
            return
        token = next_token
