"""Flattening of paginated list endpoints into one script list."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from ..resources._common_types import DEFAULT_PER_PAGE, ListOptions, Page

T = TypeVar("T")

_logger = logging.getLogger(__name__)


def flatten_pages(
    fetch: Callable[[ListOptions], Page[T]],
    project: Callable[[T], Any],
    *,
    per_page: int = DEFAULT_PER_PAGE,
) -> list[Any]:
    """Fetch every page from ``fetch`` and return all projected items.

    Pages are requested in order starting at page 1 and items keep the order
    the API returned them in. Fetching stops only when the API reports the
    last page; any failure propagates and nothing collected so far is
    returned.

    Parameters
    ----------
    fetch
        Fetches one page for the given list options.
    project
        Converts one fetched item into its script value.
    per_page
        Page size requested from the API.

    Returns
    -------
    list
        Projected items of every page.
    """
    options = ListOptions(page=1, per_page=per_page)
    collected: list[Any] = []

    while True:
        page = fetch(options)
        for item in page.items:
            collected.append(project(item))
        _logger.debug("Fetched page %s with %s items", options.page, len(page.items))

        if page.links is not None and not page.links.is_last_page():
            options.page += 1
            continue
        break

    return collected


__all__ = ["flatten_pages"]
