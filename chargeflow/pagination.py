"""Offset/limit walking over list endpoints."""

from typing import Any, Awaitable, Callable, TypeVar

from chargeflow.constants import PaginationParams
from chargeflow.schemas import APIList, APIObject


ItemT = TypeVar("ItemT", bound=APIObject)


async def collect_all(
    fetch_page: Callable[[dict[str, Any]], Awaitable[APIList[ItemT]]],
    params: PaginationParams | None = None,
    *,
    page_limit: int,
) -> list[ItemT]:
    """Fetch every page of a list endpoint and return the items in server order.

    Stops on an empty page, when `total` (if reported) is reached, or on a page
    shorter than the effective limit. The server may cap `limit` below
    `page_limit`; the limit echoed back on the page wins.
    """

    if page_limit < 1:
        raise ValueError("page_limit must be positive")

    query = dict(params or {})
    query["limit"] = page_limit
    offset = int(query.pop("offset", None) or 0)
    items: list[ItemT] = []
    while True:
        page = await fetch_page({**query, "offset": offset})
        received = len(page.data)
        items.extend(page.data)
        if received == 0:
            break
        offset += received
        if page.total is not None and offset >= page.total:
            break
        if received < (page.limit or page_limit):
            break
    return items
