"""Exhaustive offset/limit walking."""

import asyncio

import pytest

from chargeflow.common.errors import TransportError
from chargeflow.pagination import collect_all
from chargeflow.schemas import APIList, Schedule


class Pages:
    def __init__(self, count: int, total: bool = False, server_limit: int | None = None) -> None:
        self.items = [Schedule(id=f"schd_{i}") for i in range(count)]
        self.report_total = total
        self.server_limit = server_limit
        self.queries: list[dict] = []

    async def __call__(self, params: dict) -> APIList[Schedule]:
        self.queries.append(params)
        limit = min(params["limit"], self.server_limit or params["limit"])
        offset = params["offset"]
        return APIList[Schedule](
            data=self.items[offset : offset + limit],
            limit=limit,
            offset=offset,
            total=len(self.items) if self.report_total else None,
        )


def test_walks_until_a_short_page():
    pages = Pages(120)

    items = asyncio.run(collect_all(pages, {"order": "reverse_chronological"}, page_limit=50))

    assert [item.id for item in items] == [f"schd_{i}" for i in range(120)]
    assert [query["offset"] for query in pages.queries] == [0, 50, 100]
    assert all(query["order"] == "reverse_chronological" for query in pages.queries)
    assert all(query["limit"] == 50 for query in pages.queries)


def test_exact_multiple_without_total_needs_one_empty_page():
    pages = Pages(100)

    items = asyncio.run(collect_all(pages, page_limit=50))

    assert len(items) == 100
    assert [query["offset"] for query in pages.queries] == [0, 50, 100]


def test_total_stops_the_walk_without_an_extra_request():
    pages = Pages(100, total=True)

    items = asyncio.run(collect_all(pages, page_limit=50))

    assert len(items) == 100
    assert len(pages.queries) == 2


def test_server_capped_limit_does_not_end_the_walk_early():
    """A page shorter than the requested limit but equal to the server's limit is not the last."""

    pages = Pages(45, server_limit=20)

    items = asyncio.run(collect_all(pages, page_limit=50))

    assert len(items) == 45
    assert [query["offset"] for query in pages.queries] == [0, 20, 40]


def test_starting_offset_is_honoured():
    pages = Pages(10)

    items = asyncio.run(collect_all(pages, {"offset": 4}, page_limit=50))

    assert [item.id for item in items] == [f"schd_{i}" for i in range(4, 10)]


def test_page_failure_propagates():
    async def failing(params):
        raise TransportError("GET", "schedules", "timed out")

    with pytest.raises(TransportError):
        asyncio.run(collect_all(failing, page_limit=50))


def test_page_limit_must_be_positive():
    with pytest.raises(ValueError):
        asyncio.run(collect_all(Pages(1), page_limit=0))
