"""Schedules accessor."""

from typing import TYPE_CHECKING, Any, Mapping

from chargeflow.constants import OCCURRENCES_RESOURCE, SCHEDULES_RESOURCE, PaginationParams
from chargeflow.schemas import DestroyResponse, OccurrenceList, Schedule, ScheduleList, ScheduleRequest

if TYPE_CHECKING:
    from chargeflow.client import Client


class Schedules:
    def __init__(self, client: "Client") -> None:
        self.client = client

    async def retrieve(self, schedule_id: str) -> Schedule:
        """Retrieve a schedule."""

        return await self.client.request("get", f"{SCHEDULES_RESOURCE}/{schedule_id}", Schedule)

    async def create(self, schedule: ScheduleRequest | Mapping[str, Any]) -> Schedule:
        """Create a recurring charge or transfer schedule."""

        return await self.client.request("post", SCHEDULES_RESOURCE, Schedule, data=schedule)

    async def destroy(self, schedule_id: str) -> DestroyResponse:
        """Delete a schedule. The remote side marks it deleted and inactive."""

        return await self.client.request("delete", f"{SCHEDULES_RESOURCE}/{schedule_id}", DestroyResponse)

    async def list(self, params: PaginationParams | None = None) -> ScheduleList:
        """List all schedules of the account."""

        return await self.client.request("get", SCHEDULES_RESOURCE, ScheduleList, params=params)

    async def list_occurrences(self, schedule_id: str, params: PaginationParams | None = None) -> OccurrenceList:
        """List the occurrences (individual runs) of a schedule."""

        return await self.client.request(
            "get",
            f"{SCHEDULES_RESOURCE}/{schedule_id}/{OCCURRENCES_RESOURCE}",
            OccurrenceList,
            params=params,
        )
