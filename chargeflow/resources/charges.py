"""Charges accessor: one method per `charges` endpoint."""

from typing import TYPE_CHECKING, Any, Mapping

from chargeflow.constants import CHARGES_RESOURCE, PaginationParams
from chargeflow.schemas import Charge, ChargeList, ChargeRequest

if TYPE_CHECKING:
    from chargeflow.client import Client


class Charges:
    def __init__(self, client: "Client") -> None:
        self.client = client

    async def retrieve(self, charge_id: str) -> Charge:
        """Retrieve a charge."""

        return await self.client.request("get", f"{CHARGES_RESOURCE}/{charge_id}", Charge)

    async def create(self, charge: ChargeRequest | Mapping[str, Any]) -> Charge:
        """Create a charge."""

        return await self.client.request("post", CHARGES_RESOURCE, Charge, data=charge)

    async def update(self, charge_id: str, charge: ChargeRequest | Mapping[str, Any]) -> Charge:
        """Update a charge (description and metadata only on the remote side)."""

        return await self.client.request("patch", f"{CHARGES_RESOURCE}/{charge_id}", Charge, data=charge)

    async def reverse(self, charge_id: str) -> Charge:
        """Reverse an uncaptured charge, releasing the held funds."""

        return await self.client.request("post", f"{CHARGES_RESOURCE}/{charge_id}/reverse", Charge)

    async def capture(self, charge_id: str) -> Charge:
        """Capture an authorized, uncaptured charge."""

        return await self.client.request("post", f"{CHARGES_RESOURCE}/{charge_id}/capture", Charge)

    async def expire(self, charge_id: str) -> Charge:
        """Expire a pending charge."""

        return await self.client.request("post", f"{CHARGES_RESOURCE}/{charge_id}/expire", Charge)

    async def dispute(self, charge_id: str) -> Charge:
        """Open a dispute on a charge."""

        return await self.client.request("post", f"{CHARGES_RESOURCE}/{charge_id}/dispute", Charge)

    async def list(self, params: PaginationParams | None = None) -> ChargeList:
        """List charges."""

        return await self.client.request("get", CHARGES_RESOURCE, ChargeList, params=params)
