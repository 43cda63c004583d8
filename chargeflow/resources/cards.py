"""Cards accessor. Cards only exist under a customer, so every call takes both ids."""

from typing import TYPE_CHECKING, Any, Mapping

from chargeflow.constants import CARDS_RESOURCE, CUSTOMERS_RESOURCE, PaginationParams
from chargeflow.schemas import Card, CardList, CardRequest

if TYPE_CHECKING:
    from chargeflow.client import Client


def _cards_path(customer_id: str) -> str:
    return f"{CUSTOMERS_RESOURCE}/{customer_id}/{CARDS_RESOURCE}"


class Cards:
    def __init__(self, client: "Client") -> None:
        self.client = client

    async def retrieve(self, customer_id: str, card_id: str) -> Card:
        return await self.client.request("get", f"{_cards_path(customer_id)}/{card_id}", Card)

    async def update(self, customer_id: str, card_id: str, card: CardRequest | Mapping[str, Any]) -> Card:
        """Update holder name, expiry or billing address of a card."""

        return await self.client.request("patch", f"{_cards_path(customer_id)}/{card_id}", Card, data=card)

    async def destroy(self, customer_id: str, card_id: str) -> Card:
        return await self.client.request("delete", f"{_cards_path(customer_id)}/{card_id}", Card)

    async def list(self, customer_id: str, params: PaginationParams | None = None) -> CardList:
        return await self.client.request("get", _cards_path(customer_id), CardList, params=params)
