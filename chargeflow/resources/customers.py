"""Customers accessor, including the customer-scoped card and schedule calls."""

from typing import TYPE_CHECKING, Any, Mapping

from chargeflow.constants import CARDS_RESOURCE, CUSTOMERS_RESOURCE, SCHEDULES_RESOURCE, PaginationParams
from chargeflow.schemas import Card, Customer, CustomerList, CustomerRequest, ScheduleList

if TYPE_CHECKING:
    from chargeflow.client import Client


class Customers:
    def __init__(self, client: "Client") -> None:
        self.client = client

    async def retrieve(self, customer_id: str) -> Customer:
        """Retrieve a customer."""

        return await self.client.request("get", f"{CUSTOMERS_RESOURCE}/{customer_id}", Customer)

    async def create(self, customer: CustomerRequest | Mapping[str, Any]) -> Customer:
        """Create a customer."""

        return await self.client.request("post", CUSTOMERS_RESOURCE, Customer, data=customer)

    async def update(self, customer_id: str, customer: CustomerRequest | Mapping[str, Any]) -> Customer:
        """Update the given attributes of a customer.

        Passing `card` attaches the tokenized card; passing `default_card`
        switches the default to an already attached card.
        """

        return await self.client.request(
            "patch",
            f"{CUSTOMERS_RESOURCE}/{customer_id}",
            Customer,
            data=customer,
        )

    async def destroy(self, customer_id: str) -> Customer:
        """Delete a customer."""

        return await self.client.request("delete", f"{CUSTOMERS_RESOURCE}/{customer_id}", Customer)

    async def list(self, params: PaginationParams | None = None) -> CustomerList:
        """List customers."""

        return await self.client.request("get", CUSTOMERS_RESOURCE, CustomerList, params=params)

    async def destroy_card(self, customer_id: str, card_id: str) -> Card:
        """Delete a card belonging to the customer."""

        return await self.client.request(
            "delete",
            f"{CUSTOMERS_RESOURCE}/{customer_id}/{CARDS_RESOURCE}/{card_id}",
            Card,
        )

    async def update_default_card(self, customer_id: str, card_id: str) -> Customer:
        """Make an attached card the customer's default."""

        return await self.update(customer_id, CustomerRequest(default_card=card_id))

    async def list_schedules(self, customer_id: str, params: PaginationParams | None = None) -> ScheduleList:
        """List one page of the customer's schedules."""

        return await self.client.request(
            "get",
            f"{CUSTOMERS_RESOURCE}/{customer_id}/{SCHEDULES_RESOURCE}",
            ScheduleList,
            params=params,
        )
