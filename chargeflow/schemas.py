"""Typed snapshots of remote resources and request payloads.

Unknown response fields are kept (`extra="allow"`) so newer API versions do not
break parsing.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class APIObject(BaseModel):
    """Fields shared by every resource returned by the API."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    object: str | None = None
    id: str
    livemode: bool | None = None
    location: str | None = None
    created_at: str | None = None


T = TypeVar("T", bound=APIObject)


class APIList(BaseModel, Generic[T]):
    """One page of a list endpoint. `total` is not guaranteed to be present."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    object: str = "list"
    data: list[T] = Field(default_factory=list)
    limit: int | None = None
    offset: int | None = None
    total: int | None = None
    order: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    location: str | None = None


class Card(APIObject):
    brand: str | None = None
    last_digits: str | None = None
    name: str | None = None
    expiration_month: int | None = None
    expiration_year: int | None = None
    fingerprint: str | None = None
    country: str | None = None
    bank: str | None = None
    deleted: bool | None = None


class Customer(APIObject):
    email: str | None = None
    description: str | None = None
    default_card: str | None = None
    cards: APIList[Card] = Field(default_factory=APIList[Card])
    metadata: dict[str, Any] = Field(default_factory=dict)
    deleted: bool | None = None

    def card_list(self) -> list[Card]:
        """Cards embedded in this snapshot, in the order the API returned them."""

        return list(self.cards.data)


class Charge(APIObject):
    amount: int | None = None
    currency: str | None = None
    description: str | None = None
    status: str | None = None
    capture: bool | None = None
    authorized: bool | None = None
    reversed: bool | None = None
    paid: bool | None = None
    expired: bool | None = None
    disputable: bool | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    card: Card | None = None
    customer: str | None = None
    return_uri: str | None = None
    authorize_uri: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class Schedule(APIObject):
    status: str | None = None
    # `None` means the API did not report the flag; treated as inactive.
    active: bool | None = None
    every: int | None = None
    period: str | None = None
    on: dict[str, Any] | None = None
    in_words: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    charge: dict[str, Any] | None = None
    next_occurrences_on: list[str] = Field(default_factory=list)
    deleted: bool | None = None


class Occurrence(APIObject):
    schedule: str | None = None
    schedule_date: str | None = None
    retry_date: str | None = None
    processed_at: str | None = None
    status: str | None = None
    message: str | None = None
    result: str | None = None


class DestroyResponse(BaseModel):
    """Confirmation returned by DELETE endpoints."""

    model_config = ConfigDict(extra="allow")

    object: str | None = None
    id: str | None = None
    livemode: bool | None = None
    deleted: bool = False


class RequestPayload(BaseModel):
    """Base for request bodies; unset fields are never sent."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ChargeRequest(RequestPayload):
    amount: int | None = Field(default=None, gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    customer: str | None = None
    card: str | None = None
    source: str | None = None
    capture: bool | None = None
    description: str | None = None
    return_uri: str | None = None
    metadata: dict[str, Any] | None = None


class CustomerRequest(RequestPayload):
    email: str | None = None
    description: str | None = None
    # Token of a card to attach to the customer.
    card: str | None = None
    # Id of an attached card to make the default.
    default_card: str | None = None
    metadata: dict[str, Any] | None = None


class CardRequest(RequestPayload):
    name: str | None = None
    expiration_month: int | None = Field(default=None, ge=1, le=12)
    expiration_year: int | None = None
    city: str | None = None
    postal_code: str | None = None


class ScheduleRequest(RequestPayload):
    every: int | None = Field(default=None, gt=0)
    period: Literal["day", "week", "month"] | None = None
    on: dict[str, Any] | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    charge: dict[str, Any] | None = None
    transfer: dict[str, Any] | None = None


ChargeList = APIList[Charge]
CustomerList = APIList[Customer]
CardList = APIList[Card]
ScheduleList = APIList[Schedule]
OccurrenceList = APIList[Occurrence]
