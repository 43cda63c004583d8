"""Multi-step customer operations built on the resource accessors.

Each operation runs a fixed sequence of dependent calls. Nothing is rolled back
when a later step fails, so callers can observe partial effects:

- `add_card_as_default`: the card may be attached without becoming default.
- `destroy_schedules`: some schedules may be deleted while others are not; the
  returned `DestroySchedulesResult` says which.
"""

import asyncio
from enum import Enum
from typing import TYPE_CHECKING

from opentelemetry.trace import Span
from pydantic import BaseModel, ConfigDict, Field, computed_field

from chargeflow.common.errors import OrchestrationError, ScheduleDestroyError
from chargeflow.common.logging import customer_id_ctx, logger, operation_ctx
from chargeflow.common.metrics import orchestration_runs_total, schedule_deletions_total
from chargeflow.common.tracing import tracer
from chargeflow.constants import ORDER_REVERSE_CHRONOLOGICAL
from chargeflow.pagination import collect_all
from chargeflow.schemas import Card, Customer, CustomerRequest

if TYPE_CHECKING:
    from chargeflow.resources.customers import Customers
    from chargeflow.resources.schedules import Schedules


class OperationStatus(str, Enum):
    SUCCEEDED = "succeeded"
    PARTIALLY_SUCCEEDED = "partially_succeeded"
    FAILED = "failed"


class ScheduleDeletionFailure(BaseModel):
    """One schedule whose delete call raised."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    schedule_id: str
    error: Exception = Field(exclude=True)

    @computed_field
    @property
    def message(self) -> str:
        return str(self.error)


class DestroySchedulesResult(BaseModel):
    """Settled outcome of every deletion issued by `destroy_schedules`."""

    customer_id: str
    deleted_ids: list[str] = Field(default_factory=list)
    failures: list[ScheduleDeletionFailure] = Field(default_factory=list)

    @computed_field
    @property
    def deleted(self) -> bool:
        """True only when every active schedule was deleted (or none existed)."""

        return not self.failures

    @computed_field
    @property
    def status(self) -> OperationStatus:
        if not self.failures:
            return OperationStatus.SUCCEEDED
        if not self.deleted_ids:
            return OperationStatus.FAILED
        return OperationStatus.PARTIALLY_SUCCEEDED

    @property
    def failed_ids(self) -> list[str]:
        return [failure.schedule_id for failure in self.failures]

    def raise_for_failures(self) -> None:
        """Raise `ScheduleDestroyError` (chained to the first failure) if any deletion failed."""

        if self.failures:
            raise ScheduleDestroyError(self) from self.failures[0].error


def select_new_card(known_card_ids: set[str], cards: list[Card]) -> Card:
    """Pick the card that an add-card update attached.

    The card present after the update but not before is the new one. If that
    difference is not exactly one card (e.g. the token referred to a card that
    was already attached), fall back to the last card, relying on the API
    appending new cards at the end of the list.
    """

    if not cards:
        raise OrchestrationError("customer has no cards after adding one")
    added = [card for card in cards if card.id not in known_card_ids]
    if len(added) == 1:
        return added[0]
    logger.warning(
        "new card not identifiable by difference added=%s; using last card card_id=%s",
        len(added),
        cards[-1].id,
    )
    return cards[-1]


class CustomerOrchestrator:
    """Customer operations that span several requests.

    Takes exactly the accessors it calls, so it can be exercised with fakes.
    """

    def __init__(
        self,
        customers: "Customers",
        schedules: "Schedules",
        *,
        schedule_page_limit: int = 50,
        service_name: str = "chargeflow",
    ) -> None:
        self.customers = customers
        self.schedules = schedules
        self.schedule_page_limit = schedule_page_limit
        self.service_name = service_name

    def _record_run(self, operation: str, outcome: str) -> None:
        orchestration_runs_total.labels(service=self.service_name, operation=operation, outcome=outcome).inc()

    async def add_card_as_default(self, customer_id: str, card_token: str) -> Customer:
        """Attach a tokenized card to the customer and make it the default.

        Returns the customer as reported by the final update. If making the
        card default fails, the card stays attached and the error propagates.
        """

        if not customer_id:
            raise ValueError("customer_id must be non-empty")
        if not card_token:
            raise ValueError("card_token must be non-empty")

        customer_token = customer_id_ctx.set(customer_id)
        operation_token = operation_ctx.set("add_card_as_default")
        try:
            with tracer.start_as_current_span("chargeflow.add_card_as_default") as span:
                span.set_attribute("chargeflow.customer_id", customer_id)
                try:
                    customer = await self._add_card_as_default(customer_id, card_token, span)
                except Exception:
                    self._record_run("add_card_as_default", OperationStatus.FAILED.value)
                    raise
                self._record_run("add_card_as_default", OperationStatus.SUCCEEDED.value)
                return customer
        finally:
            operation_ctx.reset(operation_token)
            customer_id_ctx.reset(customer_token)

    async def _add_card_as_default(self, customer_id: str, card_token: str, span: Span) -> Customer:
        before = await self.customers.retrieve(customer_id)
        known_card_ids = {card.id for card in before.card_list()}

        updated = await self.customers.update(customer_id, CustomerRequest(card=card_token))
        new_card = select_new_card(known_card_ids, updated.card_list())
        span.set_attribute("chargeflow.card_id", new_card.id)
        logger.info("card attached customer_id=%s card_id=%s", customer_id, new_card.id)

        customer = await self.customers.update_default_card(customer_id, new_card.id)
        logger.info("default card set customer_id=%s card_id=%s", customer_id, new_card.id)
        return customer

    async def destroy_schedules(self, customer_id: str) -> DestroySchedulesResult:
        """Delete every active schedule of the customer.

        All pages are listed before any deletion starts; deletions then run
        concurrently and every one of them is settled. A listing failure
        propagates and nothing is deleted. Inactive schedules are never touched.
        """

        if not customer_id:
            raise ValueError("customer_id must be non-empty")

        customer_token = customer_id_ctx.set(customer_id)
        operation_token = operation_ctx.set("destroy_schedules")
        try:
            with tracer.start_as_current_span("chargeflow.destroy_schedules") as span:
                span.set_attribute("chargeflow.customer_id", customer_id)
                try:
                    result = await self._destroy_schedules(customer_id)
                except Exception:
                    self._record_run("destroy_schedules", OperationStatus.FAILED.value)
                    raise
                span.set_attribute("chargeflow.deleted_count", len(result.deleted_ids))
                span.set_attribute("chargeflow.failed_count", len(result.failures))
                self._record_run("destroy_schedules", result.status.value)
                return result
        finally:
            operation_ctx.reset(operation_token)
            customer_id_ctx.reset(customer_token)

    async def _destroy_schedules(self, customer_id: str) -> DestroySchedulesResult:
        schedules = await collect_all(
            lambda params: self.customers.list_schedules(customer_id, params),
            {"order": ORDER_REVERSE_CHRONOLOGICAL},
            page_limit=self.schedule_page_limit,
        )
        # Pages can overlap if schedules are created while listing.
        active_ids = list(dict.fromkeys(s.id for s in schedules if s.active is True))
        logger.info(
            "destroying schedules customer_id=%s listed=%s active=%s",
            customer_id,
            len(schedules),
            len(active_ids),
        )

        outcomes = await asyncio.gather(
            *(self.schedules.destroy(schedule_id) for schedule_id in active_ids),
            return_exceptions=True,
        )

        result = DestroySchedulesResult(customer_id=customer_id)
        for schedule_id, outcome in zip(active_ids, outcomes):
            if isinstance(outcome, Exception):
                logger.warning(
                    "schedule delete failed customer_id=%s schedule_id=%s error=%s",
                    customer_id,
                    schedule_id,
                    outcome,
                )
                result.failures.append(ScheduleDeletionFailure(schedule_id=schedule_id, error=outcome))
                schedule_deletions_total.labels(service=self.service_name, result="failed").inc()
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.deleted_ids.append(schedule_id)
                schedule_deletions_total.labels(service=self.service_name, result="deleted").inc()
        return result
