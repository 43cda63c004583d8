"""Each accessor method is exactly one request with a fixed verb and path."""

import asyncio
import json

import pytest

from chargeflow.schemas import ChargeRequest, CustomerRequest, ScheduleRequest


CASES = [
    (lambda c: c.charges.retrieve("chrg_1"), "GET", "/charges/chrg_1"),
    (lambda c: c.charges.create(ChargeRequest(amount=10000, currency="thb", customer="cust_1")), "POST", "/charges"),
    (lambda c: c.charges.update("chrg_1", {"description": "x"}), "PATCH", "/charges/chrg_1"),
    (lambda c: c.charges.reverse("chrg_1"), "POST", "/charges/chrg_1/reverse"),
    (lambda c: c.charges.capture("chrg_1"), "POST", "/charges/chrg_1/capture"),
    (lambda c: c.charges.expire("chrg_1"), "POST", "/charges/chrg_1/expire"),
    (lambda c: c.charges.dispute("chrg_1"), "POST", "/charges/chrg_1/dispute"),
    (lambda c: c.charges.list(), "GET", "/charges"),
    (lambda c: c.customers.retrieve("cust_1"), "GET", "/customers/cust_1"),
    (lambda c: c.customers.create(CustomerRequest(email="a@example.com")), "POST", "/customers"),
    (lambda c: c.customers.update("cust_1", CustomerRequest(description="vip")), "PATCH", "/customers/cust_1"),
    (lambda c: c.customers.destroy("cust_1"), "DELETE", "/customers/cust_1"),
    (lambda c: c.customers.list(), "GET", "/customers"),
    (lambda c: c.customers.destroy_card("cust_1", "card_1"), "DELETE", "/customers/cust_1/cards/card_1"),
    (lambda c: c.customers.update_default_card("cust_1", "card_2"), "PATCH", "/customers/cust_1"),
    (lambda c: c.customers.list_schedules("cust_1"), "GET", "/customers/cust_1/schedules"),
    (lambda c: c.cards.retrieve("cust_1", "card_1"), "GET", "/customers/cust_1/cards/card_1"),
    (lambda c: c.cards.update("cust_1", "card_1", {"name": "J DOE"}), "PATCH", "/customers/cust_1/cards/card_1"),
    (lambda c: c.cards.destroy("cust_1", "card_1"), "DELETE", "/customers/cust_1/cards/card_1"),
    (lambda c: c.cards.list("cust_1"), "GET", "/customers/cust_1/cards"),
    (lambda c: c.schedules.retrieve("schd_1"), "GET", "/schedules/schd_1"),
    (lambda c: c.schedules.create(ScheduleRequest(every=1, period="month")), "POST", "/schedules"),
    (lambda c: c.schedules.destroy("schd_1"), "DELETE", "/schedules/schd_1"),
    (lambda c: c.schedules.list(), "GET", "/schedules"),
    (lambda c: c.schedules.list_occurrences("schd_1"), "GET", "/schedules/schd_1/occurrences"),
]


@pytest.mark.parametrize("call, method, path", CASES)
def test_accessor_issues_one_request(client, recorder, call, method, path):
    asyncio.run(call(client))

    assert len(recorder.requests) == 1
    assert recorder.requests[0].method == method
    assert recorder.requests[0].url.path == path


def test_update_default_card_sends_only_the_default_card_field(client, recorder):
    asyncio.run(client.customers.update_default_card("cust_1", "card_2"))

    assert json.loads(recorder.requests[0].content) == {"default_card": "card_2"}


def test_list_schedules_passes_pagination_params_through(client, recorder):
    asyncio.run(client.customers.list_schedules("cust_1", {"order": "reverse_chronological", "limit": 50}))

    params = recorder.requests[0].url.params
    assert params["order"] == "reverse_chronological"
    assert params["limit"] == "50"


def test_schedule_destroy_returns_confirmation(client, recorder):
    recorder.body = {"object": "schedule", "id": "schd_1", "livemode": False, "deleted": True}

    response = asyncio.run(client.schedules.destroy("schd_1"))

    assert response.deleted is True
    assert response.id == "schd_1"


def test_request_models_omit_unset_fields(client, recorder):
    asyncio.run(client.charges.create(ChargeRequest(amount=10000, currency="thb", customer="cust_1")))

    assert json.loads(recorder.requests[0].content) == {"amount": 10000, "currency": "thb", "customer": "cust_1"}
