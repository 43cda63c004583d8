"""Log context injection and config redaction."""

import logging

from chargeflow.common.logging import ContextFilter, customer_id_ctx, operation_ctx, request_id_ctx
from chargeflow.common.startup import log_client_config


def make_record() -> logging.LogRecord:
    return logging.LogRecord("chargeflow", logging.INFO, __file__, 1, "msg", None, None)


def test_context_filter_copies_context_vars_onto_records():
    tokens = [
        request_id_ctx.set("req-1"),
        customer_id_ctx.set("cust_1"),
        operation_ctx.set("destroy_schedules"),
    ]
    try:
        record = make_record()
        assert ContextFilter(service_name="billing").filter(record) is True
    finally:
        operation_ctx.reset(tokens[2])
        customer_id_ctx.reset(tokens[1])
        request_id_ctx.reset(tokens[0])

    assert record.service_name == "billing"
    assert record.request_id == "req-1"
    assert record.customer_id == "cust_1"
    assert record.operation == "destroy_schedules"


def test_context_filter_defaults_to_empty_fields():
    record = make_record()
    ContextFilter(service_name="billing").filter(record)

    assert record.request_id == ""
    assert record.customer_id == ""


def test_client_config_redacts_secret_names(monkeypatch):
    monkeypatch.setenv("CHARGEFLOW_SECRET_KEY", "skey_live_abc")
    monkeypatch.setenv("CHARGEFLOW_API_BASE_URL", "https://api.example.test")
    monkeypatch.delenv("CHARGEFLOW_API_VERSION", raising=False)

    config = log_client_config("billing")

    assert config["CHARGEFLOW_SECRET_KEY"] == "<redacted>"
    assert config["CHARGEFLOW_API_BASE_URL"] == "https://api.example.test"
    assert config["CHARGEFLOW_API_VERSION"] == "<unset>"
