"""Structured JSON logging with request/customer context fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from chargeflow.common.config import settings


request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")
customer_id_ctx: ContextVar[str] = ContextVar("customer_id", default="")
operation_ctx: ContextVar[str] = ContextVar("operation", default="")


class ContextFilter(logging.Filter):
    """Inject service and correlation identifiers into every log record."""

    def __init__(self, service_name: str | None = None) -> None:
        super().__init__()
        self.service_name = service_name or settings.service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name
        record.request_id = request_id_ctx.get()
        record.customer_id = customer_id_ctx.get()
        record.operation = operation_ctx.get()
        return True


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger for JSON output.

    The library never calls this itself; applications opt in once per process.
    """

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(service_name)s %(request_id)s %(customer_id)s %(operation)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level or settings.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("chargeflow")
