"""Prometheus metric definitions for API calls and orchestrations."""

from prometheus_client import Counter, Histogram


api_requests_total = Counter(
    "chargeflow_api_requests_total",
    "Total requests sent to the payments API",
    ["service", "resource", "method", "status_code"],
)
api_request_duration_seconds = Histogram(
    "chargeflow_api_request_duration_seconds",
    "Payments API request duration seconds",
    ["service", "resource", "method"],
)
orchestration_runs_total = Counter(
    "chargeflow_orchestration_runs_total",
    "Completed multi-step operations by outcome",
    ["service", "operation", "outcome"],
)
schedule_deletions_total = Counter(
    "chargeflow_schedule_deletions_total",
    "Individual schedule deletions issued by destroy-all",
    ["service", "result"],
)
