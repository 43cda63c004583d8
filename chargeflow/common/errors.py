"""Exception hierarchy raised by the client and orchestration layer."""

from typing import Any


class ChargeflowError(Exception):
    """Base class for every error raised by chargeflow."""


class TransportError(ChargeflowError):
    """The request never produced an HTTP response (connect/read/timeout)."""

    def __init__(self, method: str, path: str, message: str) -> None:
        super().__init__(f"{method} {path}: {message}")
        self.method = method
        self.path = path


class APIError(ChargeflowError):
    """Error reported by the payments API, built from its error envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        location: str | None = None,
    ) -> None:
        super().__init__(f"({status_code}/{code}) {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.location = location

    @classmethod
    def from_payload(cls, status_code: int, payload: Any, fallback: str = "") -> "APIError":
        if isinstance(payload, dict) and payload.get("object") == "error":
            return cls(
                status_code,
                str(payload.get("code") or "unknown"),
                str(payload.get("message") or fallback),
                payload.get("location"),
            )
        return cls(status_code, "unknown", fallback or f"HTTP {status_code}")


class OrchestrationError(ChargeflowError):
    """A multi-step operation could not derive the input for its next step."""


class ScheduleDestroyError(OrchestrationError):
    """One or more schedule deletions failed during destroy-all."""

    def __init__(self, result) -> None:
        failed = ", ".join(result.failed_ids)
        super().__init__(
            f"failed to destroy schedules for customer {result.customer_id}: {failed} "
            f"({len(result.deleted_ids)} deleted)"
        )
        self.result = result
