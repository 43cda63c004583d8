"""Helpers for safe config logging when a client is built."""

import os

from chargeflow.common.logging import logger


CLIENT_ENV_KEYS = [
    "CHARGEFLOW_API_BASE_URL",
    "CHARGEFLOW_SECRET_KEY",
    "CHARGEFLOW_API_VERSION",
    "CHARGEFLOW_TIMEOUT_SECONDS",
    "CHARGEFLOW_SCHEDULE_PAGE_LIMIT",
]


def _safe_env(name: str) -> str:
    """Return env value with simple redaction for secret-like variable names."""

    value = os.getenv(name)
    if value is None:
        return "<unset>"
    if any(secret in name for secret in ["KEY", "SECRET", "PASSWORD", "TOKEN"]):
        return "<redacted>"
    return value


def log_client_config(service_name: str, keys: list[str] | None = None) -> dict[str, str]:
    """Log selected config keys at debug level for quick troubleshooting."""

    config = {"service": service_name}
    for key in keys if keys is not None else CLIENT_ENV_KEYS:
        config[key] = _safe_env(key)
    logger.debug("client_config=%s", config)
    return config
