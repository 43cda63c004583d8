"""Environment-driven settings for the API client.

Every `Client` reads this once at construction. Behavior is controlled by
`CHARGEFLOW_*` environment variables or a local `.env` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chargeflow.version import __version__


class ClientSettings(BaseSettings):
    """Typed view of client configuration from environment variables."""

    service_name: str = "chargeflow"
    log_level: str = "INFO"
    api_base_url: str = "https://api.omise.co"
    secret_key: str = ""
    api_version: str | None = None
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = f"chargeflow/{__version__}"
    # Upper bound accepted by the remote list endpoints is 100.
    schedule_page_limit: int = Field(default=50, ge=1, le=100)
    model_config = SettingsConfigDict(env_prefix="CHARGEFLOW_", env_file=".env", extra="ignore")


settings = ClientSettings()
