"""Request gateway for the payments API.

Every resource accessor funnels through `Client.request`, which owns auth,
headers, JSON encoding, error mapping, request logging and metrics. Nothing is
retried or cached here: failures surface to the caller as `TransportError` or
`APIError`.
"""

import time
from typing import Any, Mapping, TypeVar
from uuid import uuid4

import httpx
from pydantic import BaseModel, ValidationError

from chargeflow.common.config import ClientSettings
from chargeflow.common.config import settings as default_settings
from chargeflow.common.errors import APIError, TransportError
from chargeflow.common.logging import logger, request_id_ctx
from chargeflow.common.metrics import api_request_duration_seconds, api_requests_total
from chargeflow.common.startup import log_client_config
from chargeflow.common.tracing import tracer
from chargeflow.orchestration import CustomerOrchestrator
from chargeflow.resources.cards import Cards
from chargeflow.resources.charges import Charges
from chargeflow.resources.customers import Customers
from chargeflow.resources.schedules import Schedules


ModelT = TypeVar("ModelT", bound=BaseModel)


def _encode_body(data: Mapping[str, Any] | BaseModel | None) -> dict[str, Any] | None:
    if data is None:
        return None
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True, by_alias=True)
    return dict(data)


class Client:
    """Async client holding one HTTP connection pool and the resource accessors."""

    def __init__(
        self,
        secret_key: str | None = None,
        *,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or default_settings
        key = secret_key or self.settings.secret_key
        if not key:
            raise ValueError("secret key is required (pass secret_key or set CHARGEFLOW_SECRET_KEY)")
        self._auth = httpx.BasicAuth(key, "")
        self._base_url = self.settings.api_base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(self.settings.timeout_seconds))

        self.charges = Charges(self)
        self.customers = Customers(self)
        self.cards = Cards(self)
        self.schedules = Schedules(self)
        self.customer_workflows = CustomerOrchestrator(
            self.customers,
            self.schedules,
            schedule_page_limit=self.settings.schedule_page_limit,
            service_name=self.settings.service_name,
        )
        log_client_config(self.settings.service_name)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP pool unless it was injected by the caller."""

        if self._owns_http:
            await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }
        if self.settings.api_version:
            headers["Omise-Version"] = self.settings.api_version
        return headers

    async def request(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        *,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | BaseModel | None = None,
    ) -> ModelT:
        """Send one request and parse the JSON body into `response_model`.

        `path` is relative to the API root (e.g. `customers/cust_1/schedules`).
        `params` is passed through as the query string with `None` values
        dropped; `data` is sent as a JSON body.
        """

        method = method.upper()
        path = path.strip("/")
        url = f"{self._base_url}/{path}"
        query = {key: value for key, value in (params or {}).items() if value is not None}
        body = _encode_body(data)
        resource = path.split("/", 1)[0]

        token = request_id_ctx.set(str(uuid4()))
        start = time.perf_counter()
        status_code = "error"
        try:
            with tracer.start_as_current_span("chargeflow.request") as span:
                span.set_attribute("http.method", method)
                span.set_attribute("chargeflow.path", path)
                try:
                    response = await self._http.request(
                        method,
                        url,
                        params=query or None,
                        json=body,
                        headers=self._headers(),
                        auth=self._auth,
                        timeout=self.settings.timeout_seconds,
                    )
                except httpx.TransportError as exc:
                    logger.warning("api_transport_error method=%s path=%s error=%r", method, path, exc)
                    raise TransportError(method, path, str(exc) or type(exc).__name__) from exc
                status_code = str(response.status_code)
                span.set_attribute("http.status_code", response.status_code)
                logger.info(
                    "api_request method=%s path=%s status=%s elapsed_ms=%d",
                    method,
                    path,
                    response.status_code,
                    (time.perf_counter() - start) * 1000,
                )
                return self._parse(method, path, response, response_model)
        finally:
            elapsed = max(0.0, time.perf_counter() - start)
            api_request_duration_seconds.labels(
                service=self.settings.service_name,
                resource=resource,
                method=method,
            ).observe(elapsed)
            api_requests_total.labels(
                service=self.settings.service_name,
                resource=resource,
                method=method,
                status_code=status_code,
            ).inc()
            request_id_ctx.reset(token)

    def _parse(self, method: str, path: str, response: httpx.Response, response_model: type[ModelT]) -> ModelT:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            error = APIError.from_payload(response.status_code, payload, response.text)
            logger.warning(
                "api_error method=%s path=%s status=%s code=%s message=%s",
                method,
                path,
                error.status_code,
                error.code,
                error.message,
            )
            raise error
        if payload is None:
            raise APIError(response.status_code, "invalid_response", "response body is not JSON")
        try:
            return response_model.model_validate(payload)
        except ValidationError as exc:
            raise APIError(response.status_code, "invalid_response", str(exc)) from exc
