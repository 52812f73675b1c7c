"""Async HTTP client for the remote financial-data REST API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from findata.config.schema import DEFAULT_BASE_URL, DEMO_API_KEY
from findata.core.errors import RemoteRequestError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from findata.config.schema import ApiConfig

logger = logging.getLogger(__name__)


def _query_value(value: Any) -> str:
    """Render a query parameter the way the API expects (``5.0`` -> ``"5"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query(query: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop falsy entries and stringify the rest.

    ``None``, ``""`` and ``0`` are all omitted: an unset filter is never
    sent as an empty parameter.
    """
    if not query:
        return {}
    return {key: _query_value(value) for key, value in query.items() if value}


class RemoteDataClient:
    """GET-only client for the financial-data API.

    Every call is a fresh round trip: no caching, no retries.

    Usage::

        async with RemoteDataClient(config.api) as client:
            companies = await client.fetch("/api/v1/companies")
    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (config.base_url or DEFAULT_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "X-API-Key": config.api_key or DEMO_API_KEY,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> RemoteDataClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, path: str, query: Mapping[str, Any] | None = None) -> Any:
        """GET *path* and return the decoded JSON body.

        Raises:
            RemoteRequestError: On a non-2xx status, a transport failure,
                or a body that is not valid JSON.
        """
        request = self._client.build_request("GET", path, params=encode_query(query))
        url = str(request.url)
        logger.debug("GET %s", url)

        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise RemoteRequestError(url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            message = f"API request failed: {response.status_code} {response.reason_phrase}"
            logger.warning("%s (%s)", message, url)
            raise RemoteRequestError(url, message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Invalid JSON from %s: %s", url, exc)
            raise RemoteRequestError(url, f"Invalid JSON response: {exc}") from exc
