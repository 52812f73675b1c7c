"""Shared test fixtures for findata."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from findata.config.schema import ApiConfig
from findata.remote.client import RemoteDataClient
from findata.tools.dispatcher import ToolDispatcher

BASE_URL = "http://api.test"


class FakeApi:
    """httpx transport handler serving canned JSON per request path.

    *routes* maps a URL path (``"/api/v1/companies"``) to either a JSON
    body (served with status 200) or an :class:`httpx.Response`.
    Unknown paths answer 404.  Every request is recorded.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self.routes.get(request.url.path)
        if entry is None:
            return httpx.Response(status_code=404, json={"detail": "Not found"})
        if isinstance(entry, httpx.Response):
            return entry
        return httpx.Response(status_code=200, json=entry)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def api_config() -> ApiConfig:
    return ApiConfig(base_url=BASE_URL, api_key="test-key")


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
async def client(api_config: ApiConfig, fake_api: FakeApi) -> RemoteDataClient:  # type: ignore[misc]
    """RemoteDataClient wired to the in-process :class:`FakeApi`."""
    remote = RemoteDataClient(api_config, transport=httpx.MockTransport(fake_api))
    yield remote
    await remote.aclose()


@pytest.fixture
def dispatcher(client: RemoteDataClient) -> ToolDispatcher:
    return ToolDispatcher(client)


# ── Canned payloads ─────────────────────────────────────────────


@pytest.fixture
def companies_payload() -> list[dict[str, Any]]:
    return [
        {
            "symbol": "PETR4",
            "name": "Petróleo Brasileiro S.A. - Petrobras",
            "sector": "Oil & Gas",
            "country": "Brazil",
            "currency": "BRL",
        },
        {
            "symbol": "VALE3",
            "name": "Vale S.A.",
            "sector": "Mining",
            "country": "Brazil",
            "currency": "BRL",
        },
    ]


@pytest.fixture
def financial_payload() -> dict[str, Any]:
    return {
        "company_symbol": "PETR4",
        "company_name": "Petrobras",
        "total_periods": 1,
        "applied_filters": {"years": "2024", "metrics": None, "limit": None},
        "periods": [
            {
                "period_label": "3T24",
                "year": 2024,
                "quarter": 3,
                "financial_data": [
                    {
                        "metric_name": "net_revenue",
                        "metric_label": "Receita Líquida",
                        "value": 12345.678,
                        "currency": "BRL",
                        "unit": "millions",
                    },
                ],
            },
        ],
    }


@pytest.fixture
def search_payload() -> dict[str, Any]:
    return {
        "query": "dividend policy",
        "total_results": 2,
        "results": [
            {
                "company": "PETR4",
                "year": 2024,
                "quarter": 2,
                "speaker": "CFO",
                "text": "x" * 250,
                "timestamp": 125,
                "sentiment": "positive",
                "keywords": ["dividends", "payout"],
                "similarity_score": 0.873,
            },
            {
                "company": "VALE3",
                "year": 2023,
                "quarter": 4,
                "text": "We expect stable iron ore output.",
            },
        ],
    }
