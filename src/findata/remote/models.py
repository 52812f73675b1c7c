"""Record types for remote API payloads.

One model per endpoint shape.  Every field is optional and unknown fields
are ignored: the API is republished as-is, so formatters check for field
presence instead of trusting a fixed shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

Number = int | float


# ─── Companies ────────────────────────────────────────────────


class Company(BaseModel):
    """One entry of ``/api/v1/companies``."""

    symbol: str | None = None
    name: str | None = None
    sector: str | None = None
    country: str | None = None
    currency: str | None = None


class CompanyDetail(Company):
    """Payload of ``/api/v1/companies/{symbol}``."""


# ─── Financial data ───────────────────────────────────────────


class FinancialMetric(BaseModel):
    metric_name: str | None = None
    metric_label: str | None = None
    value: Number | None = None
    currency: str | None = None
    unit: str | None = None


class FinancialPeriod(BaseModel):
    period_label: str | None = None
    year: int | str | None = None
    quarter: int | str | None = None
    financial_data: list[FinancialMetric] = Field(default_factory=list)


class FinancialDataset(BaseModel):
    """Payload of ``/api/v1/financial-data/{symbol}``."""

    company_symbol: str | None = None
    company_name: str | None = None
    total_periods: int | None = None
    applied_filters: dict[str, Any] = Field(default_factory=dict)
    periods: list[FinancialPeriod] = Field(default_factory=list)


class MetricPoint(BaseModel):
    """One entry of ``/api/v1/financial-data/{symbol}/metric/{name}``."""

    period: str | None = None
    year: int | str | None = None
    quarter: int | str | None = None
    metric_label: str | None = None
    value: Number | None = None
    currency: str | None = None
    unit: str | None = None


# ─── Earnings calls ───────────────────────────────────────────


class SearchResult(BaseModel):
    company: str | None = None
    year: int | str | None = None
    quarter: int | str | None = None
    speaker: str | None = None
    text: str | None = None
    timestamp: Number | None = None
    sentiment: str | Number | None = None
    keywords: list[str] | None = None
    similarity_score: Number | None = None


class SearchResultSet(BaseModel):
    """Payload of the ``search`` and ``search-topic`` endpoints."""

    query: str | None = None
    topic: str | None = None
    total_results: int | None = None
    results: list[SearchResult] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> SearchResultSet:
        """Accept either the wrapped object or a bare list of results."""
        if isinstance(payload, list):
            return cls(results=payload)  # type: ignore[arg-type]
        return cls.model_validate(payload)


class SentimentPoint(BaseModel):
    period: str | None = None
    year: int | str | None = None
    quarter: int | str | None = None
    sentiment_score: Number | None = None
    sentiment_label: str | None = None
    segment_count: int | None = None


class SentimentTimeline(BaseModel):
    """Payload of ``/api/v1/earnings-calls/{company}/sentiment-timeline``."""

    company: str | None = None
    timeline: list[SentimentPoint] = Field(default_factory=list)


class Highlight(BaseModel):
    text: str | None = None
    speaker: str | None = None
    timestamp: Number | None = None


class CallHighlights(BaseModel):
    """Payload of ``/api/v1/earnings-calls/{company}/{year}Q{quarter}/highlights``."""

    company: str | None = None
    year: int | str | None = None
    quarter: int | str | None = None
    call_date: str | None = None
    overall_sentiment: str | Number | None = None
    key_topics: list[str] = Field(default_factory=list)
    highlights: list[Highlight] = Field(default_factory=list)
