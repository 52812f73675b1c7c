"""Endpoint builders: tool arguments -> REST path and query parameters.

Builders are pure.  Required arguments are substituted into the path;
optional arguments are passed through as query parameters and dropped by
the client when falsy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

API_PREFIX = "/api/v1"


@dataclass(frozen=True, slots=True)
class RemoteRequest:
    """A GET request against the financial-data API."""

    path: str
    query: dict[str, Any] = field(default_factory=dict)


def _optional(args: Mapping[str, Any], *names: str) -> dict[str, Any]:
    return {name: args[name] for name in names if args.get(name)}


def _path_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def companies(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(f"{API_PREFIX}/companies")


def company_details(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(f"{API_PREFIX}/companies/{args['symbol']}")


def financial_data(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(
        f"{API_PREFIX}/financial-data/{args['symbol']}",
        _optional(args, "years", "metrics", "limit"),
    )


def available_metrics(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(f"{API_PREFIX}/financial-data/{args['symbol']}/metrics")


def metric_time_series(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(
        f"{API_PREFIX}/financial-data/{args['symbol']}/metric/{args['metric_name']}"
    )


def earnings_search(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(
        f"{API_PREFIX}/earnings-calls/search",
        _optional(args, "query", "company", "limit", "threshold"),
    )


def earnings_topic_search(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(
        f"{API_PREFIX}/earnings-calls/search-topic",
        _optional(args, "topic", "company", "year", "limit"),
    )


def sentiment_timeline(args: Mapping[str, Any]) -> RemoteRequest:
    return RemoteRequest(
        f"{API_PREFIX}/earnings-calls/{args['company']}/sentiment-timeline",
        _optional(args, "start_year", "end_year"),
    )


def call_highlights(args: Mapping[str, Any]) -> RemoteRequest:
    year = _path_value(args["year"])
    quarter = _path_value(args["quarter"])
    return RemoteRequest(
        f"{API_PREFIX}/earnings-calls/{args['company']}/{year}Q{quarter}/highlights"
    )
