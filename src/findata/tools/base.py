"""Tool data types.

Defines the tool name enum plus data classes for tool definitions and
the response envelope returned by the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ToolName(StrEnum):
    """Every tool the server exposes, in listing order."""

    GET_COMPANIES = "get_companies"
    GET_COMPANY_DETAILS = "get_company_details"
    GET_FINANCIAL_DATA = "get_financial_data"
    GET_AVAILABLE_METRICS = "get_available_metrics"
    GET_METRIC_TIME_SERIES = "get_metric_time_series"
    SEARCH_EARNINGS_CALLS = "search_earnings_calls"
    SEARCH_EARNINGS_CALLS_BY_TOPIC = "search_earnings_calls_by_topic"
    GET_SENTIMENT_TIMELINE = "get_sentiment_timeline"
    GET_EARNINGS_CALL_HIGHLIGHTS = "get_earnings_call_highlights"


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Schema definition for a tool, as listed to MCP clients."""

    name: str
    description: str
    input_schema: dict[str, Any]

    @property
    def required(self) -> list[str]:
        """Names of the arguments the schema marks as required."""
        return list(self.input_schema.get("required", []))


@dataclass(frozen=True, slots=True)
class ToolResponse:
    """Result of dispatching one tool call.

    Always carries exactly one text block.  ``is_error`` tells the caller
    to read the text as a failure message rather than data.
    """

    text: str
    is_error: bool = False

    @property
    def content(self) -> tuple[str, ...]:
        return (self.text,)

    @classmethod
    def error(cls, message: str) -> ToolResponse:
        return cls(text=f"Error: {message}", is_error=True)
