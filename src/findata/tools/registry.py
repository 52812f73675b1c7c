"""Tool registry: the static catalog of tools the server exposes.

Provides registration, lookup and ordered listing of
:class:`ToolDefinition` objects.  Schemas are descriptive metadata for
the caller; the registry itself validates nothing.
"""

from __future__ import annotations

from typing import Any

from findata.core.errors import UnknownToolError
from findata.tools.base import ToolDefinition, ToolName

SYMBOLS = ["PETR4", "VALE3"]
METRIC_NAMES = ["net_revenue", "ebitda", "net_income", "capex", "net_debt"]


def _symbol(description: str = "Company symbol (PETR4 or VALE3)") -> dict[str, Any]:
    return {"type": "string", "description": description, "enum": SYMBOLS}


def _object(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


class ToolRegistry:
    """Ordered registry of tool definitions.

    Listing preserves registration order, so repeated calls return the
    same catalog in the same order.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, definition: ToolDefinition) -> None:
        """Register a tool definition.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if definition.name in self._tools:
            msg = f"Tool already registered: {definition.name}"
            raise ValueError(msg)
        self._tools[definition.name] = definition

    def get(self, name: str) -> ToolDefinition:
        """Get a tool definition by name.

        Raises:
            UnknownToolError: If the tool is not registered.
        """
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def list_tools(self) -> list[ToolDefinition]:
        """Return all registered definitions in registration order."""
        return list(self._tools.values())

    def list_names(self) -> list[str]:
        """Return names of all registered tools."""
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


def _catalog() -> list[ToolDefinition]:
    return [
        ToolDefinition(
            name=ToolName.GET_COMPANIES,
            description="Get list of available companies (PETR4, VALE3)",
            input_schema=_object({}),
        ),
        ToolDefinition(
            name=ToolName.GET_COMPANY_DETAILS,
            description="Get detailed information about a specific company",
            input_schema=_object({"symbol": _symbol()}, ["symbol"]),
        ),
        ToolDefinition(
            name=ToolName.GET_FINANCIAL_DATA,
            description=(
                "Get comprehensive financial data for a company with optional filters"
            ),
            input_schema=_object(
                {
                    "symbol": _symbol(),
                    "years": {
                        "type": "string",
                        "description": "Comma-separated years to filter (e.g., '2024,2025')",
                    },
                    "metrics": {
                        "type": "string",
                        "description": (
                            "Comma-separated metrics to filter (e.g., 'net_revenue,ebitda')"
                        ),
                    },
                    "limit": {
                        "type": "number",
                        "description": "Maximum number of periods to return (1-100)",
                        "minimum": 1,
                        "maximum": 100,
                    },
                },
                ["symbol"],
            ),
        ),
        ToolDefinition(
            name=ToolName.GET_AVAILABLE_METRICS,
            description="Get list of available financial metrics for a company",
            input_schema=_object({"symbol": _symbol()}, ["symbol"]),
        ),
        ToolDefinition(
            name=ToolName.GET_METRIC_TIME_SERIES,
            description=(
                "Get time series data for a specific metric. Note: Not all metrics "
                "are available for all companies. Use get_available_metrics first "
                "to check."
            ),
            input_schema=_object(
                {
                    "symbol": _symbol(),
                    "metric_name": {
                        "type": "string",
                        "description": (
                            "Metric name - availability varies by company. "
                            "PETR4: ebitda, net_debt. VALE3: ebitda only."
                        ),
                        "enum": METRIC_NAMES,
                    },
                },
                ["symbol", "metric_name"],
            ),
        ),
        ToolDefinition(
            name=ToolName.SEARCH_EARNINGS_CALLS,
            description=(
                "Semantic search over earnings call transcripts. Returns the most "
                "relevant transcript segments with speaker, sentiment and keywords."
            ),
            input_schema=_object(
                {
                    "query": {
                        "type": "string",
                        "description": "Natural-language search query",
                    },
                    "company": _symbol("Restrict results to one company (PETR4 or VALE3)"),
                    "limit": {
                        "type": "number",
                        "description": "Maximum number of segments to return (1-50)",
                        "minimum": 1,
                        "maximum": 50,
                    },
                    "threshold": {
                        "type": "number",
                        "description": "Minimum similarity score (0-1)",
                        "minimum": 0,
                        "maximum": 1,
                    },
                },
                ["query"],
            ),
        ),
        ToolDefinition(
            name=ToolName.SEARCH_EARNINGS_CALLS_BY_TOPIC,
            description=(
                "Find earnings call segments about a topic "
                "(e.g., 'production', 'dividends', 'debt')"
            ),
            input_schema=_object(
                {
                    "topic": {
                        "type": "string",
                        "description": "Topic to search for",
                    },
                    "company": _symbol("Restrict results to one company (PETR4 or VALE3)"),
                    "year": {
                        "type": "number",
                        "description": "Restrict results to one fiscal year",
                    },
                    "limit": {
                        "type": "number",
                        "description": "Maximum number of segments to return (1-50)",
                        "minimum": 1,
                        "maximum": 50,
                    },
                },
                ["topic"],
            ),
        ),
        ToolDefinition(
            name=ToolName.GET_SENTIMENT_TIMELINE,
            description="Get the quarter-by-quarter sentiment of a company's earnings calls",
            input_schema=_object(
                {
                    "company": _symbol(),
                    "start_year": {
                        "type": "number",
                        "description": "First fiscal year to include",
                    },
                    "end_year": {
                        "type": "number",
                        "description": "Last fiscal year to include",
                    },
                },
                ["company"],
            ),
        ),
        ToolDefinition(
            name=ToolName.GET_EARNINGS_CALL_HIGHLIGHTS,
            description="Get the key highlights of one quarterly earnings call",
            input_schema=_object(
                {
                    "company": _symbol(),
                    "year": {
                        "type": "number",
                        "description": "Fiscal year of the call (e.g., 2024)",
                    },
                    "quarter": {
                        "type": "number",
                        "description": "Fiscal quarter of the call (1-4)",
                        "minimum": 1,
                        "maximum": 4,
                    },
                },
                ["company", "year", "quarter"],
            ),
        ),
    ]


def default_registry() -> ToolRegistry:
    """Build the registry holding the full tool catalog."""
    registry = ToolRegistry()
    for definition in _catalog():
        registry.register(definition)
    return registry
