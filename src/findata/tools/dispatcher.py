"""Tool dispatcher: resolves a tool call into an HTTP round trip.

Maps each :class:`ToolName` to a :class:`ToolRoute` (endpoint builder,
formatter, optional pre-flight check), executes the request through the
:class:`RemoteDataClient`, and wraps the formatted text in a
:class:`ToolResponse`.  No failure propagates past :meth:`dispatch`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from findata.core.errors import FindataError, InvalidArgumentsError, UnknownToolError
from findata.tools import endpoints, formatters
from findata.tools.base import ToolName, ToolResponse
from findata.tools.registry import default_registry

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from findata.remote.client import RemoteDataClient
    from findata.tools.endpoints import RemoteRequest
    from findata.tools.registry import ToolRegistry

    Builder = Callable[[Mapping[str, Any]], RemoteRequest]
    Formatter = Callable[[Any, Mapping[str, Any]], str]
    Precheck = Callable[[RemoteDataClient, Mapping[str, Any]], Awaitable[str | None]]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToolRoute:
    """How one tool is executed.

    ``precheck`` may return explanatory text to answer the call without
    issuing the main request.
    """

    build: Builder
    format: Formatter
    precheck: Precheck | None = None


async def check_metric_available(
    client: RemoteDataClient, args: Mapping[str, Any]
) -> str | None:
    """Return an explanation when the company does not report the metric.

    The membership test is exact and case-sensitive against the
    identifiers the API lists for the symbol.
    """
    request = endpoints.available_metrics(args)
    available = formatters.metric_names(await client.fetch(request.path, request.query))
    if args["metric_name"] in available:
        return None
    return formatters.metric_unavailable(args["metric_name"], args["symbol"], available)


def build_routes(locale: str = formatters.DEFAULT_LOCALE) -> dict[ToolName, ToolRoute]:
    """Build the dispatch table, binding *locale* into monetary formatters."""
    return {
        ToolName.GET_COMPANIES: ToolRoute(endpoints.companies, formatters.companies),
        ToolName.GET_COMPANY_DETAILS: ToolRoute(
            endpoints.company_details, formatters.company_details
        ),
        ToolName.GET_FINANCIAL_DATA: ToolRoute(
            endpoints.financial_data,
            partial(formatters.financial_data, locale=locale),
        ),
        ToolName.GET_AVAILABLE_METRICS: ToolRoute(
            endpoints.available_metrics, formatters.available_metrics
        ),
        ToolName.GET_METRIC_TIME_SERIES: ToolRoute(
            endpoints.metric_time_series,
            partial(formatters.metric_time_series, locale=locale),
            precheck=check_metric_available,
        ),
        ToolName.SEARCH_EARNINGS_CALLS: ToolRoute(
            endpoints.earnings_search, formatters.earnings_search
        ),
        ToolName.SEARCH_EARNINGS_CALLS_BY_TOPIC: ToolRoute(
            endpoints.earnings_topic_search, formatters.earnings_topic_search
        ),
        ToolName.GET_SENTIMENT_TIMELINE: ToolRoute(
            endpoints.sentiment_timeline, formatters.sentiment_timeline
        ),
        ToolName.GET_EARNINGS_CALL_HIGHLIGHTS: ToolRoute(
            endpoints.call_highlights, formatters.call_highlights
        ),
    }


class ToolDispatcher:
    """Executes tool calls against the remote API.

    Holds no mutable state besides the injected client, so overlapping
    dispatches are safe.
    """

    def __init__(
        self,
        client: RemoteDataClient,
        *,
        registry: ToolRegistry | None = None,
        locale: str = formatters.DEFAULT_LOCALE,
    ) -> None:
        self._client = client
        self._registry = registry or default_registry()
        self._routes = build_routes(locale)

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def resolve(self, name: str) -> ToolRoute:
        """Look up the route for *name*.

        Raises:
            UnknownToolError: If *name* is not a known tool.
        """
        try:
            tool = ToolName(name)
        except ValueError:
            raise UnknownToolError(name) from None
        if tool not in self._registry:
            raise UnknownToolError(name)
        return self._routes[tool]

    def _check_required(self, name: str, args: Mapping[str, Any]) -> None:
        definition = self._registry.get(name)
        missing = [arg for arg in definition.required if args.get(arg) is None]
        if missing:
            raise InvalidArgumentsError(name, missing)

    async def _execute(self, name: str, args: Mapping[str, Any]) -> str:
        route = self.resolve(name)
        self._check_required(name, args)

        if route.precheck is not None:
            explanation = await route.precheck(self._client, args)
            if explanation is not None:
                logger.info("Tool %s answered by pre-flight check", name)
                return explanation

        request = route.build(args)
        payload = await self._client.fetch(request.path, request.query)
        return route.format(payload, args)

    async def dispatch(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> ToolResponse:
        """Execute tool *name* with *arguments*.

        Always returns a :class:`ToolResponse`; failures become
        ``is_error=True`` responses with text ``Error: <message>``.
        """
        args = dict(arguments or {})
        logger.info("Dispatching tool %s", name)
        try:
            text = await self._execute(name, args)
        except FindataError as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return ToolResponse.error(str(exc))
        except Exception as exc:
            logger.exception("Unexpected error in tool %s", name)
            return ToolResponse.error(str(exc) or type(exc).__name__)
        return ToolResponse(text=text)
