"""Response formatters: decoded API payloads -> human-readable text.

Each formatter is a pure function ``(payload, arguments) -> str``.  The
payload is parsed into the records of :mod:`findata.remote.models` first,
so missing fields render as ``N/A`` instead of raising.

Monetary values arrive in millions of currency units and are rendered as
whole currency amounts with Babel.
"""

from __future__ import annotations

import copy
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from babel import Locale
from pydantic import TypeAdapter

from findata.remote.models import (
    CallHighlights,
    Company,
    CompanyDetail,
    FinancialDataset,
    MetricPoint,
    SearchResult,
    SearchResultSet,
    SentimentTimeline,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

DEFAULT_LOCALE = "pt_BR"
MILLION = Decimal(1_000_000)
SNIPPET_LEN = 200
NOT_AVAILABLE = "N/A"

_companies = TypeAdapter(list[Company])
_metric_names = TypeAdapter(list[str])
_metric_points = TypeAdapter(list[MetricPoint])


# ─── Helpers ──────────────────────────────────────────────────


def _text(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def format_money(
    value: float | None,
    currency: str | None,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Render *value* (in millions) as a whole amount in *currency*.

    ``format_money(12345.678, "BRL")`` -> ``"R$ 12.345.678.000"``.
    """
    if value is None or not currency:
        return NOT_AVAILABLE
    amount = Decimal(str(value)) * MILLION
    pattern = copy.copy(Locale.parse(locale).currency_formats["standard"])
    pattern.frac_prec = (0, 0)
    return pattern.apply(amount, locale, currency=currency, currency_digits=False)


def format_timestamp(seconds: float) -> str:
    """Render an offset into a call as ``minutes:seconds``."""
    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"


def snippet(text: str | None, limit: int = SNIPPET_LEN) -> str:
    """Cut transcript text to *limit* characters and append an ellipsis."""
    return f"{(text or '')[:limit]}..."


def filters_preamble(filters: Mapping[str, Any], names: Iterable[str] | None = None) -> list[str]:
    """Echo the filters that were actually applied, omitting unset ones."""
    keys = list(names) if names is not None else list(filters)
    applied = [f"• {key}: {filters[key]}" for key in keys if filters.get(key)]
    if not applied:
        return []
    return ["Applied Filters:", *applied, ""]


def _period(year: Any, quarter: Any) -> str:
    return f"{_text(year)} Q{_text(quarter)}"


# ─── Companies ────────────────────────────────────────────────


def companies(payload: Any, args: Mapping[str, Any]) -> str:
    blocks = [
        f"• {_text(c.symbol)}: {_text(c.name)}\n"
        f"  Sector: {_text(c.sector)}\n"
        f"  Country: {_text(c.country)}\n"
        f"  Currency: {_text(c.currency)}"
        for c in _companies.validate_python(payload)
    ]
    return "Available Companies:\n\n" + "\n\n".join(blocks)


def company_details(payload: Any, args: Mapping[str, Any]) -> str:
    company = CompanyDetail.model_validate(payload)
    return (
        f"Company Details for {_text(company.symbol or args.get('symbol'))}:\n\n"
        f"Name: {_text(company.name)}\n"
        f"Sector: {_text(company.sector)}\n"
        f"Country: {_text(company.country)}\n"
        f"Currency: {_text(company.currency)}"
    )


# ─── Financial data ───────────────────────────────────────────


def financial_data(
    payload: Any, args: Mapping[str, Any], *, locale: str = DEFAULT_LOCALE
) -> str:
    data = FinancialDataset.model_validate(payload)
    lines = [
        f"Financial Data for {_text(data.company_name)} ({_text(data.company_symbol)})",
        f"Total Periods: {_text(data.total_periods)}",
        "",
    ]
    lines.extend(filters_preamble(data.applied_filters))

    for period in data.periods:
        lines.append(f"{_text(period.period_label)} ({_period(period.year, period.quarter)}):")
        for metric in period.financial_data:
            value = format_money(metric.value, metric.currency, locale)
            unit = f" {metric.unit}" if metric.unit else ""
            lines.append(f"  • {_text(metric.metric_label)}: {value}{unit}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def metric_names(payload: Any) -> list[str]:
    """Validate a metrics-listing payload as a list of identifiers."""
    return _metric_names.validate_python(payload)


def available_metrics(payload: Any, args: Mapping[str, Any]) -> str:
    metrics = metric_names(payload)
    bullets = "\n".join(f"• {metric}" for metric in metrics)
    return f"Available Metrics for {args['symbol']}:\n\n{bullets}"


def metric_unavailable(metric_name: str, symbol: str, available: list[str]) -> str:
    """Explanatory text for a metric the company does not report."""
    return (
        f'Metric "{metric_name}" is not available for {symbol}.\n\n'
        f"Available metrics: {', '.join(available)}"
    )


def metric_time_series(
    payload: Any, args: Mapping[str, Any], *, locale: str = DEFAULT_LOCALE
) -> str:
    points = _metric_points.validate_python(payload)
    label = points[0].metric_label if points else None
    lines = [
        f"Time Series for {str(args['metric_name']).upper()} - {args['symbol']}",
        f"Metric: {_text(label)}",
        "",
    ]
    for point in points:
        value = format_money(point.value, point.currency, locale)
        unit = f" {point.unit}" if point.unit else ""
        lines.append(f"{_text(point.period)} ({_period(point.year, point.quarter)}): {value}{unit}")
    return "\n".join(lines)


# ─── Earnings calls ───────────────────────────────────────────


def _search_result(index: int, result: SearchResult) -> list[str]:
    heading = " ".join(
        part
        for part in (
            _text(result.company),
            _period(result.year, result.quarter),
            f"[{format_timestamp(result.timestamp)}]" if result.timestamp is not None else "",
        )
        if part
    )
    lines = [f"{index}. {heading}"]
    if result.speaker:
        lines.append(f"   Speaker: {result.speaker}")
    if result.similarity_score is not None:
        lines.append(f"   Similarity: {result.similarity_score:.2f}")
    lines.append(f"   Sentiment: {_text(result.sentiment)}")
    keywords = ", ".join(result.keywords) if result.keywords else None
    lines.append(f"   Keywords: {_text(keywords)}")
    lines.append(f'   "{snippet(result.text)}"')
    return lines


def _search_results(header: str, payload: Any, args: Mapping[str, Any], filters: list[str]) -> str:
    data = SearchResultSet.from_payload(payload)
    total = data.total_results if data.total_results is not None else len(data.results)
    lines = [header, f"Total Results: {total}", ""]
    lines.extend(filters_preamble(args, filters))

    if not data.results:
        lines.append("No matching segments found.")
        return "\n".join(lines)

    for index, result in enumerate(data.results, 1):
        lines.extend(_search_result(index, result))
        lines.append("")
    return "\n".join(lines).rstrip()


def earnings_search(payload: Any, args: Mapping[str, Any]) -> str:
    header = f'Earnings Call Search Results for "{args["query"]}"'
    return _search_results(header, payload, args, ["company", "limit", "threshold"])


def earnings_topic_search(payload: Any, args: Mapping[str, Any]) -> str:
    header = f'Earnings Call Segments on Topic "{args["topic"]}"'
    return _search_results(header, payload, args, ["company", "year", "limit"])


def sentiment_timeline(payload: Any, args: Mapping[str, Any]) -> str:
    data = SentimentTimeline.model_validate(payload)
    lines = [f"Sentiment Timeline for {_text(data.company or args.get('company'))}", ""]
    lines.extend(filters_preamble(args, ["start_year", "end_year"]))

    if not data.timeline:
        lines.append("No earnings calls found for this period.")
        return "\n".join(lines)

    for point in data.timeline:
        line = (
            f"• {_text(point.period)} ({_period(point.year, point.quarter)}): "
            f"{_text(point.sentiment_score)} ({_text(point.sentiment_label)})"
        )
        if point.segment_count is not None:
            line += f", {point.segment_count} segments"
        lines.append(line)
    return "\n".join(lines)


def call_highlights(payload: Any, args: Mapping[str, Any]) -> str:
    data = CallHighlights.model_validate(payload)
    company = data.company or args.get("company")
    year = data.year if data.year is not None else args.get("year")
    quarter = data.quarter if data.quarter is not None else args.get("quarter")
    lines = [
        f"Earnings Call Highlights for {_text(company)} - {_text(year)}Q{_text(quarter)}",
        "",
        f"Call Date: {_text(data.call_date)}",
        f"Overall Sentiment: {_text(data.overall_sentiment)}",
        f"Key Topics: {_text(', '.join(data.key_topics))}",
        "",
        "Highlights:",
    ]
    if not data.highlights:
        lines.append(NOT_AVAILABLE)
    for index, item in enumerate(data.highlights, 1):
        prefix = f"[{format_timestamp(item.timestamp)}] " if item.timestamp is not None else ""
        speaker = f"{item.speaker}: " if item.speaker else ""
        lines.append(f"{index}. {prefix}{speaker}{snippet(item.text)}")
    return "\n".join(lines)
