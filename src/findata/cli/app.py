"""Click CLI application for findata.

Entry point: ``findata = "findata.cli.app:cli"``
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

import click

from findata import __version__
from findata.config.loader import load_config
from findata.core.errors import ConfigError

if TYPE_CHECKING:
    from findata.config.schema import FindataConfig, LoggingConfig
    from findata.tools.base import ToolResponse

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(config_path: str | None) -> FindataConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


def _configure_logging(config: LoggingConfig) -> None:
    """Send logs to stderr (stdout carries the MCP stream) and optionally a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))
    logging.basicConfig(
        level=config.level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def _parse_arguments(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        _error(f"--args is not valid JSON: {e}")
    if not isinstance(parsed, dict):
        _error("--args must be a JSON object")
    return parsed


async def _call_async(config: FindataConfig, name: str, arguments: dict[str, Any]) -> ToolResponse:
    from findata.remote.client import RemoteDataClient
    from findata.tools.dispatcher import ToolDispatcher

    async with RemoteDataClient(config.api) as client:
        dispatcher = ToolDispatcher(client, locale=config.display.locale)
        return await dispatcher.dispatch(name, arguments)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="findata")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """findata - Financial data tools for AI agents.

    Serves PETR4 and VALE3 company data, financial statements and
    earnings-call transcripts over MCP.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── mcp ─────────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def mcp(ctx: click.Context) -> None:
    """Start the MCP server for AI agent integration."""
    from findata.mcp.server import run_server

    config = _load_config(ctx.obj["config_path"])
    _configure_logging(config.logging)
    asyncio.run(run_server(config))


# ── tools ───────────────────────────────────────────────────────


@cli.command()
def tools() -> None:
    """List the tools exposed by the MCP server."""
    from findata.cli.display import ToolDisplay
    from findata.tools.registry import default_registry

    ToolDisplay().show_tools(default_registry().list_tools())


# ── call ────────────────────────────────────────────────────────


@cli.command()
@click.argument("name")
@click.option(
    "--args",
    "raw_args",
    default=None,
    help='Tool arguments as a JSON object, e.g. \'{"symbol": "PETR4"}\'.',
)
@click.pass_context
def call(ctx: click.Context, name: str, raw_args: str | None) -> None:
    """Call one tool against the remote API and print its response."""
    config = _load_config(ctx.obj["config_path"])
    _configure_logging(config.logging)
    arguments = _parse_arguments(raw_args)

    response = asyncio.run(_call_async(config, name, arguments))
    click.echo(response.text)
    if response.is_error:
        sys.exit(1)
