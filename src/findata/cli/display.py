"""Rich display for the tool catalog.

Accepts an optional :class:`~rich.console.Console` for dependency
injection in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from findata.tools.base import ToolDefinition


class ToolDisplay:
    """Renders the tool catalog as a table."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show_tools(self, definitions: Sequence[ToolDefinition]) -> None:
        table = Table(title="Financial Data Tools")
        table.add_column("Tool", style="cyan", no_wrap=True)
        table.add_column("Arguments")
        table.add_column("Description")
        for definition in definitions:
            properties = definition.input_schema.get("properties", {})
            required = set(definition.required)
            args = ", ".join(
                f"{name}*" if name in required else name for name in properties
            )
            table.add_row(str(definition.name), args or "-", definition.description)
        self._console.print(table)

