"""findata - MCP server for Brazilian financial data."""

__version__ = "1.0.0"
