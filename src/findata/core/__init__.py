"""Core types, errors, and shared utilities."""

from findata.core.errors import (
    ConfigError,
    FindataError,
    InvalidArgumentsError,
    RemoteRequestError,
    ToolError,
    UnknownToolError,
)

__all__ = [
    "ConfigError",
    "FindataError",
    "InvalidArgumentsError",
    "RemoteRequestError",
    "ToolError",
    "UnknownToolError",
]
