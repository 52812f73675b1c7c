"""Exception hierarchy for findata.

Every module imports from here. The hierarchy is:

    FindataError
    ├── RemoteRequestError(url, status_code)
    ├── ToolError
    │   ├── UnknownToolError(name)
    │   └── InvalidArgumentsError(tool, missing)
    └── ConfigError
"""

from __future__ import annotations


class FindataError(Exception):
    """Base exception for all findata errors."""


# ─── Remote API Errors ────────────────────────────────────────


class RemoteRequestError(FindataError):
    """HTTP round trip to the financial-data API failed.

    Covers non-2xx responses (``status_code`` set) as well as transport
    and JSON decoding failures (``status_code`` is None).
    """

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch from {url}: {message}")


# ─── Tool Errors ──────────────────────────────────────────────


class ToolError(FindataError):
    """Base for tool resolution and argument errors."""


class UnknownToolError(ToolError):
    """Dispatch was given a name that is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(ToolError):
    """Required tool arguments are missing."""

    def __init__(self, tool: str, missing: list[str]) -> None:
        self.tool = tool
        self.missing = missing
        super().__init__(f"Missing required argument(s): {', '.join(missing)}")


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(FindataError):
    """Invalid configuration."""
