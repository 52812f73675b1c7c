"""Tool catalog and dispatch.

Provides the tool registry, the endpoint builders and formatters for each
tool, and the dispatcher that ties them to the remote data client.
"""
