"""Remote financial-data API: HTTP client and payload records."""

from findata.remote.client import RemoteDataClient, encode_query

__all__ = ["RemoteDataClient", "encode_query"]
