"""Entra ID adapters."""

from .auth import ClientCredentials, MsalTokenProvider
from .fetchers import ApplicationIdFetcher, FilteredApplicationFetcher, parse_id_list
from .graph_client import GraphClient, GraphClientConfig

__all__ = [
    "ApplicationIdFetcher",
    "ClientCredentials",
    "FilteredApplicationFetcher",
    "GraphClient",
    "GraphClientConfig",
    "MsalTokenProvider",
    "parse_id_list",
]
