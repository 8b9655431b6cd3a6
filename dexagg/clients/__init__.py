"""
Client package for the DEX aggregator APIs.

Contains the Odos and KyberSwap HTTP clients and their shared error types.
"""

from .base_client import (
    AggregatorClientError,
    BaseHTTPClient,
    DecodeError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from .kyberswap import KyberSwapClient
from .odos import OdosClient

__all__ = [
    "AggregatorClientError",
    "BaseHTTPClient",
    "DecodeError",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    "KyberSwapClient",
    "OdosClient",
]
