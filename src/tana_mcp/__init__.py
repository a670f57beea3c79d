"""Tana Input API client and MCP server."""

from .client import TanaClient
from .models import (
    APIConfiguration,
    APIField,
    APINode,
    APIPlainNode,
    AuthenticationError,
    DecodingError,
    EmptyResponseError,
    EncodingError,
    NetworkError,
    ServerError,
    SuperTag,
    TanaAPIError,
    TanaNode,
)

__version__ = "0.1.0"

__all__ = [
    "APIConfiguration",
    "APIField",
    "APINode",
    "APIPlainNode",
    "AuthenticationError",
    "DecodingError",
    "EmptyResponseError",
    "EncodingError",
    "NetworkError",
    "ServerError",
    "SuperTag",
    "TanaAPIError",
    "TanaClient",
    "TanaNode",
]
