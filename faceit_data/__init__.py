"""
FACEIT Data API Client
======================

Asynchronous client for the FACEIT Data API v4.

Features:
- Every endpoint of the public Data API as ``client.<resource>.<operation>``
- Parameters validated against a static endpoint catalog before any I/O
- Injectable fetch callable; httpx by default
- Structured logging with bearer-token redaction

Example::

    async with FaceitAPIClient(api_key) as client:
        history = await client.players.history(player_id=pid, game="csgo", limit=5)
"""

__version__ = "1.0.0"

from .config import settings
from .domain import (
    CATALOG,
    Endpoint,
    EventType,
    FaceitError,
    MissingAPIKeyError,
    Param,
    ParamKind,
    RequestDescriptor,
    ResponseDecodeError,
    TransportError,
    UnknownEndpointError,
    ValidationError,
    get_endpoint,
)
from .infrastructure.api import FaceitAPIClient, HttpxFetch, RequestBuilder

__all__ = [
    # Version info
    '__version__',

    # Client
    'FaceitAPIClient',
    'HttpxFetch',
    'RequestBuilder',

    # Catalog
    'CATALOG',
    'Endpoint',
    'Param',
    'ParamKind',
    'EventType',
    'RequestDescriptor',
    'get_endpoint',

    # Errors
    'FaceitError',
    'ValidationError',
    'MissingAPIKeyError',
    'TransportError',
    'ResponseDecodeError',
    'UnknownEndpointError',

    # Config
    'settings',
]
