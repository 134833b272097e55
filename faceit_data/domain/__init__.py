"""Domain layer - endpoint catalog, parameter predicates, errors."""
from .catalog import CATALOG, get_endpoint, iter_endpoints, resources
from .entities import Endpoint, Param, RequestDescriptor
from .enums import EventType, ParamKind, ParamLocation
from .errors import (
    FaceitError,
    MissingAPIKeyError,
    ResponseDecodeError,
    TransportError,
    UnknownEndpointError,
    ValidationError,
)

__all__ = [
    # Catalog
    'CATALOG',
    'get_endpoint',
    'iter_endpoints',
    'resources',
    # Entities
    'Endpoint',
    'Param',
    'RequestDescriptor',
    # Enums
    'EventType',
    'ParamKind',
    'ParamLocation',
    # Errors
    'FaceitError',
    'MissingAPIKeyError',
    'ResponseDecodeError',
    'TransportError',
    'UnknownEndpointError',
    'ValidationError',
]
