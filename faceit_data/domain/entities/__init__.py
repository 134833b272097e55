"""Domain entities."""
from .endpoint import Endpoint, Param
from .request import RequestDescriptor

__all__ = [
    'Endpoint',
    'Param',
    'RequestDescriptor',
]
