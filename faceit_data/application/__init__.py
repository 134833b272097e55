"""Application layer - resource namespaces built from the catalog."""
from .resources import Operation, Resource, build_namespaces

__all__ = [
    'Operation',
    'Resource',
    'build_namespaces',
]
