"""Resource namespaces exposing catalog operations as methods."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Coroutine, Dict, Iterator, Mapping, Optional

from ..domain.catalog import CATALOG
from ..domain.entities import Endpoint, RequestDescriptor

if TYPE_CHECKING:
    from ..infrastructure.api.faceit_client import FaceitAPIClient


class Operation:
    """One catalog endpoint bound to a client.

    ``op(params, **kwargs)`` validates and builds the URL immediately, raising
    ``ValidationError`` on bad input, and returns a coroutine performing the
    request. Keyword arguments override keys of the positional mapping.
    """

    def __init__(self, client: "FaceitAPIClient", endpoint: Endpoint):
        self._client = client
        self.endpoint = endpoint
        self.__doc__ = endpoint.description

    def prepare(self, params: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> RequestDescriptor:
        if kwargs and (params is None or isinstance(params, Mapping)):
            merged = dict(params or {})
            merged.update(kwargs)
            params = merged
        return self._client.builder.build(self.endpoint, params)

    def url(self, params: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> str:
        return self.prepare(params, **kwargs).url

    def __call__(self, params: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Coroutine[Any, Any, Any]:
        request = self.prepare(params, **kwargs)
        return self._client.request(request.url)

    def __repr__(self) -> str:
        return f"<Operation {self.endpoint.qualified_name} GET /{self.endpoint.path}>"


class Resource:
    """Attribute bag of operations (and nested resources) for one namespace."""

    def __init__(self, name: str):
        self.name = name
        self._operations: Dict[str, Operation] = {}
        self._children: Dict[str, Resource] = {}

    def _add_operation(self, op: Operation) -> None:
        self._operations[op.endpoint.name] = op
        setattr(self, op.endpoint.name, op)

    def _child(self, name: str) -> "Resource":
        if name not in self._children:
            child = Resource(f"{self.name}.{name}")
            self._children[name] = child
            setattr(self, name, child)
        return self._children[name]

    def operations(self) -> Iterator[Operation]:
        """Operations of this namespace and its nested namespaces."""
        yield from self._operations.values()
        for child in self._children.values():
            yield from child.operations()

    def __dir__(self):
        return [*super().__dir__(), *self._operations, *self._children]

    def __repr__(self) -> str:
        return f"<Resource {self.name}: {', '.join([*self._operations, *self._children])}>"


def build_namespaces(client: "FaceitAPIClient") -> Dict[str, Resource]:
    """Top-level resources keyed by name, with dotted resources nested."""
    roots: Dict[str, Resource] = {}
    for dotted, endpoints in CATALOG.items():
        head, *rest = dotted.split(".")
        resource = roots.setdefault(head, Resource(head))
        for part in rest:
            resource = resource._child(part)
        for endpoint in endpoints.values():
            resource._add_operation(Operation(client, endpoint))
    return roots
