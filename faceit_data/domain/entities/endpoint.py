"""Catalog entry describing one remote operation."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Tuple

from ..enums import ParamKind, ParamLocation

_PLACEHOLDER = re.compile(r"\{([a-z_]+)\}")


@dataclass(frozen=True, slots=True)
class Param:
    """A declared parameter. Path parameters are always required."""
    name: str
    kind: ParamKind = ParamKind.STRING
    required: bool = False
    location: ParamLocation = ParamLocation.QUERY

    @property
    def in_path(self) -> bool:
        return self.location is ParamLocation.PATH


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Represents one FACEIT Data API operation.

    ``resource`` is the dotted namespace the method hangs off
    (``"leaderboards.hubs"``), ``name`` the method name, ``path`` the URL
    template relative to the base URL with ``{name}`` placeholders.
    """
    resource: str
    name: str
    path: str
    params: Tuple[Param, ...] = ()
    description: str = ""
    placeholders: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        placeholders = tuple(_PLACEHOLDER.findall(self.path))
        declared = {p.name for p in self.params if p.in_path}
        if set(placeholders) != declared:
            raise ValueError(
                f"{self.resource}.{self.name}: path placeholders {placeholders} "
                f"do not match path params {sorted(declared)}"
            )
        names = [p.name for p in self.params]
        if len(names) != len(set(names)):
            raise ValueError(f"{self.resource}.{self.name}: duplicate parameter names")
        object.__setattr__(self, "placeholders", placeholders)

    @property
    def qualified_name(self) -> str:
        return f"{self.resource}.{self.name}"

    @property
    def path_params(self) -> Tuple[Param, ...]:
        return tuple(p for p in self.params if p.in_path)

    @property
    def query_params(self) -> Tuple[Param, ...]:
        return tuple(p for p in self.params if not p.in_path)

    @property
    def required_params(self) -> Tuple[Param, ...]:
        return tuple(p for p in self.params if p.required)

    @property
    def optional_params(self) -> Tuple[Param, ...]:
        return tuple(p for p in self.params if not p.required)
