"""Built request."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .endpoint import Endpoint


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Fully resolved GET request for one operation call."""
    endpoint: Endpoint
    path: str
    query: Tuple[Tuple[str, str], ...]
    url: str
