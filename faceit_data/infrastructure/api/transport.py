"""HTTP transport used by the client when no fetch callable is injected."""
from __future__ import annotations

from typing import Any, Awaitable, Mapping, Optional, Protocol

import httpx

from ...config import settings


class Response(Protocol):
    """What the client needs from a fetched response."""

    def json(self) -> Any | Awaitable[Any]: ...


class Fetch(Protocol):
    """``await fetch(url, headers)`` performs one GET and returns a ``Response``."""

    def __call__(self, url: str, headers: Mapping[str, str]) -> Awaitable[Response]: ...


def _http2_available() -> bool:
    try:
        import h2  # noqa: F401
    except ImportError:
        return False
    return True


class HttpxFetch:
    """Fetch implementation backed by a lazily created ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        http2: bool | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.http2 = (settings.HTTP2 if http2 is None else http2) and _http2_available()
        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    def _session(self) -> httpx.AsyncClient:
        if self.session is None or self.session.is_closed:
            self.session = httpx.AsyncClient(
                timeout=self.timeout,
                http2=self.http2,
                transport=self._transport,
            )
        return self.session

    async def __call__(self, url: str, headers: Mapping[str, str]) -> httpx.Response:
        return await self._session().get(url, headers=dict(headers))

    async def aclose(self) -> None:
        if self.session is not None:
            await self.session.aclose()
            self.session = None
