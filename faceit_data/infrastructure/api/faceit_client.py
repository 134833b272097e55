"""FACEIT Data API client."""
from __future__ import annotations

import inspect
import time
from typing import Any, Dict, Optional

from ...application.resources import Resource, build_namespaces
from ...config import settings
from ...core.logging import get_logger
from ...domain.errors import MissingAPIKeyError, ResponseDecodeError, TransportError
from .request_builder import RequestBuilder
from .transport import Fetch, HttpxFetch

logger = get_logger(__name__, service="faceit")


class FaceitAPIClient:
    """Asynchronous FACEIT Data API v4 client.

    Every catalog operation is reachable as ``client.<resource>.<operation>``,
    e.g. ``await client.players.history(player_id=..., game="csgo", limit=5)``.
    Parameter errors raise ``ValidationError`` at call time; the returned
    coroutine performs the request and resolves to the decoded JSON body,
    whatever the HTTP status.

    ``fetch`` may be any async callable ``(url, headers) -> response`` whose
    ``json()`` returns the body (or an awaitable of it). Without one, an
    ``HttpxFetch`` is created and closed by ``aclose``/``async with``.
    """

    championships: Resource
    games: Resource
    hubs: Resource
    leaderboards: Resource
    matches: Resource
    organizers: Resource
    players: Resource
    rankings: Resource
    search: Resource
    teams: Resource
    tournaments: Resource

    def __init__(
        self,
        api_key: Optional[str],
        fetch: Optional[Fetch] = None,
        *,
        base_url: str = settings.BASE_URL,
        timeout: float = settings.REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self._owns_fetch = fetch is None
        self.fetch: Fetch = fetch if fetch is not None else HttpxFetch(timeout=timeout)
        self.builder = RequestBuilder(base_url)
        for name, resource in build_namespaces(self).items():
            setattr(self, name, resource)

    @classmethod
    def from_settings(cls, fetch: Optional[Fetch] = None) -> "FaceitAPIClient":
        """Client keyed with FACEIT_API_KEY and using the configured base URL."""
        settings.validate()
        return cls(
            settings.FACEIT_API_KEY,
            fetch,
            base_url=settings.BASE_URL,
            timeout=settings.REQUEST_TIMEOUT,
        )

    @property
    def base_url(self) -> str:
        return self.builder.base_url

    async def __aenter__(self) -> "FaceitAPIClient":
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_fetch and isinstance(self.fetch, HttpxFetch):
            await self.fetch.aclose()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def request(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        if not self.api_key:
            raise MissingAPIKeyError()

        logger.debug(lambda: "request-start", extra={"url": url})
        start = time.perf_counter()
        try:
            response = await self.fetch(url, self._headers())
        except Exception as exc:
            logger.error(lambda: "transport-error", extra={"url": url, "error": repr(exc)})
            raise TransportError(f"request to {url} failed: {exc}", url=url) from exc

        try:
            body = response.json()
            if inspect.isawaitable(body):
                body = await body
        except ValueError as exc:
            logger.error(lambda: "decode-error", extra={"url": url, "error": repr(exc)})
            raise ResponseDecodeError(f"response from {url} is not valid JSON", url=url) from exc
        except Exception as exc:
            logger.error(lambda: "decode-error", extra={"url": url, "error": repr(exc)})
            raise TransportError(f"could not read response from {url}: {exc}", url=url) from exc

        logger.success(
            lambda: "request-ok",
            extra={
                "url": url,
                "status": getattr(response, "status_code", None),
                "latency_ms": int((time.perf_counter() - start) * 1000.0),
            },
        )
        return body
