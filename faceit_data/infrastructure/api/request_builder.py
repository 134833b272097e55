"""Parameter validation and URL construction for catalog operations."""
from __future__ import annotations

import calendar
import datetime
from enum import Enum
from typing import Any, Mapping, Tuple
from urllib.parse import quote

from ...core.logging import get_logger, traceable
from ...domain import validators
from ...domain.entities import Endpoint, RequestDescriptor
from ...domain.enums import ParamKind
from ...domain.errors import ValidationError

logger = get_logger(__name__, service="faceit")

# characters encodeURIComponent leaves alone
_SAFE = "-_.!~*'()"

QueryPairs = Tuple[Tuple[str, Any], ...]


def validate_common(params: Any) -> None:
    """Checks shared by every operation; raises on the first violation."""
    if not validators.is_object(params):
        raise ValidationError("params", ParamKind.OBJECT)
    if params.get("type") is not None and not validators.is_string(params["type"]):
        raise ValidationError("type", ParamKind.STRING)
    if params.get("expanded") is not None and not validators.is_array(params["expanded"]):
        raise ValidationError("expanded", ParamKind.ARRAY_OF_STRING)
    for name in ("offset", "limit"):
        if params.get(name) is not None and not validators.is_number(params[name]):
            raise ValidationError(name, ParamKind.NUMBER)


def validate_operation(endpoint: Endpoint, params: Mapping[str, Any]) -> None:
    """Check required and supplied optional parameters against their declared kinds."""
    for param in endpoint.params:
        value = params.get(param.name)
        if param.required:
            if param.kind in (ParamKind.STRING, ParamKind.NON_EMPTY_STRING):
                ok = not validators.is_string_empty(value)
            else:
                ok = value is not None and validators.check(param.kind, value)
            if not ok:
                raise ValidationError(param.name, param.kind)
        elif value is not None and not validators.check(param.kind, value):
            raise ValidationError(param.name, param.kind)


def select_query_params(endpoint: Endpoint, params: Mapping[str, Any]) -> QueryPairs:
    """Project ``params`` onto the endpoint's query parameters, in catalog order.

    Falsy values are kept; ``None`` means not supplied.
    """
    return tuple(
        (param.name, params[param.name])
        for param in endpoint.query_params
        if params.get(param.name) is not None
    )


def _to_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return str(int(value.timestamp()))
    if isinstance(value, datetime.date):
        return str(calendar.timegm(value.timetuple()))
    if isinstance(value, (list, tuple)):
        return ",".join(_to_text(item) for item in value)
    return str(value)


def encode_query(query: Mapping[str, Any] | QueryPairs) -> str:
    """``k1=v1&k2=v2`` with every key and value percent-encoded on its own."""
    pairs = query.items() if isinstance(query, Mapping) else query
    return "&".join(
        f"{quote(str(key), safe=_SAFE)}={quote(_to_text(value), safe=_SAFE)}"
        for key, value in pairs
    )


def resolve_path(endpoint: Endpoint, params: Mapping[str, Any]) -> str:
    path = endpoint.path
    for name in endpoint.placeholders:
        path = path.replace("{" + name + "}", quote(_to_text(params[name]), safe=_SAFE))
    return path


def build_url(base_url: str, path: str, query: Mapping[str, Any] | QueryPairs = ()) -> str:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    encoded = encode_query(query)
    return f"{url}?{encoded}" if encoded else url


class RequestBuilder:
    """Turns an endpoint plus a parameter bag into a ``RequestDescriptor``.

    Holds only the base URL, so one instance can serve concurrent calls.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url

    @traceable
    def build(self, endpoint: Endpoint, params: Any = None) -> RequestDescriptor:
        if params is None:
            params = {}
        validate_common(params)
        validate_operation(endpoint, params)
        path = resolve_path(endpoint, params)
        query = tuple((k, _to_text(v)) for k, v in select_query_params(endpoint, params))
        url = build_url(self.base_url, path, query)
        logger.trace(
            lambda: f"built {endpoint.qualified_name}",
            extra={"url": url, "endpoint": endpoint.qualified_name},
        )
        return RequestDescriptor(endpoint=endpoint, path=path, query=query, url=url)
