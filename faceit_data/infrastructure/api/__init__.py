"""Infrastructure API module."""
from .faceit_client import FaceitAPIClient
from .request_builder import (
    RequestBuilder,
    build_url,
    encode_query,
    resolve_path,
    select_query_params,
    validate_common,
    validate_operation,
)
from .transport import Fetch, HttpxFetch

__all__ = [
    'FaceitAPIClient',
    'RequestBuilder',
    'build_url',
    'encode_query',
    'resolve_path',
    'select_query_params',
    'validate_common',
    'validate_operation',
    'Fetch',
    'HttpxFetch',
]
