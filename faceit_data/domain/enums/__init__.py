"""Domain enumerations."""
from .event_type import EventType
from .param_kind import ParamKind, ParamLocation

__all__ = [
    'EventType',
    'ParamKind',
    'ParamLocation',
]
