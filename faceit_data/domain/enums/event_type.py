"""Event state filter accepted by the ``type`` query parameter."""
from enum import Enum


class EventType(str, Enum):
    """Championship, tournament and hub match states.

    Members can be passed wherever a ``type`` string is accepted.
    """

    ALL = "all"
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"

    @classmethod
    def values(cls) -> list[str]:
        """Get the raw strings the API accepts."""
        return [member.value for member in cls]
