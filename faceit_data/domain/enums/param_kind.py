"""Parameter kinds and locations used by the endpoint catalog."""
from enum import Enum


class ParamKind(Enum):
    """Declared type of an endpoint parameter.

    Provides:
    - label: the type name shown in validation errors
    """

    STRING = "string"
    NON_EMPTY_STRING = "non_empty_string"
    NUMBER = "number"
    TIMESTAMP = "timestamp"
    ARRAY_OF_STRING = "array_of_string"
    OBJECT = "object"

    @property
    def label(self) -> str:
        """Get the type name used in ``"<param> must be of type: <label>"``."""
        labels = {
            "string": "String",
            "non_empty_string": "String",
            "number": "Number",
            "timestamp": "Number",
            "array_of_string": "Array[String]",
            "object": "Object",
        }
        return labels[self.value]


class ParamLocation(Enum):
    """Where a parameter ends up in the request URL."""

    PATH = "path"
    QUERY = "query"
