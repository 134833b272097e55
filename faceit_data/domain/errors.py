"""Exceptions raised by the FACEIT client."""
from __future__ import annotations

from typing import Optional

from .enums import ParamKind


class FaceitError(Exception):
    """Base class for every error raised by this library."""


class ValidationError(FaceitError, TypeError):
    """A parameter is missing or has the wrong type.

    Raised when an operation is called, before any request is made.
    """

    def __init__(self, param: str, kind: ParamKind) -> None:
        super().__init__(f"{param} must be of type: {kind.label}")
        self.param = param
        self.kind = kind


class MissingAPIKeyError(FaceitError):
    """The client was constructed without an API key."""

    def __init__(self, message: str = "Please supply an api key.") -> None:
        super().__init__(message)


class TransportError(FaceitError):
    """The request could not be completed; ``__cause__`` holds the original error."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ResponseDecodeError(TransportError):
    """The response body was not valid JSON."""


class UnknownEndpointError(FaceitError, KeyError):
    """No catalog entry for the requested resource/operation pair."""

    def __init__(self, resource: str, name: str) -> None:
        super().__init__(f"unknown endpoint: {resource}.{name}")
        self.resource = resource
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
