"""Exceptions raised by esupdater.

Transport and API failures from the Elasticsearch client are not wrapped:
they propagate to the caller as ``elasticsearch.ApiError`` /
``elasticsearch.TransportError``.
"""

from __future__ import annotations

from esupdater.models import ResourceKind


class ESUpdaterError(Exception):
    """Base class for errors raised by this package."""


class AcknowledgmentError(ESUpdaterError):
    """The cluster answered a create request without acknowledging it."""

    def __init__(self, kind: ResourceKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.value} creation not acknowledged: [{name}]")


class InvalidResourceError(ESUpdaterError):
    """A resource file exists but does not hold a JSON object."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"invalid JSON payload for [{name}]: {reason}")


class MissingResourceError(ESUpdaterError):
    """A definition required to create a resource was not found."""

    def __init__(self, kind: ResourceKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"no {kind.value} definition found for [{name}]")
