"""Canned responses and the builder that activates them."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from .manifest import load_manifest

if TYPE_CHECKING:  # pragma: no cover
    from .registry import TransportRegistry

DEFAULT_CONTENT_TYPE = "text/xml"

Body = Optional[Union[str, bytes]]


@dataclass(frozen=True)
class ResponseDescriptor:
    """The response every mocked request returns while it is active."""

    body: Body = None
    content_type: str = DEFAULT_CONTENT_TYPE
    status: int = 200
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @property
    def content_length(self) -> int:
        """Byte length of the body, ``0`` when there is none."""
        if self.body is None:
            return 0
        if isinstance(self.body, bytes):
            return len(self.body)
        return len(self.body.encode('utf-8'))

    @classmethod
    def from_manifest(cls, data: Mapping[str, Any]) -> "ResponseDescriptor":
        return cls(
            body=data.get('body'),
            content_type=data.get('content_type', DEFAULT_CONTENT_TYPE),
            status=data.get('status', 200),
            headers=MappingProxyType(dict(data.get('headers') or {})),
        )


DEFAULT_DESCRIPTOR = ResponseDescriptor()


class StubBuilder:
    """Returned by :meth:`TransportRegistry.install` to configure the response."""

    def __init__(self, registry: "TransportRegistry") -> None:
        self._registry = registry

    def and_return(self, body: Body, content_type: str = DEFAULT_CONTENT_TYPE,
                   status: int = 200, headers: Optional[Mapping[str, str]] = None) -> ResponseDescriptor:
        """Make requests sent from now on respond with ``body``.

        Replaces whatever response was configured before. ``headers`` adds
        extra response headers; ``content-type`` and ``content-length`` are
        always derived from the other arguments.
        """
        descriptor = ResponseDescriptor(
            body=body,
            content_type=content_type,
            status=status,
            headers=MappingProxyType(dict(headers or {})),
        )
        self._registry.activate(descriptor)
        return descriptor

    def and_return_manifest(self, path: str) -> ResponseDescriptor:
        """Like :meth:`and_return`, reading the response from a stub manifest."""
        descriptor = ResponseDescriptor.from_manifest(load_manifest(path))
        self._registry.activate(descriptor)
        return descriptor


__all__ = ["Body", "DEFAULT_CONTENT_TYPE", "DEFAULT_DESCRIPTOR", "ResponseDescriptor", "StubBuilder"]
