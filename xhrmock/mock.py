"""A transport double that answers every request with the active stub."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from .headers import HeaderStore
from .status import reason_phrase
from .stub import DEFAULT_DESCRIPTOR, ResponseDescriptor
from .transport import DONE, XMLHttpRequest

if TYPE_CHECKING:  # pragma: no cover
    from .registry import TransportRegistry

logger = logging.getLogger(__name__)


class MockXMLHttpRequest(XMLHttpRequest):
    """Drop-in replacement for :class:`~xhrmock.transport.XMLHttpRequest`.

    Requests never leave the process: ``send`` completes immediately, moving
    straight from ``OPENED`` to ``DONE`` and calling ``onreadystatechange``
    before it returns. The response comes from the registry's descriptor as it
    is when ``send`` runs, so stubbing after construction still applies.
    """

    registry: Optional["TransportRegistry"] = None

    @classmethod
    def bound_to(cls, registry: "TransportRegistry") -> type:
        """Return a subclass whose instances read ``registry``'s stub."""
        return type(cls.__name__, (cls,), {"registry": registry, "__module__": cls.__module__})

    def _descriptor(self) -> ResponseDescriptor:
        if self.registry is None or self.registry.active_descriptor is None:
            return DEFAULT_DESCRIPTOR
        return self.registry.active_descriptor

    def send(self, data: Any = None) -> None:
        self._require_opened("send")
        self.data = data
        descriptor = self._descriptor()
        headers = HeaderStore(descriptor.headers)
        headers["Content-Type"] = descriptor.content_type
        headers["Content-Length"] = descriptor.content_length
        self.responseHeaders = headers
        self.status = descriptor.status
        self.statusText = reason_phrase(descriptor.status)
        # HEAD responses carry headers only
        self.responseText = None if self._is_head() else descriptor.body
        logger.debug("Mocked %s %s -> %d", self.method, self.url, self.status)
        self._change_state(DONE)


__all__ = ["MockXMLHttpRequest"]
