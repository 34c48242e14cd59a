"""Install and restore the transport double.

A :class:`TransportRegistry` owns one binding: the ``XMLHttpRequest`` name
(or another ``name``) on a namespace object. Installing rebinds that name to
the mock class, restoring puts the original constructor back. All mutation of
the binding goes through this module.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from . import transport
from .mock import MockXMLHttpRequest
from .stub import ResponseDescriptor, StubBuilder

logger = logging.getLogger(__name__)

_MISSING = object()


class TransportRegistry:
    """Holds the original transport constructor and the active stub."""

    def __init__(self, namespace: Any, name: str = "XMLHttpRequest") -> None:
        self.namespace = namespace
        self.name = name
        self.original: Any = None
        self.active_descriptor: Optional[ResponseDescriptor] = None
        self.installed = False
        self.mock_class = MockXMLHttpRequest.bound_to(self)
        self._capture()

    def _capture(self) -> None:
        if self.original is not None:
            return
        current = getattr(self.namespace, self.name, _MISSING)
        if current is _MISSING:
            raise AttributeError(f"{self.namespace!r} has no attribute {self.name!r} to mock")
        if current is not self.mock_class:
            self.original = current

    @property
    def current(self) -> Any:
        """Whatever the binding currently refers to."""
        return getattr(self.namespace, self.name)

    def is_original(self) -> bool:
        return self.current is self.original

    def install(self) -> StubBuilder:
        """Bind the mock and return a builder for its response."""
        self._capture()
        if not self.installed:
            setattr(self.namespace, self.name, self.mock_class)
            self.installed = True
            logger.info("Mocked %s on %s", self.name, getattr(self.namespace, '__name__', self.namespace))
        return StubBuilder(self)

    def activate(self, descriptor: ResponseDescriptor) -> None:
        self.active_descriptor = descriptor
        logger.debug("Stubbed %s response: status %d, %s", self.name, descriptor.status, descriptor.content_type)

    def restore(self) -> None:
        """Put the original constructor back. Safe to call at any time."""
        if not self.installed:
            return
        setattr(self.namespace, self.name, self.original)
        self.active_descriptor = None
        self.installed = False
        logger.info("Restored %s on %s", self.name, getattr(self.namespace, '__name__', self.namespace))

    def rebind_original(self) -> None:
        """Restore, and put the original back even if something else replaced it."""
        self.restore()
        if self.is_original():
            return
        setattr(self.namespace, self.name, self.original)
        logger.info("Rebound original %s on %s", self.name, getattr(self.namespace, '__name__', self.namespace))

    def __enter__(self) -> StubBuilder:
        return self.install()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def __repr__(self) -> str:
        return f"<TransportRegistry {self.name} installed={self.installed}>"


registry = TransportRegistry(transport)


def mock_request() -> StubBuilder:
    """Mock ``XMLHttpRequest`` until :func:`unmock_request` or the end of the test."""
    return registry.install()


def unmock_request() -> None:
    registry.restore()


def xhr(*args: Any, **kwargs: Any) -> Any:
    """Construct a transport through the current ``XMLHttpRequest`` binding."""
    return transport.XMLHttpRequest(*args, **kwargs)


__all__ = ["TransportRegistry", "registry", "mock_request", "unmock_request", "xhr"]
