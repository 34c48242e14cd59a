"""Deterministic XMLHttpRequest double for unit tests.

Usage::

    from xhrmock import mock_request, xhr

    mock_request().and_return("bar", "text/plain", 200)
    request = xhr()
    request.open("GET", "path")
    request.send(None)
    assert request.responseText == "bar"
"""

from .errors import InvalidStateError, ManifestError, UnknownTransportError, XHRMockError
from .headers import HeaderStore
from .lifecycle import SpecLifecycle, lifecycle
from .mock import MockXMLHttpRequest
from .registry import TransportRegistry, mock_request, registry, unmock_request, xhr
from .status import STATUS_TEXT, reason_phrase
from .stub import DEFAULT_DESCRIPTOR, ResponseDescriptor, StubBuilder

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DESCRIPTOR",
    "HeaderStore",
    "InvalidStateError",
    "ManifestError",
    "MockXMLHttpRequest",
    "ResponseDescriptor",
    "STATUS_TEXT",
    "SpecLifecycle",
    "StubBuilder",
    "TransportRegistry",
    "UnknownTransportError",
    "XHRMockError",
    "lifecycle",
    "mock_request",
    "reason_phrase",
    "registry",
    "unmock_request",
    "xhr",
]
