"""Exceptions raised by :mod:`xhrmock`."""

from __future__ import annotations


class XHRMockError(Exception):
    """Base class for every error raised by the package."""


class InvalidStateError(XHRMockError, RuntimeError):
    """A transport operation was called in a ``readyState`` that forbids it."""

    def __init__(self, operation: str, ready_state: int, reason: str = "") -> None:
        self.operation = operation
        self.ready_state = ready_state
        message = f"{operation}() not allowed in readyState {ready_state}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ManifestError(XHRMockError, ValueError):
    """A stub manifest could not be read or failed validation."""


class UnknownTransportError(XHRMockError, KeyError):
    """No transport is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


__all__ = ["XHRMockError", "InvalidStateError", "ManifestError", "UnknownTransportError"]
