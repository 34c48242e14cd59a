"""The XMLHttpRequest transport, implemented over :mod:`requests`.

Code that talks HTTP through this module constructs ``transport.XMLHttpRequest``
by name, which is what lets :mod:`xhrmock.registry` swap in the mock.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import requests

from .errors import InvalidStateError
from .headers import HeaderStore
from .status import reason_phrase

logger = logging.getLogger(__name__)

UNSENT = 0
OPENED = 1
HEADERS_RECEIVED = 2
LOADING = 3
DONE = 4


class XMLHttpRequest:
    """A synchronous XMLHttpRequest backed by ``requests``.

    The callback assigned to ``onreadystatechange`` is called with the request
    as its only argument after every state change.
    """

    UNSENT = UNSENT
    OPENED = OPENED
    HEADERS_RECEIVED = HEADERS_RECEIVED
    LOADING = LOADING
    DONE = DONE

    def __init__(self, timeout: int = 15, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        self._session = session
        self.onreadystatechange: Optional[Callable[[Any], Any]] = None
        self.readyState = UNSENT
        self._reset_request()
        self._reset_response()

    def _reset_request(self) -> None:
        self.method: Optional[str] = None
        self.url: Optional[str] = None
        self.async_ = True
        self.user: Optional[str] = None
        self.password: Optional[str] = None
        self.data: Any = None
        self.requestHeaders = HeaderStore()

    def _reset_response(self) -> None:
        self.responseHeaders = HeaderStore()
        self.status = 0
        self.statusText = ""
        self.responseText: Any = None

    @property
    def body(self) -> Any:
        """Alias of ``responseText``."""
        return self.responseText

    @property
    def requestBody(self) -> Any:
        return self.data

    def _is_head(self) -> bool:
        return (self.method or "").upper() == "HEAD"

    def _change_state(self, state: int) -> None:
        logger.debug("%s %s: readyState %d -> %d", self.method, self.url, self.readyState, state)
        self.readyState = state
        if self.onreadystatechange is not None:
            self.onreadystatechange(self)

    def _require_opened(self, operation: str) -> None:
        if self.readyState != OPENED:
            raise InvalidStateError(operation, self.readyState, "call open() first")

    def open(self, method: Optional[str] = None, url: Optional[str] = None, async_: bool = True,
             user: Optional[str] = None, password: Optional[str] = None) -> None:
        if self.readyState not in (UNSENT, DONE):
            raise InvalidStateError("open", self.readyState, "request already in progress")
        if not method or not url:
            raise InvalidStateError("open", self.readyState, "method and url are required")
        self._reset_request()
        self._reset_response()
        self.method = method
        self.url = url
        self.async_ = async_
        self.user = user
        self.password = password
        self._change_state(OPENED)

    def setRequestHeader(self, name: str, value: str) -> None:
        self._require_opened("setRequestHeader")
        self.requestHeaders[name] = value

    def send(self, data: Any = None) -> None:
        self._require_opened("send")
        self.data = data
        requester = self._session if self._session is not None else requests
        auth = (self.user, self.password or "") if self.user is not None else None
        try:
            logger.debug("Sending %s %s", self.method, self.url)
            resp = requester.request(self.method, self.url, data=data, headers=dict(self.requestHeaders),
                                     auth=auth, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Request %s %s failed: %s", self.method, self.url, exc)
            self._reset_response()
            self._change_state(DONE)
            return
        self.status = resp.status_code
        self.statusText = resp.reason or reason_phrase(resp.status_code)
        self.responseHeaders = HeaderStore(resp.headers)
        self._change_state(HEADERS_RECEIVED)
        self._change_state(LOADING)
        self.responseText = None if self._is_head() else resp.text
        self._change_state(DONE)

    def abort(self) -> None:
        """Drop the current request and go back to ``UNSENT`` silently."""
        logger.debug("%s %s: aborted in readyState %d", self.method, self.url, self.readyState)
        self._reset_response()
        self.readyState = UNSENT

    def getResponseHeader(self, name: str) -> Any:
        if self.readyState < HEADERS_RECEIVED:
            return None
        return self.responseHeaders.get(name)

    def getAllResponseHeaders(self) -> str:
        if self.readyState < HEADERS_RECEIVED:
            return ""
        return self.responseHeaders.serialize()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method} {self.url} readyState={self.readyState}>"


__all__ = ["XMLHttpRequest", "UNSENT", "OPENED", "HEADERS_RECEIVED", "LOADING", "DONE"]
