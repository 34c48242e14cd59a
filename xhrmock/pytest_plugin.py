"""pytest integration.

Enable it from a ``conftest.py``::

    pytest_plugins = ["xhrmock.pytest_plugin"]

Every test then starts with the real transport bound and has the mock removed
afterwards, whether it passed or failed and whether or not it called
``unmock_request()`` itself.
"""

from __future__ import annotations

import pytest

from .lifecycle import lifecycle
from .registry import mock_request as _install
from .stub import StubBuilder


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item):
    lifecycle.before_each()


@pytest.hookimpl(trylast=True)
def pytest_runtest_teardown(item, nextitem):
    lifecycle.after_each()


@pytest.fixture()
def mock_request() -> StubBuilder:
    """Mock ``XMLHttpRequest`` for the current test and return its stub builder."""
    return _install()
