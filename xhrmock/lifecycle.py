"""Per-test hooks that keep a mocked transport from leaking between tests."""

from __future__ import annotations

import logging

from .registry import TransportRegistry, registry as default_registry

logger = logging.getLogger(__name__)


class SpecLifecycle:
    """Called by a test runner around every test."""

    def __init__(self, registry: TransportRegistry = default_registry) -> None:
        self.registry = registry

    def before_each(self) -> None:
        if self.registry.is_original():
            return
        logger.warning("%s was still mocked when a test started; restoring it", self.registry.name)
        self.registry.rebind_original()

    def after_each(self) -> None:
        self.registry.restore()


lifecycle = SpecLifecycle()

__all__ = ["SpecLifecycle", "lifecycle"]
