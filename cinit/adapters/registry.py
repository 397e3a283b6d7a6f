"""
Adapter registry — central dispatch for all side effects of a scaffold run.

The orchestrator only hands Actions to the registry; which adapter runs
them is decided by ``Action.adapter``.  Tests register a MockAdapter under
the same name to replace a real one.
"""

from __future__ import annotations

import logging
import time

from cinit.adapters.base import Adapter, ExecutionContext
from cinit.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Name-to-adapter table plus the execute pipeline."""

    def __init__(self) -> None:
        self._adapters: dict[str, Adapter] = {}

    def register(self, adapter: Adapter) -> None:
        """Register an adapter, replacing any previous one with the same name."""
        if adapter.name in self._adapters:
            logger.debug("Replacing adapter: %s", adapter.name)
        self._adapters[adapter.name] = adapter

    def execute_action(self, action: Action) -> Receipt:
        """Validate and execute ``action``; never raises.

        Unknown adapters, validation failures and stray exceptions all
        come back as failed receipts. The receipt is stamped with the
        elapsed time.
        """
        start_time = time.monotonic()
        context = ExecutionContext(action=action)

        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return context.failure(action.adapter, f"No adapter registered for '{action.adapter}'")

        try:
            is_valid, error_msg = adapter.validate(context)
        except Exception as e:
            return context.failure(action.adapter, f"Validation error: {e}")
        if not is_valid:
            return context.failure(action.adapter, f"Validation failed: {error_msg}")

        try:
            receipt = adapter.execute(context)
        except Exception as e:
            logger.error("Adapter %s raised during execution: %s", action.adapter, e)
            receipt = context.failure(action.adapter, f"Unexpected error: {e}")

        receipt.duration_ms = int((time.monotonic() - start_time) * 1000)
        logger.debug(
            "%s:%s → %s (%dms)", action.adapter, action.id, receipt.status, receipt.duration_ms
        )
        return receipt


def default_registry() -> AdapterRegistry:
    """Registry wired with the real filesystem and git adapters."""
    from cinit.adapters.shell.filesystem import FilesystemAdapter
    from cinit.adapters.vcs.git import GitAdapter

    registry = AdapterRegistry()
    registry.register(FilesystemAdapter())
    registry.register(GitAdapter())
    return registry
