"""
Recording adapter for tests — stands in for git (or any adapter) by name.
"""

from __future__ import annotations

from cinit.adapters.base import Adapter, ExecutionContext
from cinit.core.models.action import Receipt


class MockAdapter(Adapter):
    """Records every action it receives and succeeds unless told otherwise."""

    def __init__(self, adapter_name: str = "mock"):
        self._name = adapter_name
        self._failures: dict[str, str] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def action_ids(self) -> list[str]:
        """IDs of executed actions, in call order."""
        return [ctx.action.id for ctx in self.call_log]

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Make the action with ``action_id`` fail with ``error``."""
        self._failures[action_id] = error

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        error = self._failures.get(context.action.id)
        if error is not None:
            return context.failure(self._name, error)
        return context.success(self._name, output=f"[mock] {context.action.id}")
