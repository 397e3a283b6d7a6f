"""
Adapter base — the protocol contract between the scaffold and the outside world.

Every side effect the scaffold needs (filesystem writes, git) goes
through an adapter.  Relative paths resolve against the process working
directory, which the scaffold sets once before the first write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from cinit.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """What an adapter receives for one action."""

    action: Action

    @property
    def params(self) -> dict[str, Any]:
        return self.action.params

    def failure(self, adapter: str, error: str, **kwargs: Any) -> Receipt:
        """Failure receipt for this action."""
        return Receipt.failure(adapter=adapter, action_id=self.action.id, error=error, **kwargs)

    def success(self, adapter: str, output: str = "", **kwargs: Any) -> Receipt:
        """Success receipt for this action."""
        return Receipt.success(adapter=adapter, action_id=self.action.id, output=output, **kwargs)


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They never raise; failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier ('filesystem' or 'git')."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action's params before execution.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Perform the action and return a receipt.

        Must not raise. Failures come back with status='failed'.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
