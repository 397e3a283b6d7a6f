"""
Git adapter — repository initialization and the first commit.

Runs the git CLI in the current working directory.  Failures come back
as receipts; the scaffold treats every git failure as best-effort.
"""

from __future__ import annotations

import logging
import subprocess

from cinit.adapters.base import Adapter, ExecutionContext
from cinit.core.models.action import Receipt

logger = logging.getLogger(__name__)

GIT_TIMEOUT = 30


class GitAdapter(Adapter):
    """Git operations.

    Action params:
        operation (str): 'init' or 'commit'.
        message (str): Commit message (for 'commit').
    """

    _VALID_OPS = ("init", "commit")

    @property
    def name(self) -> str:
        return "git"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.params.get("operation", "")
        if operation not in self._VALID_OPS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(self._VALID_OPS)}"

        if operation == "commit" and not context.params.get("message", ""):
            return False, "Missing required param: 'message' for commit operation"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        try:
            if context.params["operation"] == "init":
                output = self._git("init", "-q")
            else:
                # Stage everything, then commit
                self._git("add", "-A")
                output = self._git("commit", "-m", context.params["message"])
        except (OSError, RuntimeError, subprocess.SubprocessError) as e:
            return context.failure(self.name, f"Git error: {e}")
        return context.success(self.name, output=output)

    @staticmethod
    def _git(*args: str) -> str:
        """Run a git command and return stdout."""
        logger.debug("git %s", " ".join(args))
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
        if result.returncode != 0:
            raise RuntimeError(result.stderr.strip() or f"git {args[0]} failed")
        return result.stdout
