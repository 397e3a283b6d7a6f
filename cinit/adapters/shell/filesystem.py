"""
Filesystem adapter — directory creation and file writes with receipts.

Also home of ``is_dir_nonempty``, the check both the wizard and the
orchestrator use to guard against scaffolding over existing files.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from cinit.adapters.base import Adapter, ExecutionContext
from cinit.core.models.action import Receipt

logger = logging.getLogger(__name__)


def is_dir_nonempty(path: Path) -> bool:
    """True when ``path`` is an existing directory with at least one entry."""
    if not path.is_dir():
        return False
    try:
        return any(path.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return False


class FilesystemAdapter(Adapter):
    """File and directory operations.

    Action params:
        operation (str): One of 'exists', 'mkdir', 'write'.
        path (str): Target path, relative to the working directory.
        content (str): Text to write (for 'write').
    """

    @property
    def name(self) -> str:
        return "filesystem"

    def _operations(self) -> dict[str, Callable[[ExecutionContext, Path], Receipt]]:
        return {"exists": self._exists, "mkdir": self._mkdir, "write": self._write}

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.params.get("operation", "")
        if operation not in self._operations():
            valid = ", ".join(sorted(self._operations()))
            return False, f"Unknown operation '{operation}'. Valid: {valid}"

        if not context.params.get("path", ""):
            return False, "Missing required param: 'path'"

        if operation == "write" and "content" not in context.params:
            return False, "Missing required param: 'content' for write operation"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.params["operation"]
        target = Path(context.params["path"])
        try:
            return self._operations()[operation](context, target)
        except OSError as e:
            return context.failure(
                self.name,
                e.strerror or str(e),
                metadata={"operation": operation, "path": str(target)},
            )

    def _exists(self, ctx: ExecutionContext, target: Path) -> Receipt:
        exists = target.exists()
        return ctx.success(self.name, output=str(exists), metadata={"exists": exists})

    def _mkdir(self, ctx: ExecutionContext, target: Path) -> Receipt:
        target.mkdir(parents=True, exist_ok=True)
        return ctx.success(self.name, output=f"Directory created: {target}")

    def _write(self, ctx: ExecutionContext, target: Path) -> Receipt:
        content = ctx.params["content"]
        target.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the template's line endings byte-for-byte
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return ctx.success(
            self.name,
            output=f"Written {len(content)} bytes to {target}",
            metadata={"size": len(content)},
        )
