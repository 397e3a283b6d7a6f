"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file the scaffold will materialize.

    Attributes:
        path:      Path relative to the project directory.
        content:   Full file content.
        reason:    Why this file was generated (shown in dry-run output).
    """

    path: str
    content: str
    reason: str = ""
