"""Adapters — bindings for the filesystem and git.

Public re-exports for convenient access.
"""

from cinit.adapters.base import Adapter, ExecutionContext
from cinit.adapters.mock import MockAdapter
from cinit.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
