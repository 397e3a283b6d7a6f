"""
Domain models — Pydantic types for c-init.

All models are re-exported here for convenient access:

    from cinit.core.models import ResolvedConfiguration, GeneratedFile, Action, Receipt
"""

from cinit.core.models.action import Action, Receipt
from cinit.core.models.options import (
    ColorMode,
    Compiler,
    ResolvedConfiguration,
    ScaffoldOptions,
    Strictness,
)
from cinit.core.models.template import GeneratedFile

__all__ = [
    # action.py
    "Action",
    # options.py
    "ColorMode",
    "Compiler",
    # template.py
    "GeneratedFile",
    "Receipt",
    "ResolvedConfiguration",
    "ScaffoldOptions",
    "Strictness",
]
