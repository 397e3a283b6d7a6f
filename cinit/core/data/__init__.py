"""
Asset registry for the static payloads stamped into new projects.

Loads files from ``cinit/core/data/assets/`` on first access and caches
them for the lifetime of the instance.  The scaffold never inspects
asset content beyond the substitution and block markers of the
Makefile and README templates.

Usage::

    from cinit.core.data import AssetRegistry

    assets = AssetRegistry()
    makefile = assets.makefile_template
    tidy = assets.clang_tidy(Strictness.STRICT)
"""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

from cinit.core.models.options import Strictness

logger = logging.getLogger(__name__)

_ASSETS_DIR = Path(__file__).parent / "assets"

_CLANG_TIDY_FILES = {
    Strictness.LOOSE: "clang-tidy-loose.yaml",
    Strictness.STRICT: "clang-tidy-strict.yaml",
    Strictness.STRICTEST: "clang-tidy-strictest.yaml",
}


class AssetRegistry:
    """Lazily loaded templates and verbatim payloads."""

    def __init__(self, assets_dir: Path | None = None):
        self._dir = assets_dir or _ASSETS_DIR

    def _read(self, name: str) -> str:
        """Read an asset verbatim (no newline translation)."""
        with open(self._dir / name, encoding="utf-8", newline="") as f:
            content = f.read()
        logger.debug("Loaded asset %s (%d bytes)", name, len(content))
        return content

    # ── Templates (contain markers) ─────────────────────────────

    @cached_property
    def makefile_template(self) -> str:
        """Makefile with {CC}/{NAME}/{PHONY} markers and the test block."""
        return self._read("Makefile.tmpl")

    @cached_property
    def readme_template(self) -> str:
        return self._read("README.md.tmpl")

    @cached_property
    def main_source_template(self) -> str:
        return self._read("main.c.tmpl")

    # ── Verbatim payloads ───────────────────────────────────────

    @cached_property
    def test_header(self) -> str:
        return self._read("testkit.h")

    @cached_property
    def test_source(self) -> str:
        return self._read("test_basic.c")

    def clang_tidy(self, strictness: Strictness) -> str:
        """One of the three fixed .clang-tidy variants."""
        return self._read(_CLANG_TIDY_FILES[strictness])
