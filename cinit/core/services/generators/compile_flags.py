"""
compile_flags.txt generator — the selected warning tier, for make and clangd.

The tests directory gets its own copy with the project include flag
swapped for the test include block.
"""

from __future__ import annotations

from cinit.core.models.options import ResolvedConfiguration
from cinit.core.models.template import GeneratedFile
from cinit.core.services.flags import compose_flags, derive_test_flags

FLAGS_FILE = "compile_flags.txt"
TEST_FLAGS_FILE = "tests/compile_flags.txt"


def generate_compile_flags(config: ResolvedConfiguration) -> list[GeneratedFile]:
    """Root flags file, plus the tests flags file when tests are generated."""
    flags = compose_flags(config.cc, config.strictness)
    files = [
        GeneratedFile(
            path=FLAGS_FILE,
            content=flags,
            reason=f"{config.strictness} flags for {config.cc}",
        )
    ]
    if config.generate_tests:
        files.append(
            GeneratedFile(
                path=TEST_FLAGS_FILE,
                content=derive_test_flags(flags),
                reason="flags for tests/ (test include paths)",
            )
        )
    return files
