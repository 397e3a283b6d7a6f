"""
Compiler flag composition — tiered warning flag sets per compiler.

Each tier is an explicit concatenation of named blocks:

    loose     = base + compiler system includes
    strict    = loose + common strict + compiler strict extra
    strictest = strict + common strictest + compiler strictest extra

Token order is stable, blank entries are dropped, and duplicates across
blocks are kept in append order.  Nothing here does I/O except
``compiler_command``, which searches PATH for versioned gcc names on macOS.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable, Iterable

from cinit.core.models.options import Compiler, Strictness

logger = logging.getLogger(__name__)


# ── Flag blocks ─────────────────────────────────────────────────

FLAGS_LOOSE_BASE = (
    "-std=c2x",
    "-Iinclude",
    "-Wall",
    "-Wextra",
)

FLAGS_STRICT_COMMON = (
    "-Werror",
    "-Wpedantic",
    "-Wcast-align",
    "-Wpointer-arith",
    "-Wmissing-prototypes",
    "-Wstrict-prototypes",
    "-Wsign-conversion",
    "-Wswitch-enum",
    "-Wconversion",
    "-Wcast-qual",
    "-Wshadow",
)

FLAGS_STRICTEST_COMMON = (
    "-Wundef",
    "-Wformat=2",
    "-Wfloat-equal",
    "-Wswitch-default",
    "-Wdouble-promotion",
)

FLAGS_CLANG_SYSTEM_INCLUDES = (
    "-isystem/opt/homebrew/include",
    "-isystem/usr/local/include",
)

FLAGS_GCC_STRICT_EXTRA = (
    "-Wlogical-op",
    "-Wjump-misses-init",
)

FLAGS_GCC_STRICTEST_EXTRA = (
    "-Wstrict-overflow=2",
    "-Wduplicated-cond",
    "-Wduplicated-branches",
    "-Wrestrict",
    "-Wnull-dereference",
    "-Wjump-misses-init",
)

FLAGS_CLANG_STRICTEST_EXTRA = ("-Wstrict-overflow=5",)

# Replaces -Iinclude in tests/compile_flags.txt: clangd resolves the include
# directory from within ./tests, and -isystem keeps harness warnings quiet.
PROJECT_INCLUDE_FLAG = "-Iinclude"
FLAGS_TEST_INCLUDE = (
    "-I../include",
    "-I.",
    "-isystem",
    "./test-deps",
)

_SYSTEM_INCLUDES: dict[Compiler, tuple[str, ...]] = {
    Compiler.CLANG: FLAGS_CLANG_SYSTEM_INCLUDES,
    Compiler.GCC: (),
}

_STRICT_EXTRA: dict[Compiler, tuple[str, ...]] = {
    Compiler.CLANG: (),
    Compiler.GCC: FLAGS_GCC_STRICT_EXTRA,
}

_STRICTEST_EXTRA: dict[Compiler, tuple[str, ...]] = {
    Compiler.CLANG: FLAGS_CLANG_STRICTEST_EXTRA,
    Compiler.GCC: FLAGS_GCC_STRICTEST_EXTRA,
}

# Versioned gcc names to prefer on macOS, where plain `gcc` is clang.
GCC_MACOS_CANDIDATES = ("gcc-15", "gcc-14", "gcc-13")


# ── Tiers ───────────────────────────────────────────────────────


def flags_concat(*blocks: Iterable[str]) -> list[str]:
    """Concatenate flag blocks in order, dropping blank entries."""
    tokens: list[str] = []
    for block in blocks:
        tokens.extend(flag.strip() for flag in block if flag.strip())
    return tokens


def loose_flags(compiler: Compiler) -> list[str]:
    return flags_concat(FLAGS_LOOSE_BASE, _SYSTEM_INCLUDES[compiler])


def strict_flags(compiler: Compiler) -> list[str]:
    return flags_concat(loose_flags(compiler), FLAGS_STRICT_COMMON, _STRICT_EXTRA[compiler])


def strictest_flags(compiler: Compiler) -> list[str]:
    return flags_concat(
        strict_flags(compiler), FLAGS_STRICTEST_COMMON, _STRICTEST_EXTRA[compiler]
    )


_TIERS: dict[Strictness, Callable[[Compiler], list[str]]] = {
    Strictness.LOOSE: loose_flags,
    Strictness.STRICT: strict_flags,
    Strictness.STRICTEST: strictest_flags,
}


def tier_flags(compiler: Compiler, strictness: Strictness) -> list[str]:
    """Ordered flag tokens for one compiler and tier."""
    return _TIERS[strictness](compiler)


def compose_flags(compiler: Compiler, strictness: Strictness) -> str:
    """Newline-joined flag text for compile_flags.txt (no trailing newline)."""
    return "\n".join(tier_flags(compiler, strictness)).rstrip("\n")


def derive_test_flags(flags_text: str) -> str:
    """Flag text for tests/compile_flags.txt.

    A literal substring replacement of the project include flag by the
    test include block; every other line keeps its position.
    """
    return flags_text.replace(PROJECT_INCLUDE_FLAG, "\n".join(FLAGS_TEST_INCLUDE))


# ── Invocation name ─────────────────────────────────────────────


def compiler_command(
    compiler: Compiler,
    platform: str | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> str:
    """Name the Makefile should invoke for ``compiler``.

    On macOS a real gcc is usually installed under a versioned name; the
    first candidate found on PATH wins. The flag set is never affected.
    """
    platform = platform if platform is not None else sys.platform
    command = compiler.value
    if compiler is Compiler.GCC and platform == "darwin":
        for candidate in GCC_MACOS_CANDIDATES:
            if which(candidate):
                logger.info("Using %s in place of gcc", candidate)
                command = candidate
                break
    return command


def sanitizer_warning(command: str, platform: str | None = None) -> str | None:
    """Warning text when sanitizers are known to be broken for this setup."""
    platform = platform if platform is not None else sys.platform
    if platform == "darwin" and command.startswith("gcc"):
        return (
            "Sanitizers may fail with GCC on macOS (ASan runtime missing). "
            "Prefer clang for 'make sanitize'."
        )
    return None
