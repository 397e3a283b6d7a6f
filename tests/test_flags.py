"""
Tests for compiler flag composition — tiers, ordering, test flags, invocation name.
"""

from cinit.core.models.options import Compiler, Strictness
from cinit.core.services.flags import (
    FLAGS_CLANG_SYSTEM_INCLUDES,
    FLAGS_GCC_STRICTEST_EXTRA,
    compiler_command,
    compose_flags,
    derive_test_flags,
    flags_concat,
    loose_flags,
    sanitizer_warning,
    strict_flags,
    strictest_flags,
    tier_flags,
)

# ── Tiers ───────────────────────────────────────────────────────────


class TestFlagsConcat:
    def test_keeps_order_and_duplicates(self):
        assert flags_concat(["-a", "-b"], ["-b", "-c"]) == ["-a", "-b", "-b", "-c"]

    def test_drops_blank_entries(self):
        assert flags_concat(["-a", "", "  "], [], ["-b"]) == ["-a", "-b"]


class TestTiers:
    def test_clang_loose_exact(self):
        assert loose_flags(Compiler.CLANG) == [
            "-std=c2x",
            "-Iinclude",
            "-Wall",
            "-Wextra",
            "-isystem/opt/homebrew/include",
            "-isystem/usr/local/include",
        ]

    def test_gcc_loose_has_no_system_includes(self):
        assert loose_flags(Compiler.GCC) == ["-std=c2x", "-Iinclude", "-Wall", "-Wextra"]

    def test_each_tier_extends_the_previous(self):
        for cc in Compiler:
            loose = loose_flags(cc)
            strict = strict_flags(cc)
            strictest = strictest_flags(cc)
            assert strict[: len(loose)] == loose
            assert strictest[: len(strict)] == strict
            assert len(loose) < len(strict) < len(strictest)

    def test_system_includes_clang_only(self):
        for flag in FLAGS_CLANG_SYSTEM_INCLUDES:
            assert flag in strictest_flags(Compiler.CLANG)
            assert flag not in strictest_flags(Compiler.GCC)

    def test_gcc_strict_extra(self):
        flags = strict_flags(Compiler.GCC)
        assert flags[-2:] == ["-Wlogical-op", "-Wjump-misses-init"]
        assert "-Wlogical-op" not in strict_flags(Compiler.CLANG)

    def test_gcc_strictest_keeps_duplicate(self):
        flags = strictest_flags(Compiler.GCC)
        assert flags.count("-Wjump-misses-init") == 2
        assert flags[-len(FLAGS_GCC_STRICTEST_EXTRA):] == list(FLAGS_GCC_STRICTEST_EXTRA)

    def test_clang_strictest_overflow_level(self):
        flags = strictest_flags(Compiler.CLANG)
        assert flags[-1] == "-Wstrict-overflow=5"
        assert "-Wstrict-overflow=2" not in flags

    def test_tier_flags_dispatch(self):
        assert tier_flags(Compiler.GCC, Strictness.LOOSE) == loose_flags(Compiler.GCC)
        assert tier_flags(Compiler.CLANG, Strictness.STRICTEST) == strictest_flags(Compiler.CLANG)

    def test_deterministic(self):
        for cc in Compiler:
            for level in Strictness:
                assert compose_flags(cc, level) == compose_flags(cc, level)


class TestComposeFlags:
    def test_one_flag_per_line_no_trailing_newline(self):
        text = compose_flags(Compiler.GCC, Strictness.LOOSE)
        assert text == "-std=c2x\n-Iinclude\n-Wall\n-Wextra"

    def test_no_blank_lines(self):
        text = compose_flags(Compiler.CLANG, Strictness.STRICTEST)
        assert all(line.strip() for line in text.split("\n"))


class TestDeriveTestFlags:
    def test_include_flag_replaced_in_place(self):
        text = derive_test_flags(compose_flags(Compiler.GCC, Strictness.LOOSE))
        assert text.split("\n") == [
            "-std=c2x",
            "-I../include",
            "-I.",
            "-isystem",
            "./test-deps",
            "-Wall",
            "-Wextra",
        ]

    def test_other_lines_unchanged(self):
        flags = compose_flags(Compiler.CLANG, Strictness.STRICT)
        derived = derive_test_flags(flags)
        assert "-Iinclude" not in derived.split("\n")
        assert derived.endswith(flags.split("-Iinclude\n", 1)[1])

    def test_without_include_flag(self):
        assert derive_test_flags("-Wall\n-Wextra") == "-Wall\n-Wextra"


# ── Invocation name ─────────────────────────────────────────────────


class TestCompilerCommand:
    def test_clang_is_plain(self):
        assert compiler_command(Compiler.CLANG, platform="darwin", which=lambda n: "/bin/x") == "clang"

    def test_gcc_on_linux_is_plain(self):
        assert compiler_command(Compiler.GCC, platform="linux", which=lambda n: "/bin/x") == "gcc"

    def test_gcc_on_macos_prefers_newest(self):
        found = {"gcc-14": "/opt/homebrew/bin/gcc-14", "gcc-13": "/opt/homebrew/bin/gcc-13"}
        assert compiler_command(Compiler.GCC, platform="darwin", which=found.get) == "gcc-14"

    def test_gcc_on_macos_without_versioned(self):
        assert compiler_command(Compiler.GCC, platform="darwin", which=lambda n: None) == "gcc"


class TestSanitizerWarning:
    def test_gcc_on_macos(self):
        warning = sanitizer_warning("gcc-15", platform="darwin")
        assert warning is not None
        assert "Sanitizers may fail with GCC on macOS" in warning

    def test_clang_on_macos(self):
        assert sanitizer_warning("clang", platform="darwin") is None

    def test_gcc_on_linux(self):
        assert sanitizer_warning("gcc", platform="linux") is None
