"""
Tests for template transformation — markers, the optional test block, Makefile rendering.
"""

from cinit.core.services.templating import (
    PHONY_WITH_TESTS,
    PHONY_WITHOUT_TESTS,
    SANITIZE_FALLBACK,
    apply_optional_block,
    phony_targets,
    render_makefile,
    substitute,
)

TEMPLATE = "head\n# TEST_SECTION_BEGIN\ntest: a\n\tbody\n# TEST_SECTION_END\ntail\n"


class TestSubstitute:
    def test_replaces_every_occurrence(self):
        assert substitute("{A}-{A}-{B}", {"A": "x", "B": "y"}) == "x-x-y"

    def test_unknown_markers_untouched(self):
        assert substitute("{A} {C}", {"A": "x"}) == "x {C}"

    def test_idempotent(self):
        once = substitute("CC := {CC}", {"CC": "gcc-14"})
        assert substitute(once, {"CC": "gcc-14"}) == once


class TestOptionalBlock:
    def test_keep_drops_marker_lines_only(self):
        assert apply_optional_block(TEMPLATE, keep=True) == "head\ntest: a\n\tbody\ntail\n"

    def test_drop_removes_span(self):
        assert apply_optional_block(TEMPLATE, keep=False) == "head\ntail\n"

    def test_drop_inserts_fallback(self):
        result = apply_optional_block(TEMPLATE, keep=False, fallback="x:\n\ty\n")
        assert result == "head\nx:\n\ty\ntail\n"

    def test_idempotent(self):
        for keep in (True, False):
            once = apply_optional_block(TEMPLATE, keep=keep, fallback="x\n")
            assert apply_optional_block(once, keep=keep, fallback="x\n") == once

    def test_no_markers_unchanged(self):
        assert apply_optional_block("a\nb\n", keep=False, fallback="x\n") == "a\nb\n"

    def test_missing_end_marker_unchanged(self):
        text = "a\n# TEST_SECTION_BEGIN\nb\n"
        assert apply_optional_block(text, keep=False) == text

    def test_end_before_begin_unchanged(self):
        text = "# TEST_SECTION_END\na\n# TEST_SECTION_BEGIN\n"
        assert apply_optional_block(text, keep=True) == text

    def test_custom_markers(self):
        text = "a\n<<\nb\n>>\nc\n"
        assert apply_optional_block(text, keep=False, begin="<<", end=">>") == "a\nc\n"


class TestPhony:
    def test_with_tests(self):
        assert phony_targets(True) == PHONY_WITH_TESTS
        assert "test" in PHONY_WITH_TESTS.split()

    def test_without_tests(self):
        assert phony_targets(False) == PHONY_WITHOUT_TESTS
        assert "test" not in PHONY_WITHOUT_TESTS.split()
        assert "sanitize" in PHONY_WITHOUT_TESTS.split()


class TestRenderMakefile:
    def test_with_tests(self, assets):
        text = render_makefile(assets.makefile_template, "clang", "my_app", generate_tests=True)
        assert "CC       := clang\n" in text
        assert "NAME     := my_app\n" in text
        assert f".PHONY: {PHONY_WITH_TESTS}" in text
        assert "\ntest: $(TEST_BINS)\n" in text
        assert "TEST_SECTION" not in text
        assert "{CC}" not in text

    def test_without_tests(self, assets):
        text = render_makefile(assets.makefile_template, "gcc-14", "demo", generate_tests=False)
        assert "CC       := gcc-14\n" in text
        assert f".PHONY: {PHONY_WITHOUT_TESTS}" in text
        assert "TEST_BUILD_DIR" not in text
        assert "\ntest:" not in text
        assert SANITIZE_FALLBACK in text
        assert "TEST_SECTION" not in text

    def test_recipes_use_tabs(self, assets):
        text = render_makefile(assets.makefile_template, "clang", "x", generate_tests=False)
        assert "\n\t@$(MAKE) SANITIZE=1 MODE=debug all\n" in text
        assert "\n\t$(CC) $(CFLAGS) -c $< -o $@\n" in text

    def test_rendering_is_idempotent(self, assets):
        once = render_makefile(assets.makefile_template, "clang", "x", generate_tests=True)
        assert render_makefile(once, "clang", "x", generate_tests=True) == once
