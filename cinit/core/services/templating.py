"""
Template transformation — marker substitution and the optional block.

Templates are plain text.  Substitution replaces ``{KEY}`` markers with
caller-supplied values.  The optional block is a span of whole lines
between a begin-marker line and an end-marker line; it is either kept
(marker lines dropped) or replaced, markers included, by a fallback.

Both operations are pure and idempotent: once the marker lines are gone
a second pass finds nothing to do.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

TEST_SECTION_BEGIN = "# TEST_SECTION_BEGIN"
TEST_SECTION_END = "# TEST_SECTION_END"

# Degraded sanitize target used when the test block is dropped
SANITIZE_FALLBACK = "sanitize:\n\t@$(MAKE) SANITIZE=1 MODE=debug all\n"

PHONY_WITH_TESTS = "all run release run-release test sanitize fmt lint clean"
PHONY_WITHOUT_TESTS = "all run release run-release sanitize fmt lint clean"


def substitute(text: str, values: Mapping[str, str]) -> str:
    """Replace every ``{KEY}`` marker for each key in ``values``."""
    for key, value in values.items():
        text = text.replace("{" + key + "}", value)
    return text


def _find_block(lines: list[str], begin: str, end: str) -> tuple[int, int] | None:
    """Indices of the begin and end marker lines, or None if absent."""
    start = next((i for i, line in enumerate(lines) if line.strip() == begin), None)
    if start is None:
        return None
    stop = next(
        (i for i in range(start + 1, len(lines)) if lines[i].strip() == end),
        None,
    )
    if stop is None:
        logger.warning("Block marker %r has no matching %r; leaving text unchanged", begin, end)
        return None
    return start, stop


def apply_optional_block(
    text: str,
    keep: bool,
    fallback: str = "",
    begin: str = TEST_SECTION_BEGIN,
    end: str = TEST_SECTION_END,
) -> str:
    """Keep or drop the marker-delimited block.

    Args:
        text: Template text.
        keep: If True, remove only the two marker lines so the body
            becomes unconditional. If False, replace the whole span,
            marker lines included, with ``fallback``.
        fallback: Replacement text for a dropped block.
        begin: Begin-marker line content.
        end: End-marker line content.
    """
    lines = text.splitlines(keepends=True)
    span = _find_block(lines, begin, end)
    if span is None:
        return text

    start, stop = span
    if keep:
        body = lines[start + 1 : stop]
    else:
        body = fallback.splitlines(keepends=True)
    return "".join(lines[:start] + body + lines[stop + 1 :])


def phony_targets(generate_tests: bool) -> str:
    return PHONY_WITH_TESTS if generate_tests else PHONY_WITHOUT_TESTS


def render_makefile(template: str, compiler_command: str, name: str, generate_tests: bool) -> str:
    """Makefile text from its template.

    Args:
        template: Raw Makefile template.
        compiler_command: Invocation name for ``{CC}``.
        name: Normalized project name for ``{NAME}``.
        generate_tests: Whether the test block survives.
    """
    text = substitute(
        template,
        {
            "CC": compiler_command,
            "NAME": name,
            "PHONY": phony_targets(generate_tests),
        },
    )
    return apply_optional_block(text, keep=generate_tests, fallback=SANITIZE_FALLBACK)
