"""
Precedence resolver — turns raw options into one ResolvedConfiguration.

For every field the first present source wins:

    explicit CLI value  >  wizard answer  >  default (user config or built-in)

A field supplied explicitly is never prompted for.  Linter strictness
is special: it may stay unset through all three steps, and only then
falls back to the already-resolved compiler strictness.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from cinit.adapters.shell.filesystem import is_dir_nonempty
from cinit.core.config.loader import UserDefaults
from cinit.core.errors import UserCancelled
from cinit.core.models.options import (
    Compiler,
    ResolvedConfiguration,
    ScaffoldOptions,
    Strictness,
)
from cinit.core.services.input_source import InputSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

CURRENT_DIR = "."
FALLBACK_NAME = "project"

WIZARD_HEADER = "--- c-init Interactive Wizard ---"

YES_NO = ("No", "Yes")
COMPILER_CHOICES: tuple[Compiler, ...] = (Compiler.CLANG, Compiler.GCC)
STRICTNESS_CHOICES: tuple[Strictness, ...] = (
    Strictness.LOOSE,
    Strictness.STRICT,
    Strictness.STRICTEST,
)
SAME_AS_STRICTNESS = "(same as strictness)"
LINTER_CHOICES: tuple[Strictness | None, ...] = (None, *STRICTNESS_CHOICES)


def resolve_field(
    explicit: T | None,
    ask: Callable[[], T] | None,
    default: T,
) -> T:
    """First present source wins: explicit value, then asker, then default."""
    if explicit is not None:
        return explicit
    if ask is not None:
        return ask()
    return default


def derive_name(path: str, cwd: Path | None = None) -> str:
    """Project name from the last segment of the final path."""
    base = cwd if cwd is not None else Path.cwd()
    name = Path(os.path.normpath(base / path)).name
    return name or FALLBACK_NAME


class PrecedenceResolver:
    """Resolves one scaffold configuration.

    Args:
        options: Explicit command-line input.
        defaults: Preferred defaults (user config file or built-ins).
        input_source: Wizard input; None when no wizard was requested.
        is_nonempty: Directory check used for the overwrite confirmation.
        cwd: Directory "." refers to when deriving the project name.
    """

    def __init__(
        self,
        options: ScaffoldOptions,
        defaults: UserDefaults | None = None,
        input_source: InputSource | None = None,
        is_nonempty: Callable[[Path], bool] = is_dir_nonempty,
        cwd: Path | None = None,
    ):
        self.options = options
        self.defaults = defaults or UserDefaults()
        self.input = input_source
        self._is_nonempty = is_nonempty
        self._cwd = cwd
        self.asked: list[str] = []

    @property
    def wizard(self) -> bool:
        return self.input is not None

    # ── Prompt helpers ──────────────────────────────────────────

    def _choose(self, prompt: str, options: Sequence[str], default_index: int) -> int:
        assert self.input is not None
        self.asked.append(prompt)
        return self.input.next_choice(prompt, options, default_index)

    def _asker(self, ask: Callable[[], T]) -> Callable[[], T] | None:
        """Only hand out an asker when the wizard is running."""
        return ask if self.wizard else None

    def _ask_compiler(self) -> Compiler:
        default_index = COMPILER_CHOICES.index(self.defaults.cc)
        labels = [c.value for c in COMPILER_CHOICES]
        return COMPILER_CHOICES[self._choose("Compiler", labels, default_index)]

    def _ask_strictness(self) -> Strictness:
        default_index = STRICTNESS_CHOICES.index(self.defaults.strictness)
        labels = [s.value for s in STRICTNESS_CHOICES]
        return STRICTNESS_CHOICES[self._choose("Compiler Strictness", labels, default_index)]

    def _ask_linter_strictness(self) -> Strictness | None:
        default_index = LINTER_CHOICES.index(self.defaults.linter_strictness)
        labels = [SAME_AS_STRICTNESS if s is None else s.value for s in LINTER_CHOICES]
        return LINTER_CHOICES[self._choose("Linter Strictness", labels, default_index)]

    def _ask_skip(self, prompt: str, default_skip: bool) -> bool:
        """Yes/No question phrased positively; returns the *skip* toggle."""
        default_index = 0 if default_skip else 1
        return self._choose(prompt, YES_NO, default_index) == 0

    # ── Steps ───────────────────────────────────────────────────

    def _resolve_path(self) -> str:
        path = self.options.path
        if self.wizard and self.options.name is None and path is None:
            assert self.input is not None
            self.asked.append("Project Name")
            entry = self.input.next_answer("Project Name", default=CURRENT_DIR).strip()
            if entry and entry != CURRENT_DIR:
                path = entry
        return path or CURRENT_DIR

    def _resolve_force(self, path: str) -> bool:
        if self.options.force:
            return True
        if self.wizard and self._is_nonempty(Path(path)):
            if self._choose("Folder not empty. Overwrite?", YES_NO, 0) == 1:
                logger.info("Overwrite confirmed for %s", path)
                return True
            raise UserCancelled()
        return False

    def resolve(self) -> ResolvedConfiguration:
        """Run the full precedence chain.

        Raises:
            UserCancelled: The wizard's overwrite confirmation was declined.
            InputError: Reading a wizard answer failed.
        """
        opts = self.options
        defaults = self.defaults

        if self.wizard:
            assert self.input is not None
            self.input.echo(WIZARD_HEADER)
            self.input.echo()

        path = self._resolve_path()
        force = self._resolve_force(path)

        cc = resolve_field(opts.cc, self._asker(self._ask_compiler), defaults.cc)
        strictness = resolve_field(
            opts.strictness, self._asker(self._ask_strictness), defaults.strictness
        )
        linter_strictness = resolve_field(
            opts.linter_strictness,
            self._asker(self._ask_linter_strictness),
            defaults.linter_strictness,
        )
        no_git = resolve_field(
            opts.no_git,
            self._asker(lambda: self._ask_skip("Run git init?", defaults.no_git)),
            defaults.no_git,
        )
        no_tests = resolve_field(
            opts.no_tests,
            self._asker(lambda: self._ask_skip("Generate tests?", defaults.no_tests)),
            defaults.no_tests,
        )
        no_commit = resolve_field(opts.no_commit, None, defaults.no_commit)
        no_hello = resolve_field(opts.no_hello, None, defaults.no_hello)
        color = resolve_field(opts.color, None, defaults.color)

        if self.wizard:
            assert self.input is not None
            self.input.echo()

        # Unset linter strictness follows the compiler, only after both resolved
        if linter_strictness is None:
            linter_strictness = strictness

        name = opts.name or derive_name(path, self._cwd)

        config = ResolvedConfiguration(
            name=name,
            path=path,
            cc=cc,
            strictness=strictness,
            linter_strictness=linter_strictness,
            color=color,
            force=force,
            no_git=no_git,
            no_commit=no_commit,
            no_hello=no_hello,
            no_tests=no_tests,
        )
        logger.info(
            "Resolved %s at %s: cc=%s strictness=%s linter=%s tests=%s git=%s",
            config.name,
            config.path,
            config.cc,
            config.strictness,
            config.linter_strictness,
            config.generate_tests,
            not config.no_git,
        )
        return config
