"""
Option models — the inputs and the resolved outcome of a scaffold run.

``ScaffoldOptions`` carries only what the user typed on the command line
(``None`` means "not supplied").  ``ResolvedConfiguration`` is the single
immutable answer produced by the precedence resolver, and is the only
thing the generators and the orchestrator ever look at.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Compiler(StrEnum):
    """Supported toolchain families."""

    CLANG = "clang"
    GCC = "gcc"


class Strictness(StrEnum):
    """Warning rigor tier, shared by compiler and linter.

    Tiers are totally ordered: loose < strict < strictest.
    """

    LOOSE = "loose"
    STRICT = "strict"
    STRICTEST = "strictest"

    @property
    def rank(self) -> int:
        return _STRICTNESS_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Strictness):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Strictness):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Strictness):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Strictness):
            return NotImplemented
        return self.rank >= other.rank


_STRICTNESS_ORDER = (Strictness.LOOSE, Strictness.STRICT, Strictness.STRICTEST)


class ColorMode(StrEnum):
    """When to emit ANSI colors."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @property
    def click_color(self) -> bool | None:
        """Value for click's ``color=`` argument (None lets click detect a tty)."""
        if self is ColorMode.ALWAYS:
            return True
        if self is ColorMode.NEVER:
            return False
        return None


class ScaffoldOptions(BaseModel):
    """Raw explicit input from the command line.

    Every field is optional: ``None`` means the user did not supply it,
    which is what lets the resolver decide whether to prompt.
    """

    name: str | None = None
    path: str | None = None
    cc: Compiler | None = None
    strictness: Strictness | None = None
    linter_strictness: Strictness | None = None
    color: ColorMode | None = None
    force: bool | None = None
    no_git: bool | None = None
    no_commit: bool | None = None
    no_hello: bool | None = None
    no_tests: bool | None = None
    interactive: bool = False


class ResolvedConfiguration(BaseModel):
    """The final, immutable configuration for one scaffold run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    path: str = "."
    cc: Compiler = Compiler.CLANG
    strictness: Strictness = Strictness.STRICT
    linter_strictness: Strictness = Strictness.STRICT
    color: ColorMode = ColorMode.AUTO
    force: bool = False
    no_git: bool = False
    no_commit: bool = False
    no_hello: bool = False
    no_tests: bool = False

    @property
    def normalized_name(self) -> str:
        """Lowercase name with spaces replaced by underscores (binary name)."""
        return self.name.lower().replace(" ", "_")

    @property
    def generate_tests(self) -> bool:
        return not self.no_tests

    @property
    def target_dir(self) -> Path:
        return Path(self.path)

    @property
    def is_current_dir(self) -> bool:
        return Path(self.path) == Path(".")
