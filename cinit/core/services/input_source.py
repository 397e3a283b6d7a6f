"""
Wizard input sources — live terminal prompts or replayed answer lines.

The resolver only ever sees the ``InputSource`` interface.  Which
implementation is active is decided once, by ``open_input_source``,
from whether stdin is a terminal:

    - TerminalInput: numbered menus and free-text prompts via click.
    - ReplayInput:   stdin read eagerly and split into lines; one line is
                     consumed per question. Missing or malformed lines
                     fall back to the question's default and never fail.

Both echo the prompt (and, in replay mode, the chosen answer) so piped
runs leave a readable transcript.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Sequence
from typing import TextIO

import click

from cinit.core.errors import InputError

logger = logging.getLogger(__name__)


class InputSource(ABC):
    """Supplies wizard answers."""

    def __init__(self, color: bool | None = None, err: bool = False):
        self.color = color
        self.err = err

    @abstractmethod
    def next_answer(self, prompt: str, default: str = "") -> str:
        """Free-text answer; empty string when nothing was given."""

    @abstractmethod
    def next_choice(self, prompt: str, options: Sequence[str], default_index: int = 0) -> int:
        """Index into ``options`` picked by the user."""

    def echo(self, message: str = "") -> None:
        click.echo(message, err=self.err, color=self.color)


class TerminalInput(InputSource):
    """Interactive prompts on a real terminal."""

    def next_answer(self, prompt: str, default: str = "") -> str:
        try:
            answer = click.prompt(prompt, default=default, show_default=True, err=self.err)
        except (click.Abort, EOFError, OSError) as e:
            raise InputError(str(e) or "aborted") from e
        return str(answer).rstrip()

    def next_choice(self, prompt: str, options: Sequence[str], default_index: int = 0) -> int:
        self.echo(f"{prompt}:")
        for index, option in enumerate(options):
            marker = ">" if index == default_index else " "
            self.echo(f" {marker} [{index}] {option}")
        try:
            selected = click.prompt(
                "Select",
                type=click.IntRange(0, len(options) - 1),
                default=default_index,
                show_default=True,
                err=self.err,
            )
        except (click.Abort, EOFError, OSError) as e:
            raise InputError(str(e) or "aborted") from e
        self.echo(f"{prompt}: " + click.style(options[selected], fg="green"))
        return selected


class ReplayInput(InputSource):
    """Answers replayed from a pre-supplied list of lines."""

    def __init__(self, lines: Iterable[str], color: bool | None = None, err: bool = False):
        super().__init__(color=color, err=err)
        self._lines: deque[str] = deque(lines)

    @classmethod
    def from_stream(
        cls, stream: TextIO, color: bool | None = None, err: bool = False
    ) -> ReplayInput:
        """Read everything available on ``stream`` up front.

        Raises:
            InputError: The stream could not be read or decoded.
        """
        try:
            data = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(e) from e
        lines = data.splitlines()
        logger.debug("Replay input: %d line(s)", len(lines))
        return cls(lines, color=color, err=err)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def _pop(self) -> str:
        return self._lines.popleft() if self._lines else ""

    def next_answer(self, prompt: str, default: str = "") -> str:
        answer = self._pop()
        shown = answer or default
        self.echo(f"{prompt} [{default}]: {shown} (non-interactive)")
        return answer

    def next_choice(self, prompt: str, options: Sequence[str], default_index: int = 0) -> int:
        line = self._pop().strip()
        selected = default_index
        try:
            index = int(line)
        except ValueError:
            index = -1
        if 0 <= index < len(options):
            selected = index
        elif line:
            logger.debug("Ignoring invalid choice %r for %r", line, prompt)
        self.echo(
            f"{prompt}: " + click.style(options[selected], fg="green") + " (non-interactive)"
        )
        return selected


def stdin_is_interactive() -> bool:
    """Whether standard input is attached to a terminal."""
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def open_input_source(color: bool | None = None, err: bool = False) -> InputSource:
    """Pick the input source for this process (done once, at wizard start).

    With ``err`` set, prompts and the replay transcript go to stderr.
    """
    if stdin_is_interactive():
        logger.debug("Wizard input: terminal")
        return TerminalInput(color=color, err=err)
    logger.debug("Wizard input: replay from stdin")
    return ReplayInput.from_stream(sys.stdin, color=color, err=err)
