"""
Scaffold errors — every fatal condition of a run.

All of them abort the run immediately; nothing already written is
rolled back.  ``UserCancelled`` is a deliberate abort rather than a
failure, and the CLI reports it differently.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for fatal scaffold failures."""


class InputError(ScaffoldError):
    """Reading an answer from standard input failed."""

    def __init__(self, cause: object):
        super().__init__(f"failed to read input: {cause}")


class FilesystemError(ScaffoldError):
    """Creating a directory or writing a file failed."""

    def __init__(self, verb: str, path: str, cause: object):
        self.path = path
        super().__init__(f"failed to {verb} {path}: {cause}")


class DirectoryNotEmptyError(ScaffoldError):
    """Target directory has content and force-overwrite is off."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The folder {path} is not empty (use --force to proceed)")


class UserCancelled(ScaffoldError):
    """The user declined the overwrite confirmation."""

    def __init__(self) -> None:
        super().__init__("Exiting...")
