"""
Scaffold orchestration — plan the project files, then materialize them.

Planning is pure: a resolved configuration in, a ``ScaffoldPlan`` (the
directories and generated files) out.  Execution performs the side
effects in a fixed order through the adapter registry:

    1. create the target directory
    2. refuse a non-empty target unless force-overwrite is set
    3. chdir into the target (once; every later path is relative)
    4. create the fixed subdirectories
    5. write every planned file
    6. git init + .gitignore, then the initial commit (best-effort)

Any filesystem failure aborts the run. Nothing already written is
rolled back.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from cinit.adapters.registry import AdapterRegistry
from cinit.adapters.shell.filesystem import is_dir_nonempty
from cinit.core.data import AssetRegistry
from cinit.core.errors import DirectoryNotEmptyError, FilesystemError
from cinit.core.models.action import Action, Receipt
from cinit.core.models.options import ResolvedConfiguration
from cinit.core.models.template import GeneratedFile
from cinit.core.services.flags import compiler_command, sanitizer_warning
from cinit.core.services.generators.compile_flags import generate_compile_flags
from cinit.core.services.generators.makefile import generate_makefile
from cinit.core.services.generators.project_files import (
    generate_clang_tidy,
    generate_gitignore,
    generate_main_source,
    generate_readme,
    generate_test_files,
)

logger = logging.getLogger(__name__)

PROJECT_DIRS = ("src", "include", "target")
TESTS_DIR = "tests"
GIT_DIR = ".git"
INITIAL_COMMIT_MESSAGE = "init"


@dataclass
class ScaffoldPlan:
    """Everything a run will create, computed before any I/O."""

    config: ResolvedConfiguration
    compiler_command: str
    directories: list[str] = field(default_factory=list)
    files: list[GeneratedFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def file_paths(self) -> list[str]:
        return [f.path for f in self.files]

    def get(self, path: str) -> GeneratedFile | None:
        return next((f for f in self.files if f.path == path), None)

    def to_dict(self) -> dict:
        return {
            "compiler_command": self.compiler_command,
            "directories": self.directories,
            "files": [{"path": f.path, "reason": f.reason} for f in self.files],
            "warnings": self.warnings,
        }


@dataclass
class ScaffoldOutcome:
    """What execution actually did."""

    directories_created: list[str] = field(default_factory=list)
    files_written: list[str] = field(default_factory=list)
    git_initialized: bool = False
    committed: bool = False

    def to_dict(self) -> dict:
        return {
            "directories_created": self.directories_created,
            "files_written": self.files_written,
            "git_initialized": self.git_initialized,
            "committed": self.committed,
        }


def plan_scaffold(
    config: ResolvedConfiguration,
    assets: AssetRegistry | None = None,
    command: str | None = None,
) -> ScaffoldPlan:
    """Compute the directories and files for ``config``.

    Args:
        config: Resolved configuration.
        assets: Template source (default: bundled assets).
        command: Compiler invocation name; looked up on PATH when None.
    """
    assets = assets or AssetRegistry()
    command = command or compiler_command(config.cc)

    directories = list(PROJECT_DIRS)
    files: list[GeneratedFile] = []

    if not config.no_hello:
        files.append(generate_main_source(config, assets))

    if config.generate_tests:
        directories.append(TESTS_DIR)
        files.extend(generate_test_files(assets))

    files.append(generate_makefile(config, command, assets))
    files.extend(generate_compile_flags(config))
    files.append(generate_clang_tidy(config, assets))
    files.append(generate_readme(config, assets))

    warnings = []
    warning = sanitizer_warning(command)
    if warning:
        warnings.append(warning)

    return ScaffoldPlan(
        config=config,
        compiler_command=command,
        directories=directories,
        files=files,
        warnings=warnings,
    )


def check_target(config: ResolvedConfiguration) -> None:
    """Refuse a non-empty target directory unless force-overwrite is set.

    Raises:
        DirectoryNotEmptyError: Target has content and force is off.
    """
    if is_dir_nonempty(config.target_dir) and not config.force:
        raise DirectoryNotEmptyError(config.path)


class Scaffolder:
    """Executes a ScaffoldPlan through the adapter registry."""

    def __init__(self, registry: AdapterRegistry):
        self.registry = registry

    # ── Adapter helpers ─────────────────────────────────────────

    def _fs(self, action_id: str, **params) -> Receipt:
        return self.registry.execute_action(Action(id=action_id, adapter="filesystem", params=params))

    def _mkdir(self, path: str) -> None:
        receipt = self._fs(f"mkdir:{path}", operation="mkdir", path=path)
        if receipt.failed:
            raise FilesystemError("create", path, receipt.error)

    def _write(self, generated: GeneratedFile) -> None:
        receipt = self._fs(
            f"write:{generated.path}",
            operation="write",
            path=generated.path,
            content=generated.content,
        )
        if receipt.failed:
            raise FilesystemError("write", generated.path, receipt.error)
        logger.debug("Wrote %s (%s)", generated.path, generated.reason)

    def _exists(self, path: str) -> bool:
        receipt = self._fs(f"exists:{path}", operation="exists", path=path)
        return receipt.ok and bool(receipt.metadata.get("exists"))

    def _git(self, action_id: str, **params) -> Receipt:
        return self.registry.execute_action(Action(id=action_id, adapter="git", params=params))

    # ── Steps ───────────────────────────────────────────────────

    def _prepare_target(self, config: ResolvedConfiguration) -> None:
        if not config.is_current_dir:
            self._mkdir(config.path)

        check_target(config)

        try:
            os.chdir(config.target_dir)
        except OSError as e:
            raise FilesystemError("enter", config.path, e.strerror or e) from e
        logger.debug("Working directory is now %s", Path.cwd())

    def _init_git(self, config: ResolvedConfiguration, outcome: ScaffoldOutcome) -> None:
        if config.no_git or self._exists(GIT_DIR):
            return

        init = self._git("git-init", operation="init")
        if init.failed:
            logger.info("git init failed, skipping git setup: %s", init.error)
            return
        outcome.git_initialized = True

        gitignore = generate_gitignore()
        self._write(gitignore)
        outcome.files_written.append(gitignore.path)

        if config.no_commit:
            return
        commit = self._git("git-commit", operation="commit", message=INITIAL_COMMIT_MESSAGE)
        if commit.failed:
            logger.info("Initial commit failed: %s", commit.error)
            return
        outcome.committed = True

    def execute(self, plan: ScaffoldPlan) -> ScaffoldOutcome:
        """Materialize ``plan``.

        Raises:
            DirectoryNotEmptyError: Target has content and force is off.
            FilesystemError: A directory or file could not be created.
        """
        config = plan.config
        outcome = ScaffoldOutcome()

        self._prepare_target(config)

        for directory in plan.directories:
            self._mkdir(directory)
            outcome.directories_created.append(directory)

        for generated in plan.files:
            self._write(generated)
            outcome.files_written.append(generated.path)

        self._init_git(config, outcome)

        logger.info(
            "Scaffolded %s: %d files, git=%s, commit=%s",
            config.name,
            len(outcome.files_written),
            outcome.git_initialized,
            outcome.committed,
        )
        return outcome
