"""
c-init — CLI entrypoint.

Usage:
    c-init [OPTIONS] [PATH]
    c-init --cc gcc -s strictest my-project
    c-init -i
    python -m cinit.main --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from cinit import __version__
from cinit.core.models.options import ColorMode, Compiler, ScaffoldOptions, Strictness
from cinit.core.observability.logging_config import resolve_level, setup_logging

_COMPILERS = [c.value for c in Compiler]
_STRICTNESS = [s.value for s in Strictness]
_COLORS = [c.value for c in ColorMode]


def _flag(value: bool) -> bool | None:
    """Boolean flags count as explicit input only when given."""
    return True if value else None


def _error(message: str, color: bool | None) -> None:
    click.echo(click.style("Error:", fg="red") + f" {message}", err=True, color=color)


def _warn(message: str, color: bool | None) -> None:
    click.echo(
        click.style("Warning:", fg="yellow") + " " + click.style(message, fg="bright_black"),
        err=True,
        color=color,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="c-init")
@click.argument("path", required=False)
@click.option("--name", default=None, help="Project name (defaults to directory name).")
@click.option("--cc", type=click.Choice(_COMPILERS), default=None, help="Choose compiler.")
@click.option(
    "-s", "--strictness", type=click.Choice(_STRICTNESS), default=None,
    help="Compiler warning strictness (default: strict).",
)
@click.option(
    "--linter-strictness", type=click.Choice(_STRICTNESS), default=None,
    help="clang-tidy strictness (default: same as --strictness).",
)
@click.option("--color", type=click.Choice(_COLORS), default=None, help="Color output (default: auto).")
@click.option("-f", "--force", is_flag=True, help="Allow non-empty directory.")
@click.option("--no-git", is_flag=True, help="Skip git init and .gitignore.")
@click.option("--no-commit", is_flag=True, help="Skip the initial git commit.")
@click.option("--no-hello", is_flag=True, help="Skip generating src/main.c.")
@click.option("--no-tests", is_flag=True, help="Skip generating tests and the test harness.")
@click.option("-i", "--interactive", is_flag=True, help="Run interactive wizard.")
@click.option("--dry-run", is_flag=True, help="Show what would be created without writing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a defaults file (default: ~/.config/c-init/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    name: str | None,
    cc: str | None,
    strictness: str | None,
    linter_strictness: str | None,
    color: str | None,
    force: bool,
    no_git: bool,
    no_commit: bool,
    no_hello: bool,
    no_tests: bool,
    interactive: bool,
    dry_run: bool,
    as_json: bool,
    verbose: bool,
    debug: bool,
    config_path: Path | None,
) -> None:
    """c-init — scaffold a C project with a Makefile, compiler flags and clang-tidy config.

    PATH is the project directory (default: current directory).
    `c-init help` shows this message.
    """
    # `help` behaves like --help unless a name was given explicitly
    if path == "help" and name is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug, verbose, os.environ.get("CINIT_LOG_LEVEL")),
        log_file=os.environ.get("CINIT_LOG_FILE"),
        log_file_level=os.environ.get("CINIT_LOG_FILE_LEVEL"),
    )

    from cinit.core.config.loader import ConfigError, load_defaults
    from cinit.core.use_cases.init import init_project

    early_color = ColorMode(color).click_color if color else None

    try:
        defaults = load_defaults(config_path)
    except ConfigError as e:
        _error(str(e), early_color)
        sys.exit(1)

    options = ScaffoldOptions(
        name=name,
        path=path,
        cc=cc,
        strictness=strictness,
        linter_strictness=linter_strictness,
        color=color,
        force=_flag(force),
        no_git=_flag(no_git),
        no_commit=_flag(no_commit),
        no_hello=_flag(no_hello),
        no_tests=_flag(no_tests),
        interactive=interactive,
    )

    result = init_project(
        options, defaults=defaults, dry_run=dry_run, prompts_to_stderr=as_json
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    out_color = result.config.color.click_color if result.config else early_color

    if result.cancelled:
        click.echo("Exiting...")
        sys.exit(1)

    if result.error:
        _error(result.error, out_color)
        sys.exit(1)

    config = result.config
    plan = result.plan
    assert config is not None and plan is not None  # guaranteed after error check

    if dry_run:
        click.secho(
            f"[dry-run] Would create project '{config.name}' at {config.path} "
            f"(using {plan.compiler_command})",
            fg="cyan",
            color=out_color,
        )
        for directory in plan.directories:
            click.echo(f"  {directory}/")
        for generated in plan.files:
            click.echo(
                f"  {generated.path:<26}" + click.style(f"# {generated.reason}", fg="bright_black"),
                color=out_color,
            )
        if not config.no_git:
            click.echo("  .gitignore                " + click.style("# git init", fg="bright_black"),
                       color=out_color)
    else:
        _print_summary(config.name, config.path, plan.compiler_command, config.generate_tests,
                       out_color)

    for warning in result.warnings:
        _warn(warning, out_color)


def _print_summary(
    name: str, path: str, command: str, with_tests: bool, color: bool | None
) -> None:
    def muted(text: str) -> str:
        return click.style(text, fg="bright_black")

    click.echo(
        click.style("Created", fg="green") + f" project '{name}' at {path} (using {command})",
        color=color,
    )
    click.echo()
    click.echo("Next steps:")
    steps = [
        ("make", "# debug build"),
        ("make run", "# build+run"),
        ("make watch", "# run in watch mode"),
    ]
    if with_tests:
        steps.append(("make test", "# build and run tests"))
    steps.append(("make release", "# release build"))
    for command_line, note in steps:
        click.echo(f"  {command_line:<12} {muted(note)}", color=color)
    click.echo("\nHappy Hacking!")


if __name__ == "__main__":
    cli()
