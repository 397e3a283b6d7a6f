"""
Project file generators — starter source, tests, linter config, README, .gitignore.
"""

from __future__ import annotations

from cinit.core.data import AssetRegistry
from cinit.core.models.options import ResolvedConfiguration
from cinit.core.models.template import GeneratedFile
from cinit.core.services.templating import substitute

GITIGNORE_CONTENT = "target/\n"


def generate_main_source(config: ResolvedConfiguration, assets: AssetRegistry) -> GeneratedFile:
    content = substitute(assets.main_source_template, {"PROJECT_NAME": config.name})
    return GeneratedFile(path="src/main.c", content=content, reason="hello-world entry point")


def generate_test_files(assets: AssetRegistry) -> list[GeneratedFile]:
    """Vendored test harness header and one starter test (verbatim)."""
    return [
        GeneratedFile(
            path="tests/test-deps/testkit.h",
            content=assets.test_header,
            reason="vendored test harness",
        ),
        GeneratedFile(
            path="tests/test_basic.c",
            content=assets.test_source,
            reason="starter test",
        ),
    ]


def generate_clang_tidy(config: ResolvedConfiguration, assets: AssetRegistry) -> GeneratedFile:
    return GeneratedFile(
        path=".clang-tidy",
        content=assets.clang_tidy(config.linter_strictness),
        reason=f"{config.linter_strictness} clang-tidy checks",
    )


def generate_readme(config: ResolvedConfiguration, assets: AssetRegistry) -> GeneratedFile:
    content = substitute(assets.readme_template, {"PROJECT_NAME": config.name})
    return GeneratedFile(path="README.md", content=content, reason="project README")


def generate_gitignore() -> GeneratedFile:
    return GeneratedFile(path=".gitignore", content=GITIGNORE_CONTENT, reason="ignore build outputs")
