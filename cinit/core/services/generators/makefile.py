"""
Makefile generator — the build-system file for the new project.

Stamps the compiler invocation name, the normalized binary name and the
phony target list into the template, then keeps or drops the test block.
"""

from __future__ import annotations

from cinit.core.data import AssetRegistry
from cinit.core.models.options import ResolvedConfiguration
from cinit.core.models.template import GeneratedFile
from cinit.core.services.templating import render_makefile


def generate_makefile(
    config: ResolvedConfiguration,
    compiler_command: str,
    assets: AssetRegistry,
) -> GeneratedFile:
    """Generate the project Makefile.

    Args:
        config: Resolved configuration.
        compiler_command: Invocation name recorded as ``CC``.
        assets: Source of the Makefile template.

    Returns:
        GeneratedFile for Makefile.
    """
    content = render_makefile(
        assets.makefile_template,
        compiler_command=compiler_command,
        name=config.normalized_name,
        generate_tests=config.generate_tests,
    )
    mode = "with tests" if config.generate_tests else "without tests"
    return GeneratedFile(
        path="Makefile",
        content=content,
        reason=f"Makefile for {compiler_command} ({mode})",
    )
