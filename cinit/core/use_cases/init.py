"""
Init use case — resolve the configuration and scaffold a project.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cinit.adapters.registry import AdapterRegistry, default_registry
from cinit.core.config.loader import UserDefaults
from cinit.core.data import AssetRegistry
from cinit.core.errors import ScaffoldError, UserCancelled
from cinit.core.models.options import ResolvedConfiguration, ScaffoldOptions
from cinit.core.services.input_source import InputSource, open_input_source
from cinit.core.services.resolver import PrecedenceResolver
from cinit.core.services.scaffold import (
    ScaffoldOutcome,
    ScaffoldPlan,
    Scaffolder,
    check_target,
    plan_scaffold,
)

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """Result of one c-init run."""

    config: ResolvedConfiguration | None = None
    plan: ScaffoldPlan | None = None
    outcome: ScaffoldOutcome | None = None
    dry_run: bool = False
    cancelled: bool = False
    error: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and not self.cancelled

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "dry_run": self.dry_run,
            "cancelled": self.cancelled,
            "error": self.error,
            "config": self.config.model_dump(mode="json") if self.config else None,
            "plan": self.plan.to_dict() if self.plan else None,
            "outcome": self.outcome.to_dict() if self.outcome else None,
            "warnings": self.warnings,
        }


def init_project(
    options: ScaffoldOptions,
    defaults: UserDefaults | None = None,
    input_source: InputSource | None = None,
    registry: AdapterRegistry | None = None,
    assets: AssetRegistry | None = None,
    dry_run: bool = False,
    prompts_to_stderr: bool = False,
) -> InitResult:
    """Resolve options and scaffold the project.

    Args:
        options: Explicit command-line input.
        defaults: User defaults (built-ins when None).
        input_source: Wizard input. When None and ``options.interactive``
            is set, one is opened on stdin.
        registry: Adapters for side effects (real ones when None).
        assets: Template source (bundled assets when None).
        dry_run: Resolve and plan only; touch nothing. A non-empty
            target without force still fails, as the real run would.
        prompts_to_stderr: Send wizard prompts to stderr, keeping stdout
            for machine-readable output.

    Returns:
        InitResult. Fatal conditions are reported in ``error`` or
        ``cancelled``, never raised.
    """
    result = InitResult(dry_run=dry_run)
    defaults = defaults or UserDefaults()

    try:
        if options.interactive and input_source is None:
            color = (options.color or defaults.color).click_color
            input_source = open_input_source(color=color, err=prompts_to_stderr)

        resolver = PrecedenceResolver(
            options,
            defaults=defaults,
            input_source=input_source if options.interactive else None,
        )
        result.config = resolver.resolve()

        result.plan = plan_scaffold(result.config, assets)
        result.warnings = list(result.plan.warnings)

        if dry_run:
            check_target(result.config)
            logger.info("Dry run: %d files planned", len(result.plan.files))
            return result

        scaffolder = Scaffolder(registry or default_registry())
        result.outcome = scaffolder.execute(result.plan)

    except UserCancelled:
        logger.info("User declined overwrite")
        result.cancelled = True
    except ScaffoldError as e:
        logger.debug("Scaffold aborted: %s", e)
        result.error = str(e)

    return result
