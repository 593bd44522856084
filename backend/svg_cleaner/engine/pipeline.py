"""Pipeline orchestrator — runs the cleaning passes in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svg_cleaner.engine.config import PipelineConfig
from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import PassRegistry, get_registry

logger = logging.getLogger(__name__)

_PASSES_PACKAGE = "svg_cleaner.engine.passes"


def register_passes() -> None:
    """Import every pass module so the @cleaning_pass decorators fire."""
    package = importlib.import_module(_PASSES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_PASSES_PACKAGE}.{module_name}")


class Pipeline:
    """Orchestrates the cleaning passes."""

    def __init__(
        self,
        registry: PassRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: CleanContext) -> CleanContext:
        """Run every registered pass on the given context.

        A failing pass aborts the run; the exception propagates to the caller.
        """
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.info("Pipeline: %d passes queued", len(ordered))

        for spec in ordered:
            self._run_pass(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d passes, %d changes in %.0fms",
            len(ctx.completed_passes),
            ctx.total_changes,
            total,
        )
        return ctx

    def _run_pass(self, ctx: CleanContext, spec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            logger.warning("  %s FAILED: %s", spec.id, e)
            raise
        ctx.completed_passes.append(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug(
            "  %s completed in %.1fms (%d changes)",
            spec.id,
            elapsed,
            ctx.stats.get(spec.id, 0),
        )


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance with every pass registered."""
    register_passes()
    return Pipeline(config=config)
