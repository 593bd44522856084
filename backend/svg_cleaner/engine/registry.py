"""Pass registry — every cleaning pass is a standalone function registered via decorator.

Usage:
    @cleaning_pass(id="P05", stage=Stage.STRUCTURE, dependencies=["P04"])
    def remove_hidden_elements(ctx: CleanContext) -> None:
        for el in ctx.document.elements():
            ...

Adding a new pass = creating one module under ``engine/passes`` with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svg_cleaner.engine.context import CleanContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    METADATA = 0
    STRUCTURE = 1
    ATTRIBUTES = 2
    REFERENCES = 3


@dataclass
class PassSpec:
    id: str
    stage: Stage
    fn: Callable[["CleanContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class PassRegistry:
    """Registry of cleaning passes, keyed by pass id."""

    def __init__(self) -> None:
        self._passes: dict[str, PassSpec] = {}

    def register(self, spec: PassSpec) -> None:
        if spec.id in self._passes:
            raise ValueError(f"Duplicate pass ID: {spec.id}")
        self._passes[spec.id] = spec
        logger.debug("Registered pass %s (%s)", spec.id, spec.stage.name)

    def resolve_order(self) -> list[PassSpec]:
        """Topological sort of every registered pass respecting dependencies."""
        pool = self._passes

        # Kahn's algorithm; ties broken by pass id so the order is stable
        in_degree: dict[str, int] = {pid: 0 for pid in pool}
        for pid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[pid] += 1

        queue = sorted([pid for pid, d in in_degree.items() if d == 0])
        ordered: list[PassSpec] = []

        while queue:
            pid = queue.pop(0)
            ordered.append(pool[pid])
            for other_id, other_spec in pool.items():
                if pid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._passes)


# Module-level singleton
_registry = PassRegistry()


def get_registry() -> PassRegistry:
    return _registry


def cleaning_pass(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a cleaning pass function."""

    def decorator(fn: Callable[["CleanContext"], None]):
        spec = PassSpec(
            id=id,
            stage=stage,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
