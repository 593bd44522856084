"""CleanContext — the single mutable state object flowing through all passes.

One context per clean() call; nothing in it is shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svg_cleaner.engine.config import PipelineConfig
from svg_cleaner.svg.document import SvgDocument


@dataclass
class CleanContext:
    """Shared state flowing through the cleaning pipeline."""

    document: SvgDocument
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Pipeline metadata ---
    completed_passes: list[str] = field(default_factory=list)
    # Number of nodes/attributes each pass changed, keyed by pass id
    stats: dict[str, int] = field(default_factory=dict)

    def record(self, pass_id: str, changes: int = 1) -> None:
        self.stats[pass_id] = self.stats.get(pass_id, 0) + changes

    @property
    def total_changes(self) -> int:
        return sum(self.stats.values())
