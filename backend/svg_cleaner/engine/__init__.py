"""SVG cleaning engine."""

from svg_cleaner.engine.cleaner import CleanResult, clean
from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.pipeline import Pipeline, create_pipeline
from svg_cleaner.engine.registry import Stage, cleaning_pass, get_registry

__all__ = [
    "clean",
    "CleanResult",
    "CleanContext",
    "Pipeline",
    "create_pipeline",
    "Stage",
    "cleaning_pass",
    "get_registry",
]
