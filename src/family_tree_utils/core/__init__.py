"""
Orchestration layer: analysis context, pipeline runner and exception types.

To avoid circular imports (the loader raises core exceptions, the pipeline
calls the loader), this __init__ does not import the pipeline:

    from family_tree_utils.core.pipeline import Pipeline
"""

from __future__ import annotations

from .context import AnalysisContext
from .exceptions import (
    AnalysisError,
    GedcomReadError,
    PipelineExecutionError,
    UnknownAnalyzerError,
)

__all__ = [
    "AnalysisContext",
    "AnalysisError",
    "GedcomReadError",
    "PipelineExecutionError",
    "UnknownAnalyzerError",
]
