from __future__ import annotations

from pathlib import Path
from typing import Union


class AnalysisError(Exception):
    """Base exception for family_tree_utils failures."""


class GedcomReadError(AnalysisError, OSError):
    """Raised when a GEDCOM file cannot be opened or read."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot read GEDCOM file {self.path}: {cause}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownAnalyzerError(AnalysisError, KeyError):
    """Raised when an analyzer name is not registered."""

    def __str__(self) -> str:
        return f"Unknown analyzer: {self.args[0]!r}"


class PipelineExecutionError(AnalysisError):
    """Raised when the analysis pipeline fails unexpectedly."""
