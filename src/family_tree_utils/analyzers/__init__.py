"""
Name analyzers over a parsed :class:`~family_tree_utils.registry.GedcomGraph`.

Every analyzer is a pure function returning report text. ``ANALYZERS``
maps the command-line name of each one to its :class:`AnalyzerSpec`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from family_tree_utils.core.exceptions import UnknownAnalyzerError
from family_tree_utils.registry.entities import GedcomGraph

from .child_name_mismatch import analyze_child_name_mismatch
from .one_name import analyze_one_name
from .report import format_report
from .same_last_name import analyze_same_last_name
from .title import analyze_titles


@dataclass(frozen=True)
class AnalyzerSpec:
    name: str
    label: str
    func: Callable[..., str]
    needs_title_codes: bool = False


ANALYZERS: Dict[str, AnalyzerSpec] = {
    spec.name: spec
    for spec in (
        AnalyzerSpec("one-name", "One Name", analyze_one_name),
        AnalyzerSpec("title", "Title", analyze_titles, needs_title_codes=True),
        AnalyzerSpec("same-last-name", "Same Last Name", analyze_same_last_name),
        AnalyzerSpec("child-name-mismatch", "Child Name Mismatch", analyze_child_name_mismatch),
    )
}


def run_analyzer(
    name: Optional[str],
    graph: GedcomGraph,
    title_codes: Optional[Sequence[str]] = None,
) -> str:
    """Run the analyzer registered as ``name`` and return its report."""
    spec = ANALYZERS.get(name or "")
    if spec is None:
        raise UnknownAnalyzerError(name)

    if spec.needs_title_codes:
        return spec.func(graph, list(title_codes or []))
    return spec.func(graph)


__all__ = [
    "ANALYZERS",
    "AnalyzerSpec",
    "analyze_child_name_mismatch",
    "analyze_one_name",
    "analyze_same_last_name",
    "analyze_titles",
    "format_report",
    "run_analyzer",
]
