"""
People recorded under a single word, e.g. ``Madonna`` or ``/Smith/``.
"""

from __future__ import annotations

from typing import List

from family_tree_utils.analyzers.report import format_report
from family_tree_utils.logging import get_logger
from family_tree_utils.normalization import format_name
from family_tree_utils.registry.entities import GedcomGraph

log = get_logger(__name__)

TITLE = "Persons with One Name Only"
EMPTY_MESSAGE = "No persons with only one name were found in the GEDCOM file."


def find_one_name_individuals(graph: GedcomGraph) -> List[str]:
    results: List[str] = []

    for person in graph.individuals.values():
        for full_name in person.all_names:
            name = format_name(full_name)
            if name and " " not in name:
                results.append(f"{person.id}: {name}")
                break  # once per person

    return results


def analyze_one_name(graph: GedcomGraph) -> str:
    results = find_one_name_individuals(graph)
    log.debug("One-name check: %d of %d individuals", len(results), len(graph.individuals))
    return format_report(TITLE, results, EMPTY_MESSAGE)
