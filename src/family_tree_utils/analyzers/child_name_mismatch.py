"""
Children whose surname is neither their father's nor a Soundex variant of it.

``Smyth`` under a ``Smith`` father is accepted (both ``S530``);
``Jones`` is reported.
"""

from __future__ import annotations

from typing import List, Sequence

from family_tree_utils.analyzers.report import format_report
from family_tree_utils.logging import get_logger
from family_tree_utils.normalization import format_name, format_names
from family_tree_utils.phonetics import soundex_equal
from family_tree_utils.registry.entities import GedcomGraph

log = get_logger(__name__)

TITLE = "Children with Last Name Different from Father"
EMPTY_MESSAGE = "No children found with last names different from their father."


def _matches_father(child_last_names: Sequence[str], father_last_name: str) -> bool:
    father_lower = father_last_name.lower()
    return any(
        ln.lower() == father_lower or soundex_equal(ln, father_last_name)
        for ln in child_last_names
    )


def find_children_with_different_surname(graph: GedcomGraph) -> List[str]:
    results: List[str] = []

    for family in graph.families:
        father = graph.get_individual(family.husband_id)
        if father is None or not father.last_names:
            continue

        father_last_name = father.last_names[0]
        father_display = format_name(father.all_names[0])

        for child_id in family.children_ids:
            child = graph.get_individual(child_id)
            if child is None or not child.last_names:
                continue

            if not _matches_father(child.last_names, father_last_name):
                results.append(
                    f"{child.id}: {format_names(child.all_names)} "
                    f"(father: {father.id}: {father_display})"
                )

    return results


def analyze_child_name_mismatch(graph: GedcomGraph) -> str:
    results = find_children_with_different_surname(graph)
    log.debug("Child-name check: %d mismatches", len(results))
    return format_report(TITLE, results, EMPTY_MESSAGE)
