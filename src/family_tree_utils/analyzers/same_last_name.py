"""
Wives whose every recorded surname is their husband's surname.

Usually a sign that the maiden name was never entered.
"""

from __future__ import annotations

from typing import List

from family_tree_utils.analyzers.report import format_report
from family_tree_utils.logging import get_logger
from family_tree_utils.normalization import format_name, format_names
from family_tree_utils.registry.entities import GedcomGraph

log = get_logger(__name__)

TITLE = "Women with Same Last Name as Husband (All Names Match)"
EMPTY_MESSAGE = "No women found where all their last names match their husband's last name."


def find_wives_with_husband_surname(graph: GedcomGraph) -> List[str]:
    results: List[str] = []

    for family in graph.families:
        husband = graph.get_individual(family.husband_id)
        wife = graph.get_individual(family.wife_id)
        if husband is None or wife is None:
            continue

        if not husband.last_names or not wife.last_names:
            continue

        husband_last_name = husband.last_names[0].lower()
        if all(ln.lower() == husband_last_name for ln in wife.last_names):
            husband_display = format_name(husband.all_names[0])
            results.append(
                f"{wife.id}: {format_names(wife.all_names)} "
                f"(married to {husband.id}: {husband_display})"
            )

    return results


def analyze_same_last_name(graph: GedcomGraph) -> str:
    results = find_wives_with_husband_surname(graph)
    log.debug("Same-last-name check: %d of %d families", len(results), len(graph.families))
    return format_report(TITLE, results, EMPTY_MESSAGE)
