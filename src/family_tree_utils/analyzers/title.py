"""
People whose names contain a configured title (``Dr.``, ``Rev.`` ...).

Titles match whole words only and ignore case: ``Dr.`` matches
``John /Smith/ DR.`` but not ``Drummond``.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from family_tree_utils.analyzers.report import format_report
from family_tree_utils.logging import get_logger
from family_tree_utils.normalization import format_name, name_words
from family_tree_utils.registry.entities import GedcomGraph

log = get_logger(__name__)

TITLE = "People with Titles in Their Names"
EMPTY_MESSAGE = "No people found with title codes in their names."
NO_TITLE_CODES_MESSAGE = "No title codes configured."


def _matching_title(words: Sequence[str], title_codes: Sequence[str]) -> Optional[str]:
    lower_words = {w.lower() for w in words}
    for title in title_codes:
        if title.lower() in lower_words:
            return title
    return None


def find_titled_individuals(graph: GedcomGraph, title_codes: Sequence[str]) -> List[str]:
    results: List[str] = []

    for person in graph.individuals.values():
        for full_name in person.all_names:
            name = format_name(full_name)
            title = _matching_title(name_words(full_name), title_codes)
            if title is not None:
                results.append(f"{person.id}: {name} (contains '{title}')")
                break  # once per person

    return results


def analyze_titles(graph: GedcomGraph, title_codes: Optional[Sequence[str]]) -> str:
    if not title_codes:
        log.warning("Title check requested with no title codes configured")
        return NO_TITLE_CODES_MESSAGE

    results = find_titled_individuals(graph, title_codes)
    log.debug("Title check: %d matches using %d title codes", len(results), len(title_codes))
    return format_report(TITLE, results, EMPTY_MESSAGE)
