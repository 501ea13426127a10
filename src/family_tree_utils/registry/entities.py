from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class IndividualRecord:
    """
    One INDI record.

    ``all_names`` holds every NAME value verbatim, in file order.
    ``last_names`` holds the text between the first and last ``/`` of each
    name that has one; it can be shorter than ``all_names``.
    """
    id: str
    all_names: List[str] = field(default_factory=list)
    last_names: List[str] = field(default_factory=list)
    sex: Optional[str] = None


@dataclass(slots=True)
class FamilyRecord:
    """
    One FAM record. Pointers are kept as bare ids and may not resolve
    to any individual in the graph.
    """
    id: str
    husband_id: Optional[str] = None
    wife_id: Optional[str] = None
    children_ids: List[str] = field(default_factory=list)


# -----------------------------
# Graph
# -----------------------------

@dataclass(slots=True)
class GedcomGraph:
    """
    Parse result. ``individuals`` is keyed by id (iteration follows the
    order each id was first seen); ``families`` is in file order.
    """
    individuals: Dict[str, IndividualRecord] = field(default_factory=dict)
    families: List[FamilyRecord] = field(default_factory=list)

    def register_individual(self, individual: IndividualRecord) -> None:
        # Last record wins for a repeated id.
        self.individuals[individual.id] = individual

    def register_family(self, family: FamilyRecord) -> None:
        self.families.append(family)

    def get_individual(self, individual_id: Optional[str]) -> Optional[IndividualRecord]:
        if not individual_id:
            return None
        return self.individuals.get(individual_id)
