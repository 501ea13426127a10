"""
In-memory family graph produced by the GEDCOM loader.
"""

from __future__ import annotations

from .entities import FamilyRecord, GedcomGraph, IndividualRecord

__all__ = [
    "FamilyRecord",
    "GedcomGraph",
    "IndividualRecord",
]
