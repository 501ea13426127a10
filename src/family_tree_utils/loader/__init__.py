# src/family_tree_utils/loader/__init__.py

"""
Public interface for the GEDCOM loader.

Intended usage from other parts of the project and tests:

    from family_tree_utils.loader import (
        GedcomReader,
        iter_lines,
        parse_gedcom,
        parse_lines,
    )
"""

from __future__ import annotations
from .gedcom_reader import GedcomReader, iter_lines, parse_gedcom, parse_lines


__all__ = [
    "GedcomReader",
    "iter_lines",
    "parse_gedcom",
    "parse_lines",
]
