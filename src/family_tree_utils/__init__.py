"""
family_tree_utils

GEDCOM consistency checks: parse a GEDCOM file into an individual/family
graph and run name analyzers over it.
"""

__version__ = "0.1.0"
