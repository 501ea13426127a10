"""
Command-line interface for family_tree_utils (``ftu``).
"""
