"""
Logging package for ``family_tree_utils``.

Modules call ``get_logger(__name__)``; every logger hangs off the
``family_tree_utils`` base logger and shares its handlers.
"""

from .logger import enable_debug, get_logger

__all__ = [
    "enable_debug",
    "get_logger",
]
