"""
Display form of GEDCOM NAME values.

``John /Smith/`` -> ``John Smith``: surname slashes become spaces, the
result is stripped and runs of spaces collapse to one.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

_MULTI_SPACE = re.compile(r" {2,}")


def format_name(raw: Optional[str]) -> str:
    if not raw:
        return ""
    return _MULTI_SPACE.sub(" ", raw.replace("/", " ").strip())


def format_names(raw_names: Iterable[str], sep: str = ", ") -> str:
    """Format every name and join them, e.g. for people recorded under several names."""
    return sep.join(format_name(n) for n in raw_names)


def name_words(raw: Optional[str]) -> List[str]:
    return format_name(raw).split()
