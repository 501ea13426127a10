from __future__ import annotations

from typing import Sequence


def format_report(title: str, results: Sequence[str], empty_message: str) -> str:
    """
    Render analyzer results as one text block.

    ``"<title> (<N> found):"``, a blank line, then one result per line
    (no trailing newline); ``empty_message`` when there are no results.
    """
    if not results:
        return empty_message
    return f"{title} ({len(results)} found):\n\n" + "\n".join(results)
