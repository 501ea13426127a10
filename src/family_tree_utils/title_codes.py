"""
Configured title codes (``Dr.``, ``Rev.`` ...) used by the title analyzer.

The list lives in a plain text file, one code per line; blank lines and
lines starting with ``#`` are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from family_tree_utils.config import get_config
from family_tree_utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_TITLE_CODES_TEMPLATE = (
    "# Title Codes - One per line\n"
    "# Examples:\n"
    "Dr.\n"
    "Mr.\n"
    "Mrs.\n"
    "Ms.\n"
    "Prof.\n"
    "Rev.\n"
)


def default_title_codes_path() -> Path:
    return get_config().title_codes_path


def parse_title_codes(lines: Iterable[str]) -> List[str]:
    codes: List[str] = []
    for line in lines:
        trimmed = line.strip()
        if trimmed and not trimmed.startswith("#"):
            codes.append(trimmed)
    return codes


def load_title_codes(path: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Read title codes in file order.

    A missing file gives an empty list; the title analyzer reports that
    as "no title codes configured".
    """
    codes_path = Path(path) if path is not None else default_title_codes_path()

    if not codes_path.is_file():
        log.info("Title codes file not found: %s", codes_path)
        return []

    with codes_path.open("r", encoding="utf-8-sig") as f:
        codes = parse_title_codes(f)

    log.debug("Loaded %d title codes from %s", len(codes), codes_path)
    return codes


def ensure_title_codes_file(path: Optional[Union[str, Path]] = None) -> Path:
    """Create the title codes file with the default examples if it does not exist yet."""
    codes_path = Path(path) if path is not None else default_title_codes_path()

    if not codes_path.exists():
        codes_path.parent.mkdir(parents=True, exist_ok=True)
        codes_path.write_text(DEFAULT_TITLE_CODES_TEMPLATE, encoding="utf-8")
        log.info("Created default title codes file: %s", codes_path)

    return codes_path
