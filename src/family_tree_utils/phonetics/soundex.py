"""
American Soundex.

Codes are a first letter plus three digits, e.g. ``Robert`` -> ``R163``.
Letters with the same digit collapse even when a vowel (or H/W/Y) sits
between them: ``Ashcraft`` is ``A261`` and ``Tymczak`` is ``T520``.
"""

from __future__ import annotations

from typing import Dict, Optional

EMPTY_CODE = "0000"
CODE_LENGTH = 4

_GROUPS = {
    "BFPV": "1",
    "CGJKQSXZ": "2",
    "DT": "3",
    "L": "4",
    "MN": "5",
    "R": "6",
}

SOUNDEX_TABLE: Dict[str, str] = {
    letter: digit for letters, digit in _GROUPS.items() for letter in letters
}


def _code_for(letter: str) -> str:
    # A, E, I, O, U, H, W, Y and non-Latin letters carry no digit.
    return SOUNDEX_TABLE.get(letter, "0")


def soundex(word: Optional[str]) -> str:
    """Return the four-character Soundex code of ``word`` (``"0000"`` if it has no letters)."""
    if not word or not word.strip():
        return EMPTY_CODE

    letters = [c for c in word.upper() if c.isalpha()]
    if not letters:
        return EMPTY_CODE

    code = [letters[0]]
    previous = _code_for(letters[0])

    for letter in letters[1:]:
        if len(code) >= CODE_LENGTH:
            break

        digit = _code_for(letter)
        if digit == "0":
            continue

        if digit != previous:
            code.append(digit)
            previous = digit

    return "".join(code).ljust(CODE_LENGTH, "0")


def soundex_equal(a: Optional[str], b: Optional[str]) -> bool:
    return soundex(a) == soundex(b)
