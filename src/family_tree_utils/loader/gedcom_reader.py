# src/family_tree_utils/loader/gedcom_reader.py

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from family_tree_utils.core.exceptions import GedcomReadError
from family_tree_utils.logging import get_logger
from family_tree_utils.registry.entities import (
    FamilyRecord,
    GedcomGraph,
    IndividualRecord,
)

log = get_logger(__name__)

RECORD_NONE = None
RECORD_INDI = "INDI"
RECORD_FAM = "FAM"


def _xref_between_ats(line: str) -> Optional[str]:
    """
    Return the text between the first pair of ``@`` on the line.

    ``"1 HUSB @I1@"`` -> ``"I1"``. Lines without two ``@`` (or with an
    empty pointer) give None.
    """
    parts = line.split("@")
    if len(parts) < 3 or not parts[1]:
        return None
    return parts[1]


def _record_id(line: str) -> Optional[str]:
    """Second space-separated field of a level-0 line, ``@`` removed."""
    parts = line.split(" ")
    if len(parts) < 2:
        return None
    return parts[1].replace("@", "")


def _surname_of(full_name: str) -> Optional[str]:
    first = full_name.find("/")
    last = full_name.rfind("/")
    if first < 0 or last <= first:
        return None
    surname = full_name[first + 1 : last].strip()
    return surname or None


class GedcomReader:
    """
    Line-at-a-time state machine that builds a :class:`GedcomGraph`.

    Only level-0 INDI/FAM records and their level-1 NAME, SEX, HUSB,
    WIFE and CHIL lines are read. Anything it cannot interpret is
    skipped; a reader never raises on content.
    """

    def __init__(self) -> None:
        self.graph = GedcomGraph()
        self.record_type: Optional[str] = RECORD_NONE
        self.individual: Optional[IndividualRecord] = None
        self.family: Optional[FamilyRecord] = None
        self.skipped_lines = 0
        self.lineno = 0

    # ------------------------------------------------------------------
    # Record starts
    # ------------------------------------------------------------------

    def _start_individual(self, line: str) -> None:
        record_id = _record_id(line)
        if record_id is None:
            self._end_record()
            self._skip(line, "INDI record without id")
            return

        self.individual = IndividualRecord(id=record_id)
        self.graph.register_individual(self.individual)
        self.record_type = RECORD_INDI
        self.family = None

    def _start_family(self, line: str) -> None:
        record_id = _record_id(line)
        if record_id is None:
            self._end_record()
            self._skip(line, "FAM record without id")
            return

        self.family = FamilyRecord(id=record_id)
        self.graph.register_family(self.family)
        self.record_type = RECORD_FAM
        self.individual = None

    def _end_record(self) -> None:
        self.record_type = RECORD_NONE
        self.individual = None
        self.family = None

    # ------------------------------------------------------------------
    # Level-1 lines
    # ------------------------------------------------------------------

    def _read_individual_line(self, line: str) -> None:
        indi = self.individual
        if line.startswith("1 NAME"):
            full_name = line[7:].strip()
            indi.all_names.append(full_name)

            surname = _surname_of(full_name)
            if surname is not None:
                indi.last_names.append(surname)

        elif line.startswith("1 SEX"):
            indi.sex = line[6:].strip()

    def _read_family_line(self, line: str) -> None:
        fam = self.family
        for tag in ("1 HUSB", "1 WIFE", "1 CHIL"):
            if line.startswith(tag):
                break
        else:
            return

        xref = _xref_between_ats(line)
        if xref is None:
            self._skip(line, "family pointer without @xref@")
            return

        if tag == "1 HUSB":
            fam.husband_id = xref
        elif tag == "1 WIFE":
            fam.wife_id = xref
        else:
            fam.children_ids.append(xref)

    def _skip(self, line: str, reason: str) -> None:
        self.skipped_lines += 1
        log.debug("Line %d skipped (%s): %r", self.lineno, reason, line)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def feed(self, raw_line: str) -> None:
        self.lineno += 1
        line = raw_line.strip()

        if line.startswith("0"):
            if "INDI" in line:
                self._start_individual(line)
            elif "FAM" in line:
                self._start_family(line)
            # HEAD, SUBM, REPO, TRLR ... leave the current record open.
            return

        if self.record_type == RECORD_INDI and self.individual is not None:
            self._read_individual_line(line)
        elif self.record_type == RECORD_FAM and self.family is not None:
            self._read_family_line(line)

    def feed_all(self, lines: Iterable[str]) -> GedcomGraph:
        for line in lines:
            self.feed(line)
        return self.graph


def iter_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Yield every line of a GEDCOM file (line endings removed).

    The file is decoded as UTF-8; a leading byte-order mark is dropped and
    undecodable bytes are replaced rather than raising.

    Raises:
        GedcomReadError: if the file cannot be opened or read.
    """
    file_path = Path(path)

    try:
        with file_path.open("r", encoding="utf-8-sig", errors="replace") as f:
            for raw_line in f:
                yield raw_line.rstrip("\r\n")
    except OSError as exc:
        raise GedcomReadError(file_path, exc) from exc


def parse_lines(lines: Iterable[str]) -> GedcomGraph:
    """Build a graph from already-read GEDCOM lines."""
    return GedcomReader().feed_all(lines)


def parse_gedcom(path: Union[str, Path]) -> GedcomGraph:
    """
    Parse a GEDCOM file into a :class:`GedcomGraph`.

    Args:
        path: Path to the GEDCOM file.

    Returns:
        The fully populated graph.

    Raises:
        GedcomReadError: if the file cannot be opened or read. No partial
            graph is returned in that case.
    """
    # Read everything first so a failing read never yields a half-built graph.
    lines: List[str] = list(iter_lines(path))

    reader = GedcomReader()
    graph = reader.feed_all(lines)

    log.info(
        "Parsed %s: %d individuals, %d families (%d lines skipped)",
        path,
        len(graph.individuals),
        len(graph.families),
        reader.skipped_lines,
    )
    return graph
