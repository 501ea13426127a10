# tests/test_child_name_mismatch.py

from __future__ import annotations

from family_tree_utils.analyzers.child_name_mismatch import (
    EMPTY_MESSAGE,
    analyze_child_name_mismatch,
    find_children_with_different_surname,
)
from family_tree_utils.loader import parse_lines


def family_lines(children):
    """Father I1 John /Smith/ with the given (id, name) children in family F1."""
    lines = ["0 @I1@ INDI", "1 NAME John  /Smith/"]
    for child_id, names in children:
        lines.append(f"0 @{child_id}@ INDI")
        lines.extend(f"1 NAME {n}" for n in names)
    lines += ["0 @F1@ FAM", "1 HUSB @I1@"]
    lines += [f"1 CHIL @{child_id}@" for child_id, _ in children]
    return lines


def test_same_surname_is_not_reported():
    graph = parse_lines(family_lines([("I2", ["Tom /smith/"])]))
    assert find_children_with_different_surname(graph) == []


def test_soundex_variant_is_not_reported():
    graph = parse_lines(family_lines([("I2", ["Tom /Smyth/"])]))
    assert find_children_with_different_surname(graph) == []
    assert analyze_child_name_mismatch(graph) == EMPTY_MESSAGE


def test_different_surname_is_reported():
    graph = parse_lines(family_lines([("I2", ["Tom /Jones/"])]))
    assert analyze_child_name_mismatch(graph) == (
        "Children with Last Name Different from Father (1 found):\n\n"
        "I2: Tom Jones (father: I1: John Smith)"
    )


def test_any_matching_surname_is_enough():
    graph = parse_lines(family_lines([("I2", ["Tom /Jones/", "Tom /Smith/"])]))
    assert find_children_with_different_surname(graph) == []


def test_all_child_names_are_listed():
    graph = parse_lines(family_lines([("I2", ["Tom /Jones/", "Tommy /Brown/"])]))
    assert find_children_with_different_surname(graph) == [
        "I2: Tom Jones, Tommy Brown (father: I1: John Smith)"
    ]


def test_child_without_surname_or_record_is_skipped():
    lines = family_lines([("I2", ["Tom"])]) + ["1 CHIL @I404@"]
    graph = parse_lines(lines)
    assert find_children_with_different_surname(graph) == []


def test_duplicate_child_links_give_duplicate_lines():
    graph = parse_lines(family_lines([("I2", ["Tom /Jones/"]), ("I2", ["Tom /Jones/"])]))
    assert graph.families[0].children_ids == ["I2", "I2"]
    assert len(find_children_with_different_surname(graph)) == 2


def test_family_without_father_surname_is_skipped():
    graph = parse_lines(
        [
            "0 @I1@ INDI",
            "1 NAME John",
            "0 @I2@ INDI",
            "1 NAME Tom /Jones/",
            "0 @F1@ FAM",
            "1 HUSB @I1@",
            "1 CHIL @I2@",
            "0 @F2@ FAM",
            "1 WIFE @I1@",
            "1 CHIL @I2@",
        ]
    )
    assert find_children_with_different_surname(graph) == []


def test_repeat_calls_are_identical():
    graph = parse_lines(family_lines([("I2", ["Tom /Jones/"]), ("I3", ["Ann /Brown/"])]))
    assert analyze_child_name_mismatch(graph) == analyze_child_name_mismatch(graph)
