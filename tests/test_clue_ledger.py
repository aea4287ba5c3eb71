"""Tests for the clue ledger (ordered, duplicate-free clue collection)."""

import itertools

import pytest

from systems.clue_ledger import ClueLedger


def test_duplicates_collapse_and_order_is_ascending():
    ledger = ClueLedger()
    for text in ["B", "A", "B", "C"]:
        ledger.insert(text)

    assert list(ledger.in_order()) == ["A", "B", "C"]
    assert len(ledger) == 3


@pytest.mark.parametrize("order", list(itertools.permutations(["delta", "alpha", "charlie", "bravo"])))
def test_every_insertion_order_gives_the_same_listing(order):
    ledger = ClueLedger()
    for text in order:
        ledger.insert(text)
        ledger.insert(text)

    assert list(ledger) == ["alpha", "bravo", "charlie", "delta"]


def test_insert_reports_whether_a_node_was_added():
    ledger = ClueLedger()
    assert ledger.insert("Torn page from a diary") is True
    assert ledger.insert("Torn page from a diary") is False
    assert len(ledger) == 1


@pytest.mark.parametrize("empty", [None, ""])
def test_empty_text_is_ignored(empty):
    ledger = ClueLedger()
    assert ledger.insert(empty) is False
    assert ledger.is_empty()
    assert list(ledger) == []


def test_ordering_is_case_sensitive_code_point_order():
    ledger = ClueLedger()
    for text in ["banana", "Banana", "apple"]:
        ledger.insert(text)

    assert list(ledger) == ["Banana", "apple", "banana"]


def test_traversal_is_lazy_and_restartable():
    ledger = ClueLedger()
    for text in ["m", "c", "x"]:
        ledger.insert(text)

    first = ledger.in_order()
    assert next(first) == "c"

    # A fresh iteration starts over regardless of the partially consumed one
    assert list(ledger) == ["c", "m", "x"]
    assert list(first) == ["m", "x"]


def test_sorted_input_does_not_hit_recursion_limit():
    ledger = ClueLedger()
    texts = [f"clue {i:05d}" for i in range(5000)]
    for text in texts:
        ledger.insert(text)

    assert list(ledger) == texts
    assert "clue 04999" in ledger
    assert "clue 99999" not in ledger


def test_contains_ignores_non_strings():
    ledger = ClueLedger()
    ledger.insert("Knife with a broken handle")
    assert "Knife with a broken handle" in ledger
    assert 42 not in ledger
