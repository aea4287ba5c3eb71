"""Tests for the suspect index (hashed clue -> suspect association + tally)."""

import logging

import pytest

from core.event_system import EventType, event_bus
from core.logger import hidden_logger
from entities.manor_map import CLUE_ASSOCIATIONS, FOOTPRINT, KNIFE
from systems.suspect_index import HASH_SIZE, SuspectIndex, hash_clue


@pytest.fixture
def index():
    return SuspectIndex.build(CLUE_ASSOCIATIONS)


class TestAssociations:
    """Lookup and overwrite behaviour."""

    def test_lookup_returns_linked_suspect(self, index):
        assert index.lookup(FOOTPRINT) == "Marcos"
        assert index.lookup(KNIFE) == "Ricardo"

    def test_lookup_unknown_clue_returns_none(self, index):
        assert index.lookup("A perfectly ordinary chair") is None
        assert index.lookup(None) is None

    def test_lookup_is_stable_across_calls(self, index):
        results = {index.lookup(FOOTPRINT) for _ in range(10)}
        assert results == {"Marcos"}

    def test_reinsert_overwrites_value(self, index):
        index.insert(KNIFE, "Mariana")
        assert index.lookup(KNIFE) == "Mariana"
        assert len(index) == len(CLUE_ASSOCIATIONS)

    def test_none_key_or_value_is_ignored(self):
        index = SuspectIndex()
        index.insert(None, "Marcos")
        index.insert("clue", None)
        assert len(index) == 0
        assert index.tallies() == []

    def test_contains(self, index):
        assert FOOTPRINT in index
        assert "missing" not in index
        assert 7 not in index


class TestHashing:
    """Bucket dispersion and collision chaining."""

    def test_hash_is_within_bucket_range(self):
        for clue, _ in CLUE_ASSOCIATIONS:
            assert 0 <= hash_clue(clue) < HASH_SIZE

    def test_default_bucket_count(self, index):
        assert index.bucket_count == 101

    def test_single_bucket_chains_every_entry(self):
        index = SuspectIndex.build(CLUE_ASSOCIATIONS, bucket_count=1)

        assert index.chain_length(FOOTPRINT) == len(CLUE_ASSOCIATIONS)
        for clue, suspect in CLUE_ASSOCIATIONS:
            assert index.lookup(clue) == suspect

    def test_invalid_bucket_count(self):
        with pytest.raises(ValueError):
            SuspectIndex(bucket_count=0)


class TestRoster:
    """Suspect registration and tally counting."""

    def test_roster_is_first_seen_order_with_zero_counts(self, index):
        tallies = index.tallies()
        assert [t.name for t in tallies] == ["Marcos", "Ricardo", "Mariana"]
        assert all(t.count == 0 for t in tallies)

    def test_increment_known_suspect(self, index):
        assert index.increment_tally("Mariana") is True
        assert index.get_tally("Mariana").count == 1

    def test_increment_unknown_suspect_is_a_noop(self, index):
        before = index.tallies()
        assert index.increment_tally("Childs") is False
        assert index.tallies() == before
        assert index.get_tally("Childs") is None

    def test_increment_is_exact_name_match(self, index):
        assert index.increment_tally("marcos") is False
        assert index.get_tally("Marcos").count == 0

    def test_tallies_returns_a_snapshot(self, index):
        snapshot = index.tallies()
        index.increment_tally("Marcos")
        assert snapshot[0].count == 0
        assert index.get_tally("Marcos").count == 1

    def test_increment_emits_tally_event(self, index):
        captured = []
        event_bus.subscribe(EventType.TALLY_UPDATED, captured.append)

        index.increment_tally("Ricardo")

        assert captured[-1].payload == {"suspect": "Ricardo", "count": 1}

    def test_overwrite_registers_new_suspect(self, index):
        index.insert(KNIFE, "Beatriz")
        assert "Beatriz" in index.suspect_names


class TestRosterCapacity:
    """Overflow warns once and refuses new names only."""

    def test_overflow_refuses_new_names_but_keeps_lookups(self):
        index = SuspectIndex(max_suspects=2)
        index.insert("c1", "Ana")
        index.insert("c2", "Bruno")
        index.insert("c3", "Carla")

        assert index.suspect_names == ["Ana", "Bruno"]
        assert index.lookup("c3") == "Carla"
        assert index.increment_tally("Carla") is False
        assert index.increment_tally("Ana") is True

    def test_overflow_warns_only_once(self):
        events = []
        event_bus.subscribe(EventType.ROSTER_FULL, events.append)

        records = []
        handler = logging.Handler()
        handler.emit = records.append
        hidden_logger.addHandler(handler)
        try:
            index = SuspectIndex(max_suspects=1)
            index.insert("c1", "Ana")
            index.insert("c2", "Bruno")
            index.insert("c3", "Carla")
        finally:
            hidden_logger.removeHandler(handler)

        assert len(events) == 1
        assert events[0].payload["refused"] == "Bruno"
        warnings = [r for r in records if r.levelno == logging.WARNING]
        assert len(warnings) == 1

    def test_existing_names_do_not_count_against_capacity(self):
        index = SuspectIndex(max_suspects=1)
        index.insert("c1", "Ana")
        index.insert("c2", "Ana")
        assert index.suspect_names == ["Ana"]

    def test_no_cap_when_disabled(self):
        index = SuspectIndex(max_suspects=None)
        for i in range(100):
            index.insert(f"clue {i}", f"suspect {i}")
        assert len(index.suspect_names) == 100
