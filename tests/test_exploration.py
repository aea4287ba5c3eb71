"""Tests for the exploration loop state machine."""

import pytest

from core.event_system import EventType, event_bus
from engine import GameState
from entities.manor_map import DIARY_PAGE, FOOTPRINT, INITIAL_NOTE, KNIFE, find_room
from entities.room import Direction, Room
from systems.exploration import ExplorationLoop


def _counts(game):
    return {t.name: t.count for t in game.suspect_index.tallies()}


@pytest.fixture
def loop(game, script):
    return ExplorationLoop(game, script())


class TestVisit:

    def test_visiting_clue_room_fills_ledger_and_tally(self, game, loop):
        living_room = find_room(game.map_root, "Living Room")
        loop.visit(living_room)

        assert list(game.clue_ledger) == [FOOTPRINT]
        assert _counts(game)["Marcos"] == 1
        assert 'You found a clue: "Wet footprint near the sofa"' in game.crt.captured_text()

    def test_revisit_counts_twice_but_ledger_lists_once(self, game, loop):
        living_room = find_room(game.map_root, "Living Room")
        loop.visit(living_room)
        loop.visit(living_room)

        assert list(game.clue_ledger) == [FOOTPRINT]
        assert _counts(game)["Marcos"] == 2

    def test_room_without_clue(self, game, loop):
        loop.visit(game.map_root)

        assert game.clue_ledger.is_empty()
        assert all(count == 0 for count in _counts(game).values())
        assert "There are no visible clues in this room." in game.crt.captured_text()

    def test_clue_without_suspect_is_informational(self, crt, script):
        attic = Room("Attic", "Dusty box of letters")
        game = GameState(crt=crt, map_root=attic, associations=[(KNIFE, "Ricardo")])
        try:
            ExplorationLoop(game, script()).visit(attic)

            assert list(game.clue_ledger) == ["Dusty box of letters"]
            assert _counts(game) == {"Ricardo": 0}
            assert "(No suspect is associated with this clue.)" in crt.captured_text()
        finally:
            game.cleanup()


class TestMovement:

    def test_move_into_existing_child(self, game, loop):
        assert loop.move(Direction.RIGHT) is True
        assert game.cursor.name == "Kitchen"
        assert _counts(game)["Ricardo"] == 1

    def test_blocked_move_keeps_cursor_identity(self, game, loop):
        library = find_room(game.map_root, "Library")
        game.cursor = library

        assert loop.move(Direction.LEFT) is False
        assert game.cursor is library
        assert "There is no path to the left from here." in game.crt.captured_text()

    def test_blocked_move_searches_the_room_again(self, game, loop):
        game.cursor = find_room(game.map_root, "Bedroom")

        loop.move(Direction.RIGHT)
        loop.move(Direction.LEFT)

        assert list(game.clue_ledger) == [INITIAL_NOTE]
        assert _counts(game)["Marcos"] == 2


class TestStep:

    @pytest.mark.parametrize("line", ["e", "E", " e ", "e\n"])
    def test_left_key_variants(self, game, loop, line):
        assert loop.step(line) is True
        assert game.cursor.name == "Living Room"

    @pytest.mark.parametrize("line", ["s", "S"])
    def test_stop_ends_loop(self, loop, line):
        assert loop.step(line) is False
        assert loop.finished

    @pytest.mark.parametrize("line", ["\n", "", "   "])
    def test_blank_line_is_idle(self, game, loop, line):
        game.crt.buffer.clear()
        root = game.cursor

        assert loop.step(line) is True
        assert game.cursor is root
        assert game.crt.buffer == []

    @pytest.mark.parametrize("line", ["x", "left", "ee", "?"])
    def test_invalid_command_changes_nothing(self, game, loop, line):
        rejected = []
        event_bus.subscribe(EventType.COMMAND_REJECTED, rejected.append)
        root = game.cursor

        assert loop.step(line) is True
        assert game.cursor is root
        assert game.clue_ledger.is_empty()
        assert len(rejected) == 1
        assert "Invalid command. Use 'e', 'd' or 's'." in game.crt.captured_text()

    def test_word_input_gets_a_hint(self, game, loop):
        loop.step("right")
        assert "Did you mean 'd' (right)?" in game.crt.captured_text()


class TestRun:

    def test_run_starts_at_root_and_stops(self, game, script):
        read_line = script("e", "e", "s")
        ExplorationLoop(game, read_line).run()

        assert game.cursor.name == "Library"
        assert list(game.clue_ledger) == [DIARY_PAGE, FOOTPRINT]
        assert _counts(game) == {"Marcos": 1, "Ricardo": 0, "Mariana": 1}
        assert len(read_line.prompts) == 3

    def test_menu_shown_before_each_prompt(self, game, script):
        ExplorationLoop(game, script("s")).run()
        assert "Options: (e) left, (d) right, (s) stop exploring" in game.crt.captured_text()

    def test_end_of_input_keeps_collected_state(self, game, script):
        ExplorationLoop(game, script("d")).run()

        assert list(game.clue_ledger) == [KNIFE]
        assert _counts(game)["Ricardo"] == 1
        assert "[WARNING] Could not read input. Ending the exploration." in game.crt.captured_text()

    def test_os_error_is_treated_like_end_of_input(self, game):
        def broken(prompt=""):
            raise OSError("terminal went away")

        ExplorationLoop(game, broken).run()
        assert game.cursor is game.map_root

    def test_empty_map(self, crt, script):
        game = GameState(crt=crt, map_root=None)
        try:
            read_line = script("e")
            ExplorationLoop(game, read_line).run()

            assert "The map is empty." in crt.captured_text()
            assert read_line.prompts == []
        finally:
            game.cleanup()

    def test_statistics_follow_the_walk(self, game, script):
        ExplorationLoop(game, script("d", "d", "e", "x", "", "s")).run()

        session = game.stats.current_session
        assert session.moves == 2
        assert session.blocked_moves == 1
        assert session.rejected_commands == 1
        assert session.visits_per_room["Bedroom"] == 2
