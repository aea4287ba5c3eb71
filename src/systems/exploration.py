"""
Exploration Loop
Walks the player's cursor over the manor map, one console line at a time,
feeding every clue into the ledger and the suspect tally.
"""

from typing import Callable, Optional, TYPE_CHECKING

from core.command_registry import menu_text
from core.event_system import event_bus, EventType, GameEvent
from core.logger import hidden_logger
from entities.room import Direction, Room, traverse
from ui.command_parser import IDLE

if TYPE_CHECKING:
    from engine import GameState


_DIRECTIONS = {
    "LEFT": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
}


class ExplorationLoop:
    """
    State machine over map positions.

    The state is ``game.cursor``; it starts at the map root and the loop
    only ends on the stop command or when input can no longer be read.
    """

    def __init__(self, game: "GameState", read_line: Callable[[str], str] = input):
        self.game = game
        self.read_line = read_line
        self.finished = False

    def visit(self, room: Room) -> None:
        """
        Enter ``room``: announce it and process its clue, if any.
        Every call counts as a visit, so re-entering a clue room adds
        another point to its suspect even though the ledger keeps one copy.
        """
        game = self.game
        event_bus.emit(GameEvent(EventType.ROOM_ENTERED, {"room": room.name}))
        hidden_logger.info(f"Entered {room.name}")

        if not room.has_clue():
            event_bus.emit(GameEvent(EventType.NO_CLUE, {"room": room.name}))
            return

        clue = room.clue
        is_new = game.clue_ledger.insert(clue)
        event_bus.emit(GameEvent(EventType.CLUE_FOUND, {
            "room": room.name,
            "clue": clue,
            "new": is_new,
        }))
        if is_new:
            hidden_logger.info(f"Ledger += '{clue}'")

        suspect = game.suspect_index.lookup(clue)
        if suspect is None:
            event_bus.emit(GameEvent(EventType.UNLINKED_CLUE, {"room": room.name, "clue": clue}))
            return

        if game.suspect_index.increment_tally(suspect):
            tally = game.suspect_index.get_tally(suspect)
            hidden_logger.info(f"'{clue}' implicates {suspect} (now {tally.count})")

    def move(self, direction: Direction) -> bool:
        """
        Try to walk through a door. On success the cursor moves and the new
        room is visited. A missing door leaves the cursor where it was; the
        player searches the current room again.
        """
        game = self.game
        current = game.cursor
        destination = traverse(current, direction)

        if destination is None:
            event_bus.emit(GameEvent(EventType.PATH_BLOCKED, {
                "room": current.name,
                "direction": direction.value,
            }))
            self.visit(current)
            return False

        game.cursor = destination
        event_bus.emit(GameEvent(EventType.MOVEMENT, {
            "from": current.name,
            "destination": destination.name,
            "direction": direction.value,
        }))
        self.visit(destination)
        return True

    def step(self, raw_line: Optional[str]) -> bool:
        """
        Process one line of input. Returns False once exploration is over.
        """
        parsed = self.game.parser.parse(raw_line)

        if parsed is None:
            raw = (raw_line or "").strip()
            event_bus.emit(GameEvent(EventType.COMMAND_REJECTED, {
                "text": "Invalid command. Use 'e', 'd' or 's'.",
                "input": raw,
                "suggestion": self.game.parser.suggest_correction(raw),
            }))
            return True

        action = parsed['action']
        if action == IDLE:
            return True

        if action == "STOP":
            self.game.report("Leaving the exploration...")
            self.finished = True
            return False

        self.move(_DIRECTIONS[action])
        return True

    def run(self) -> None:
        """Drive the loop until the player stops or input dries up."""
        game = self.game
        if game.map_root is None:
            game.report("The map is empty.")
            return

        if game.stats.current_session is None:
            game.stats.start_session()

        game.cursor = game.map_root
        event_bus.emit(GameEvent(EventType.EXPLORATION_STARTED, {"room": game.cursor.name}))
        self.visit(game.cursor)

        while True:
            game.report(menu_text())
            try:
                line = self.read_line(game.crt.prompt("Choice"))
            except (EOFError, OSError) as exc:
                hidden_logger.warning(f"Input unavailable during exploration: {exc!r}")
                game.report("Could not read input. Ending the exploration.", EventType.WARNING)
                break

            if not self.step(line):
                break

        event_bus.emit(GameEvent(EventType.EXPLORATION_ENDED, {"room": game.cursor.name}))
