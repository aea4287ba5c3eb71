"""
Session Statistics
Counts what happened during one investigation: rooms entered, doors that
led nowhere, rejected commands, clue discoveries. Kept in memory only and
discarded with the session.
"""

from datetime import datetime
from dataclasses import dataclass, field, asdict
from typing import Dict, Optional, Set
from core.event_system import event_bus, EventType, GameEvent


@dataclass
class SessionStats:
    """Statistics for a single investigation."""
    start_time: str = ""
    end_time: str = ""
    rooms_entered: int = 0
    moves: int = 0
    blocked_moves: int = 0
    rejected_commands: int = 0
    clue_discoveries: int = 0
    unlinked_clues: int = 0
    accusations_made: int = 0
    supported_accusations: int = 0
    visits_per_room: Dict[str, int] = field(default_factory=dict)


class StatisticsTracker:
    """Tracks session statistics from bus events."""

    _SUBSCRIPTIONS = (
        (EventType.ROOM_ENTERED, "_on_room_entered"),
        (EventType.MOVEMENT, "_on_movement"),
        (EventType.PATH_BLOCKED, "_on_path_blocked"),
        (EventType.COMMAND_REJECTED, "_on_command_rejected"),
        (EventType.CLUE_FOUND, "_on_clue_found"),
        (EventType.UNLINKED_CLUE, "_on_unlinked_clue"),
        (EventType.ACCUSATION_RESULT, "_on_accusation"),
    )

    def __init__(self):
        self.current_session: Optional[SessionStats] = None
        self._distinct_rooms: Set[str] = set()
        self._subscribe_events()

    def _subscribe_events(self):
        for event_type, handler in self._SUBSCRIPTIONS:
            event_bus.subscribe(event_type, getattr(self, handler))

    def cleanup(self):
        """Unsubscribe from the event bus."""
        for event_type, handler in self._SUBSCRIPTIONS:
            event_bus.unsubscribe(event_type, getattr(self, handler))

    def start_session(self):
        """Start tracking a new investigation."""
        self.current_session = SessionStats(start_time=datetime.now().isoformat())
        self._distinct_rooms = set()

    def end_session(self) -> Optional[SessionStats]:
        """Stamp the end time and return the finished session."""
        if not self.current_session:
            return None
        self.current_session.end_time = datetime.now().isoformat()
        return self.current_session

    @property
    def distinct_rooms(self) -> int:
        return len(self._distinct_rooms)

    def as_dict(self) -> Dict:
        if not self.current_session:
            return {}
        data = asdict(self.current_session)
        data["distinct_rooms"] = self.distinct_rooms
        return data

    # Event handlers
    def _on_room_entered(self, event: GameEvent):
        if self.current_session:
            room = event.payload.get('room', '')
            self.current_session.rooms_entered += 1
            visits = self.current_session.visits_per_room
            visits[room] = visits.get(room, 0) + 1
            self._distinct_rooms.add(room)

    def _on_movement(self, event: GameEvent):
        if self.current_session:
            self.current_session.moves += 1

    def _on_path_blocked(self, event: GameEvent):
        if self.current_session:
            self.current_session.blocked_moves += 1

    def _on_command_rejected(self, event: GameEvent):
        if self.current_session:
            self.current_session.rejected_commands += 1

    def _on_clue_found(self, event: GameEvent):
        if self.current_session:
            self.current_session.clue_discoveries += 1

    def _on_unlinked_clue(self, event: GameEvent):
        if self.current_session:
            self.current_session.unlinked_clues += 1

    def _on_accusation(self, event: GameEvent):
        if self.current_session:
            self.current_session.accusations_made += 1
            if event.payload.get('supported'):
                self.current_session.supported_accusations += 1

    def get_current_session_summary(self) -> str:
        """One-line recap printed before the accusation."""
        if not self.current_session:
            return "No active session."

        s = self.current_session
        return (
            f"Rooms entered: {s.rooms_entered} ({self.distinct_rooms} distinct) | "
            f"Blocked moves: {s.blocked_moves} | "
            f"Rejected commands: {s.rejected_commands}"
        )
