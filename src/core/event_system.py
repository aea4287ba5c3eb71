from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, List, Callable, Any
import time

class EventType(Enum):
    # Session lifecycle
    EXPLORATION_STARTED = auto()
    EXPLORATION_ENDED = auto()

    # Exploration
    ROOM_ENTERED = auto()     # Cursor arrived at (or re-searched) a room
    CLUE_FOUND = auto()       # Room carried a clue
    NO_CLUE = auto()          # Room carried nothing
    UNLINKED_CLUE = auto()    # Clue with no suspect association
    MOVEMENT = auto()         # Cursor moved to a child room
    PATH_BLOCKED = auto()     # Requested child does not exist
    COMMAND_REJECTED = auto() # Unrecognized exploration command

    # Evidence bookkeeping
    TALLY_UPDATED = auto()
    ROSTER_FULL = auto()

    # === REPORTING PATTERN ===
    # Systems emit these instead of printing

    MESSAGE = auto()          # General message to display
    WARNING = auto()          # Warning message (high visibility)
    ACCUSATION_RESULT = auto()

@dataclass
class GameEvent:
    type: EventType
    payload: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

class EventBus:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(EventBus, cls).__new__(cls)
            cls._instance._subscribers = {}
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_subscribers'):
            self._subscribers: Dict[EventType, List[Callable[[GameEvent], None]]] = {}

    def subscribe(self, event_type: EventType, callback: Callable[[GameEvent], None]):
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: EventType, callback: Callable[[GameEvent], None]):
        if event_type in self._subscribers:
            if callback in self._subscribers[event_type]:
                self._subscribers[event_type].remove(callback)

    def subscriber_count(self, event_type: EventType) -> int:
        return len(self._subscribers.get(event_type, []))

    def emit(self, event: GameEvent):
        """
        Pushes an event to all subscribers.
        """
        if event.type in self._subscribers:
            # Copy so a callback may unsubscribe itself mid-dispatch
            for callback in list(self._subscribers[event.type]):
                try:
                    callback(event)
                except MemoryError:
                    # Allocation failure ends the session, never just one handler
                    raise
                except Exception as e:
                    print(f"ERROR processing event {event.type}: {e}")

    def clear(self):
        self._subscribers = {}

# Global accessor
event_bus = EventBus()
