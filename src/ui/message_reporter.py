"""
Message Reporter System
Subscribes to reporting events and displays messages through CRT output.
Systems emit events instead of printing.
"""

from core.event_system import event_bus, EventType, GameEvent
from ui.settings import Verbosity


class MessageReporter:
    """
    Central message display handler.
    Subscribes to exploration and reporting events and routes them
    through the CRT output system, filtered by verbosity.
    """

    # Map EventType to minimum required Verbosity
    VERBOSITY_MAP = {
        EventType.WARNING: Verbosity.MINIMAL,
        EventType.ROSTER_FULL: Verbosity.MINIMAL,
        EventType.ACCUSATION_RESULT: Verbosity.MINIMAL,

        EventType.MESSAGE: Verbosity.STANDARD,
        EventType.ROOM_ENTERED: Verbosity.STANDARD,
        EventType.CLUE_FOUND: Verbosity.STANDARD,
        EventType.NO_CLUE: Verbosity.STANDARD,
        EventType.UNLINKED_CLUE: Verbosity.STANDARD,
        EventType.PATH_BLOCKED: Verbosity.STANDARD,
        EventType.COMMAND_REJECTED: Verbosity.STANDARD,
        EventType.EXPLORATION_STARTED: Verbosity.STANDARD,
        EventType.EXPLORATION_ENDED: Verbosity.STANDARD,

        EventType.MOVEMENT: Verbosity.VERBOSE,
        EventType.TALLY_UPDATED: Verbosity.DEBUG,
    }

    def __init__(self, crt_output, game_state=None):
        """
        Initialize with a CRTOutput instance for display.

        Args:
            crt_output: CRTOutput instance from ui.crt_effects
            game_state: Optional GameState instance to query verbosity.
        """
        self.crt = crt_output
        self.game_state = game_state
        self._handlers = {
            EventType.MESSAGE: self._handle_message,
            EventType.WARNING: self._handle_warning,
            EventType.EXPLORATION_STARTED: self._handle_exploration_started,
            EventType.EXPLORATION_ENDED: self._handle_exploration_ended,
            EventType.ROOM_ENTERED: self._handle_room_entered,
            EventType.CLUE_FOUND: self._handle_clue_found,
            EventType.NO_CLUE: self._handle_no_clue,
            EventType.UNLINKED_CLUE: self._handle_unlinked_clue,
            EventType.MOVEMENT: self._handle_movement,
            EventType.PATH_BLOCKED: self._handle_path_blocked,
            EventType.COMMAND_REJECTED: self._handle_command_rejected,
            EventType.TALLY_UPDATED: self._handle_tally,
            EventType.ROSTER_FULL: self._handle_warning,
            EventType.ACCUSATION_RESULT: self._handle_accusation,
        }
        self._subscribe_all()

    @property
    def verbosity(self) -> Verbosity:
        """Get current verbosity level from game state."""
        if self.game_state:
            return self.game_state.verbosity
        return Verbosity.STANDARD

    def _should_report(self, event_type: EventType) -> bool:
        """Check if event should be reported based on verbosity."""
        required = self.VERBOSITY_MAP.get(event_type, Verbosity.DEBUG)
        return self.verbosity.value >= required.value

    def _subscribe_all(self):
        """Subscribe to all reporting event types."""
        for event_type, handler in self._handlers.items():
            event_bus.subscribe(event_type, handler)

    def cleanup(self):
        """Unsubscribe from all reporting event types."""
        for event_type, handler in self._handlers.items():
            event_bus.unsubscribe(event_type, handler)

    def _handle_message(self, event: GameEvent):
        """Handle general messages."""
        if not self._should_report(event.type):
            return
        text = event.payload.get('text', '')
        crawl = event.payload.get('crawl', False)
        self.crt.output(text, crawl=crawl)

    def _handle_warning(self, event: GameEvent):
        """Handle warning messages with high visibility."""
        if not self._should_report(event.type):
            return
        self.crt.warning(event.payload.get('text', ''))

    def _handle_exploration_started(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        self.crt.output("\n--- Exploration begins ---")

    def _handle_exploration_ended(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        self.crt.output("--- Exploration over ---\n")

    def _handle_room_entered(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        self.crt.output(f"\nYou are in: {event.payload.get('room', '?')}")

    def _handle_clue_found(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        self.crt.event(f'You found a clue: "{event.payload.get("clue", "")}"', type="success")

    def _handle_no_clue(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        self.crt.output("There are no visible clues in this room.")

    def _handle_unlinked_clue(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        self.crt.output("(No suspect is associated with this clue.)")

    def _handle_movement(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        direction = event.payload.get('direction', '')
        destination = event.payload.get('destination', '')
        self.crt.output(f"You head {direction} into the {destination}.")

    def _handle_path_blocked(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        direction = event.payload.get('direction', '')
        self.crt.event(f"There is no path to the {direction} from here.", type="info")

    def _handle_command_rejected(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        text = event.payload.get('text', "Invalid command. Use 'e', 'd' or 's'.")
        suggestion = event.payload.get('suggestion')
        if suggestion:
            text = f"{text} {suggestion}"
        self.crt.output(text)

    def _handle_tally(self, event: GameEvent):
        if not self._should_report(event.type):
            return
        suspect = event.payload.get('suspect', '?')
        count = event.payload.get('count', 0)
        self.crt.output(f"[SYS] {suspect}: {count} clue(s)")

    def _handle_accusation(self, event: GameEvent):
        """Handle formal accusation results."""
        if not self._should_report(event.type):
            return
        accused = event.payload.get('accused', '?')
        self.crt.output(f"\nDecision: you accused '{accused}'.")
        if event.payload.get('supported'):
            self.crt.event("Result: there are enough clues (>= 2) to support the accusation.", type="success")
        else:
            self.crt.event("Result: there are not enough clues to support the accusation (fewer than 2).", type="danger")
