from typing import Iterable, Optional, Tuple

from core.event_system import event_bus, EventType, GameEvent
from core.logger import hidden_logger

from entities.room import Room
from entities.manor_map import build_fixed_map, CLUE_ASSOCIATIONS

from systems.clue_ledger import ClueLedger
from systems.statistics import StatisticsTracker
from systems.suspect_index import SuspectIndex, MAX_SUSPECTS

from ui.command_parser import CommandParser
from ui.crt_effects import CRTOutput
from ui.message_reporter import MessageReporter
from ui.settings import SettingsManager, Verbosity


_FIXED_MAP = object()


class GameState:
    """
    Everything one investigation owns: the manor, the cursor, the clue
    ledger, the suspect index and the console plumbing. Built at startup,
    handed to every component that needs it, released by cleanup().
    """

    def __init__(self, settings: Optional[SettingsManager] = None,
                 map_root=_FIXED_MAP,
                 associations: Optional[Iterable[Tuple[str, str]]] = None,
                 max_suspects: Optional[int] = MAX_SUSPECTS,
                 crt: Optional[CRTOutput] = None):
        self.settings = settings or SettingsManager()
        self.crt = crt or CRTOutput()
        if crt is None:
            self.settings.apply_to_game(self)
        self.parser = CommandParser()
        self.reporter = MessageReporter(self.crt, self)
        self.stats = StatisticsTracker()

        self.map_root: Optional[Room] = build_fixed_map() if map_root is _FIXED_MAP else map_root
        self.cursor: Optional[Room] = self.map_root

        self.clue_ledger = ClueLedger()
        pairs = CLUE_ASSOCIATIONS if associations is None else associations
        self.suspect_index = SuspectIndex.build(pairs, max_suspects=max_suspects)

        hidden_logger.info(
            f"Session ready: {len(self.suspect_index)} associations, "
            f"suspects={self.suspect_index.suspect_names}"
        )

    @property
    def verbosity(self) -> Verbosity:
        return self.settings.get_verbosity()

    def report(self, text: str, event_type: EventType = EventType.MESSAGE, **payload):
        """Shortcut for emitting a display event."""
        payload["text"] = text
        event_bus.emit(GameEvent(event_type, payload))

    def cleanup(self):
        """Detach the session's subscribers from the shared event bus."""
        self.reporter.cleanup()
        self.stats.cleanup()
