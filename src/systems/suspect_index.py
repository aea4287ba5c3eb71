"""
Suspect Index
Hashed association from clue text to suspect name, plus the per-suspect
evidence tally that the verdict is decided on.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from core.event_system import event_bus, EventType, GameEvent
from core.logger import hidden_logger


HASH_SIZE = 101
MAX_SUSPECTS = 32

_HASH_SEED = 5381
_HASH_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class SuspectTally:
    """How many discovery events implicate one suspect."""
    name: str
    count: int = 0


class _ChainEntry:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: str, value: str, next_entry: Optional["_ChainEntry"] = None):
        self.key = key
        self.value = value
        self.next = next_entry


def hash_clue(text: str, bucket_count: int = HASH_SIZE) -> int:
    """djb2 (h * 33 + byte) over the UTF-8 bytes, folded into a bucket index."""
    h = _HASH_SEED
    for byte in text.encode("utf-8"):
        h = ((h << 5) + h + byte) & _HASH_MASK
    return h % bucket_count


class SuspectIndex:
    """
    Chained hash table of clue -> suspect with a roster of suspect tallies.

    Every distinct suspect name stored as a value is registered in the
    roster (first-seen order, count 0) as long as the roster has room.
    Past ``max_suspects`` new names are refused: the first refusal warns,
    later ones are silent. Refused names can still be looked up, their
    tally simply never moves. ``max_suspects=None`` removes the cap.
    """

    def __init__(self, bucket_count: int = HASH_SIZE, max_suspects: Optional[int] = MAX_SUSPECTS):
        if bucket_count < 1:
            raise ValueError("bucket_count must be positive")
        self._buckets: List[Optional[_ChainEntry]] = [None] * bucket_count
        self._size = 0
        self.max_suspects = max_suspects
        self._roster: Dict[str, SuspectTally] = {}
        self._roster_full_reported = False

    @classmethod
    def build(cls, pairs: Iterable[Tuple[str, str]], **kwargs) -> "SuspectIndex":
        """Create an index and insert every (clue, suspect) pair in order."""
        index = cls(**kwargs)
        for clue, suspect in pairs:
            index.insert(clue, suspect)
        return index

    def _bucket_for(self, clue: str) -> int:
        return hash_clue(clue, len(self._buckets))

    def insert(self, clue: Optional[str], suspect: Optional[str]) -> None:
        """Associate a clue with a suspect. An existing clue is overwritten."""
        if clue is None or suspect is None:
            return

        idx = self._bucket_for(clue)
        entry = self._buckets[idx]
        while entry is not None:
            if entry.key == clue:
                entry.value = suspect
                break
            entry = entry.next
        else:
            # New keys go to the head of the chain
            self._buckets[idx] = _ChainEntry(clue, suspect, self._buckets[idx])
            self._size += 1

        self._register_suspect(suspect)

    def _register_suspect(self, name: str) -> None:
        if name in self._roster:
            return

        if self.max_suspects is not None and len(self._roster) >= self.max_suspects:
            if not self._roster_full_reported:
                self._roster_full_reported = True
                hidden_logger.warning(
                    f"Suspect roster full ({self.max_suspects}); refusing '{name}' and any later newcomers"
                )
                event_bus.emit(GameEvent(EventType.ROSTER_FULL, {
                    "text": "Suspect limit reached. New suspects will not be tracked.",
                    "refused": name,
                    "capacity": self.max_suspects,
                }))
            return

        self._roster[name] = SuspectTally(name)

    def lookup(self, clue: Optional[str]) -> Optional[str]:
        """Return the suspect linked to ``clue``, or None."""
        if clue is None:
            return None
        entry = self._buckets[self._bucket_for(clue)]
        while entry is not None:
            if entry.key == clue:
                return entry.value
            entry = entry.next
        return None

    def increment_tally(self, name: str) -> bool:
        """
        Add one piece of evidence against ``name``.
        Unknown names are ignored and return False.
        """
        tally = self._roster.get(name)
        if tally is None:
            return False
        tally.count += 1
        event_bus.emit(GameEvent(EventType.TALLY_UPDATED, {
            "suspect": tally.name,
            "count": tally.count,
        }))
        return True

    def get_tally(self, name: str) -> Optional[SuspectTally]:
        return self._roster.get(name)

    def tallies(self) -> List[SuspectTally]:
        """Snapshot of the roster in first-seen order."""
        return [SuspectTally(t.name, t.count) for t in self._roster.values()]

    @property
    def suspect_names(self) -> List[str]:
        return list(self._roster.keys())

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def chain_length(self, clue: str) -> int:
        """Number of entries sharing the bucket of ``clue``."""
        length = 0
        entry = self._buckets[self._bucket_for(clue)]
        while entry is not None:
            length += 1
            entry = entry.next
        return length

    def __contains__(self, clue) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size
