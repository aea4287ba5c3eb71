"""
Verdict Engine
Decides whether the collected evidence supports accusing a suspect.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from systems.suspect_index import SuspectTally


# Discovery events needed before an accusation holds. Not configurable.
ACCUSATION_THRESHOLD = 2


@dataclass(frozen=True)
class Verdict:
    accused: str
    supported: bool
    suspect: Optional[str] = None  # Roster spelling, None when unknown
    count: int = 0


def _match_suspect(accused_name: str, roster: Iterable[SuspectTally]) -> Optional[SuspectTally]:
    target = accused_name.lower()
    return next((t for t in roster if t.name.lower() == target), None)


def decide(accused_name: Optional[str], roster: Iterable[SuspectTally]) -> bool:
    """
    True when ``accused_name`` matches a roster entry (ignoring case) whose
    count has reached the threshold. Unknown names are never supported.
    """
    if not accused_name:
        return False
    tally = _match_suspect(accused_name, roster)
    if tally is None:
        return False
    return tally.count >= ACCUSATION_THRESHOLD


def evaluate_accusation(raw_input: Optional[str], roster: Iterable[SuspectTally]) -> Optional[Verdict]:
    """
    Turn one line of player input into a Verdict.
    Returns None when nothing was typed (no accusation made).
    """
    # Both ends are stripped, so a whitespace-only line is no accusation at all
    accused = (raw_input or "").strip()
    if not accused:
        return None

    roster = list(roster)
    tally = _match_suspect(accused, roster)
    return Verdict(
        accused=accused,
        supported=decide(accused, roster),
        suspect=tally.name if tally else None,
        count=tally.count if tally else 0,
    )
