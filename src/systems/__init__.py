"""Investigation systems: clue ledger, suspect index, exploration, verdict, statistics."""
