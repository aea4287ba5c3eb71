"""Main session flow for Detective Quest."""

import sys

from core.event_system import EventType, event_bus, GameEvent
from core.logger import hidden_logger
from entities.manor_map import START_ROOM
from systems.exploration import ExplorationLoop
from systems.verdict import evaluate_accusation
from engine import GameState

# Cross-platform readline support for line editing
READLINE_AVAILABLE = False
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    # Windows fallback - try pyreadline3
    try:
        import pyreadline3 as readline
        READLINE_AVAILABLE = True
    except ImportError:
        pass

MAX_HISTORY_LENGTH = 100


def _setup_readline():
    """Enable arrow-key editing with an in-memory history."""
    if not READLINE_AVAILABLE:
        return
    readline.set_history_length(MAX_HISTORY_LENGTH)


def _show_welcome(game):
    game.crt.header("DETECTIVE QUEST - FINAL JUDGEMENT")
    game.crt.output("Welcome, detective.", crawl=True)
    game.crt.output(f"You will start the exploration in the {START_ROOM}.")
    game.crt.output(game.parser.get_help_text())


def _show_evidence(game):
    """Print the collected clues in alphabetical order and the tally per suspect."""
    crt = game.crt
    crt.output("Clues collected (alphabetical order):")
    if game.clue_ledger.is_empty():
        crt.output("No clues were collected during the exploration.")
    else:
        for clue in game.clue_ledger:
            crt.output(f"- {clue}")

    crt.output("\nClue count per suspect:")
    for tally in game.suspect_index.tallies():
        crt.output(f"- {tally.name}: {tally.count} clue(s)")
    crt.output("")
    crt.output(game.stats.get_current_session_summary())


def _ask_accusation(game, read_line):
    """Read one accusation and emit the verdict. Returns the Verdict or None."""
    try:
        line = read_line(game.crt.prompt("Who do you accuse? Enter the suspect's name"))
    except (EOFError, OSError) as exc:
        hidden_logger.warning(f"Input unavailable at accusation: {exc!r}")
        game.report("Could not read the accusation.", EventType.WARNING)
        return None

    verdict = evaluate_accusation(line, game.suspect_index.tallies())
    if verdict is None:
        game.report("No name entered. No decision possible.")
        return None

    hidden_logger.info(
        f"Accusation: {verdict.accused!r} -> suspect={verdict.suspect} "
        f"count={verdict.count} supported={verdict.supported}"
    )
    event_bus.emit(GameEvent(EventType.ACCUSATION_RESULT, {
        "accused": verdict.accused,
        "suspect": verdict.suspect,
        "count": verdict.count,
        "supported": verdict.supported,
    }))
    return verdict


def run_session(game, read_line=input):
    """Explore, review the evidence, take the accusation. Returns the Verdict or None."""
    game.stats.start_session()
    hidden_logger.info("Session started")

    _show_welcome(game)
    ExplorationLoop(game, read_line).run()
    _show_evidence(game)
    verdict = _ask_accusation(game, read_line)

    game.stats.end_session()
    hidden_logger.info(f"Session ended: {game.stats.as_dict()}")
    game.crt.output("\nEnd of game. Thank you for investigating!")
    return verdict


def main(read_line=input, settings=None):
    """Entry point - can be called from launcher or run directly."""
    _setup_readline()

    game = None
    try:
        game = GameState(settings=settings)
        run_session(game, read_line)
    except MemoryError:
        hidden_logger.critical("Out of memory; aborting the session")
        print("Error: not enough memory to continue.", file=sys.stderr)
        sys.exit(1)
    finally:
        if game is not None:
            game.cleanup()
    return 0


if __name__ == "__main__":
    main()
