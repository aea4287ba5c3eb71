"""
Exploration Command Parser
Classifies one raw input line as a move, a stop, an idle line or garbage,
and offers a correction hint when garbage looks like a command word.
"""

from difflib import SequenceMatcher

from core.command_registry import COMMAND_REGISTRY, get_command_by_key


IDLE = "IDLE"


class CommandParser:
    """
    Parses raw console lines into exploration commands.

    Only the single-character keys are accepted (case-insensitive,
    surrounding whitespace ignored). Full words are never executed, they
    only drive suggestions.
    """

    def __init__(self):
        self.last_command = None
        self.command_history = []

    def parse(self, raw_input):
        """
        Parse one line.

        Returns:
            dict with 'action' and 'raw' for a valid command,
            {'action': IDLE, ...} for a blank line,
            OR None if the line is not a command.
        """
        if raw_input is None:
            return None

        # Whitespace-only lines are idle rather than invalid commands
        raw = raw_input.strip()
        if not raw:
            return {'action': IDLE, 'raw': raw}

        # Store history (limit to last 50)
        self.command_history.append(raw)
        if len(self.command_history) > 50:
            self.command_history.pop(0)

        if len(raw) != 1:
            return None

        command = get_command_by_key(raw)
        if command is None:
            return None

        self.last_command = {'action': command.name, 'raw': raw}
        return self.last_command

    def suggest_correction(self, failed_cmd):
        """
        Suggest the key to use when the input resembles a command word.
        """
        words = failed_cmd.lower().split()
        if not words:
            return None

        first = words[0]
        best = None
        best_ratio = 0.0

        for cmd in COMMAND_REGISTRY:
            for word in [cmd.name] + cmd.aliases:
                ratio = SequenceMatcher(None, first, word.lower()).ratio()
                if ratio > best_ratio:
                    best_ratio = ratio
                    best = cmd

        if best and best_ratio > 0.6:
            return f"Did you mean '{best.key}' ({best.description})?"
        return None

    def get_help_text(self):
        """Return help text for the exploration commands."""
        lines = ["AVAILABLE COMMANDS:", "==================="]
        for cmd in COMMAND_REGISTRY:
            lines.append(f"{cmd.key.upper()}/{cmd.key}    {cmd.help_text}")
        return "\n".join(lines)
