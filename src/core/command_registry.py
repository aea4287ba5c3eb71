from dataclasses import dataclass
from typing import List, Optional

@dataclass
class CommandMetadata:
    """Metadata for a single exploration command."""
    name: str
    key: str
    aliases: List[str]
    description: str
    help_text: str

COMMAND_REGISTRY: List[CommandMetadata] = [
    CommandMetadata(
        name="LEFT",
        key="e",
        aliases=["ESQUERDA", "WEST"],
        description="left",
        help_text="Walk through the left-hand door of the current room."
    ),
    CommandMetadata(
        name="RIGHT",
        key="d",
        aliases=["DIREITA", "EAST"],
        description="right",
        help_text="Walk through the right-hand door of the current room."
    ),
    CommandMetadata(
        name="STOP",
        key="s",
        aliases=["SAIR", "EXIT", "QUIT"],
        description="stop exploring",
        help_text="Finish the exploration and review the collected evidence."
    ),
]


def get_command_by_key(key: str) -> Optional[CommandMetadata]:
    """Look up a command by its single-character key (case-insensitive)."""
    key_lower = key.lower()
    for cmd in COMMAND_REGISTRY:
        if cmd.key == key_lower:
            return cmd
    return None


def get_command_by_name(name: str) -> Optional[CommandMetadata]:
    """Look up a command by name or alias (case-insensitive)."""
    name_upper = name.upper()
    for cmd in COMMAND_REGISTRY:
        if cmd.name == name_upper or name_upper in cmd.aliases:
            return cmd
    return None


def menu_text() -> str:
    """Render the option line shown before every exploration prompt."""
    options = ", ".join(f"({cmd.key}) {cmd.description}" for cmd in COMMAND_REGISTRY)
    return f"Options: {options}"
