"""
Settings Manager
Palette, text speed, effects and verbosity for the console.
Settings live for one run only; nothing is written to disk.
"""

from enum import Enum


class Verbosity(Enum):
    """Reporting verbosity levels."""
    MINIMAL = 0
    STANDARD = 1
    VERBOSE = 2
    DEBUG = 3


# Default settings
DEFAULT_SETTINGS = {
    "palette": "amber",
    "text_speed": "instant",  # slow, normal, fast, instant
    "effects_enabled": True,  # ANSI colors and scanlines
    "verbosity": "STANDARD",
}

# Text speed multipliers (for crawl_speed)
TEXT_SPEEDS = {
    "slow": 0.04,
    "normal": 0.02,
    "fast": 0.008,
    "instant": 0.0,
}


class SettingsManager:
    """Holds the console settings for the current run."""

    def __init__(self, overrides=None):
        self.settings = DEFAULT_SETTINGS.copy()
        if overrides:
            unknown = set(overrides) - set(DEFAULT_SETTINGS)
            if unknown:
                raise KeyError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
            self.settings.update(overrides)

    def get(self, key, default=None):
        """Get a setting value."""
        return self.settings.get(key, default)

    def set(self, key, value):
        """Set a setting value."""
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        self.settings[key] = value

    def get_text_speed_value(self):
        """Get the crawl_speed value for current text speed setting."""
        speed_name = self.settings.get("text_speed", "instant")
        return TEXT_SPEEDS.get(speed_name, 0.0)

    def get_verbosity(self):
        """Resolve the verbosity setting, falling back to STANDARD."""
        value = self.settings.get("verbosity", "STANDARD")
        if isinstance(value, Verbosity):
            return value
        try:
            return Verbosity[str(value).upper()]
        except KeyError:
            return Verbosity.STANDARD

    def apply_to_game(self, game_state):
        """Apply current settings to a game state."""
        game_state.crt.set_palette(self.settings.get("palette", "amber"))
        game_state.crt.crawl_speed = self.get_text_speed_value()
        game_state.crt.enabled = self.settings.get("effects_enabled", True)
