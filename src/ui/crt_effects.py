"""
Terminal Styling
Old-school monochrome terminal look: palettes, scanlines, typewriter crawl.
"""

import re
import sys
import time

# ANSI color codes for terminal effects
class ANSI:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    BLINK = "\033[5m"

    # Monochrome palettes
    AMBER = "\033[38;5;214m"      # Classic amber terminal
    GREEN = "\033[38;5;46m"       # Classic green terminal
    WHITE = "\033[38;5;255m"      # Bright white

    # Colorblind-friendly palette (high contrast)
    CB_CYAN = "\033[38;5;51m"

    # High contrast mode (for low vision)
    HC_WHITE = "\033[38;5;231m"

    # Functional colors
    DANGER = "\033[38;5;196m"     # Bright Red
    SUCCESS = "\033[38;5;46m"     # Bright Green
    INFO = "\033[38;5;39m"        # Light Blue
    WARNING = "\033[38;5;214m"    # Orange/Amber
    QUOTE = "\033[3;38;5;51m"     # Italic Cyan


ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')


# Available palette configurations
PALETTES = {
    "amber": {
        "primary": ANSI.AMBER,
        "description": "Classic amber CRT terminal (default)"
    },
    "green": {
        "primary": ANSI.GREEN,
        "description": "Classic green phosphor terminal"
    },
    "white": {
        "primary": ANSI.WHITE,
        "description": "Modern white terminal"
    },
    "colorblind": {
        "primary": ANSI.CB_CYAN,
        "description": "High contrast blue/cyan (colorblind-friendly)"
    },
    "high-contrast": {
        "primary": ANSI.HC_WHITE,
        "description": "Maximum contrast white on black"
    }
}


class CRTOutput:
    """
    Wraps all text output for the investigation console.
    Features: palettes, scanlines, typewriter crawl, capture mode.
    """

    def __init__(self, palette="amber", crawl_speed=0.0, stream=None):
        self.palette = palette
        self.crawl_speed = crawl_speed  # Seconds per character
        self.enabled = True
        self.stream = stream

        # Capture support (tests, embedding)
        self.capture_mode = False
        self.buffer = []

        self.set_palette(palette)

    def set_palette(self, palette_name):
        """Set the color palette. Unknown names fall back to white."""
        self.palette = palette_name
        if palette_name in PALETTES:
            self.color = PALETTES[palette_name]["primary"]
        else:
            self.color = ANSI.WHITE

    @staticmethod
    def get_available_palettes():
        """Return list of available palette names and descriptions."""
        return {name: config["description"] for name, config in PALETTES.items()}

    def start_capture(self):
        """Start buffering output instead of printing to stdout."""
        self.capture_mode = True
        self.buffer = []

    def stop_capture(self):
        """Stop buffering and return collected messages."""
        messages = self.buffer
        self.capture_mode = False
        self.buffer = []
        return messages

    def captured_text(self):
        """Everything captured so far as one newline-joined string."""
        return "\n".join(self.buffer)

    def _write_line(self, line):
        print(line, file=self.stream or sys.stdout)

    def output(self, text, crawl=False):
        """
        Main output method. Replaces print().
        """
        if self.capture_mode:
            self.buffer.append(ANSI_PATTERN.sub('', text))
            return

        if not self.enabled:
            self._write_line(text)
            return

        colored_text = f"{self.color}{text}{ANSI.RESET}"

        if crawl and self.crawl_speed > 0:
            self._crawl_text(colored_text)
            return

        # Dim every other line of multi-line output (scanline effect)
        lines = colored_text.split('\n')
        for i, line in enumerate(lines):
            if i % 2 == 1:
                self._write_line(f"{ANSI.DIM}{line}{ANSI.RESET}")
            else:
                self._write_line(line)

    def event(self, text, type="info"):
        """
        Output a game event with specific coloring.
        Types: 'danger', 'success', 'info', 'warning', 'quote', 'system'
        """
        if self.capture_mode:
            self.buffer.append(f"[{type.upper()}] {text}")
            return

        prefix = {
            "danger": "[!!] ",
            "success": "[OK] ",
            "info": "[i] ",
            "warning": "[!] ",
            "system": ":: ",
            "quote": ""
        }.get(type, "")

        if not self.enabled:
            self._write_line(f"{prefix}{text}")
            return

        color = {
            "danger": ANSI.DANGER,
            "success": ANSI.SUCCESS,
            "info": ANSI.INFO,
            "warning": ANSI.WARNING,
            "quote": ANSI.QUOTE,
        }.get(type, self.color)
        self._write_line(f"{color}{prefix}{text}{ANSI.RESET}")

    def warning(self, text):
        """
        High-visibility warning message.
        """
        if self.capture_mode:
            self.buffer.append(f"[WARNING] {text}")
        elif not self.enabled:
            self._write_line(f"[!] {text}")
        else:
            self._write_line(f"{ANSI.BLINK}{self.color}[!] {text}{ANSI.RESET}")

    def header(self, text, width=50):
        """Render a boxed header line."""
        bar = "=" * width
        self.output(f"{bar}\n{text.center(width)}\n{bar}")

    def prompt(self, text="CMD"):
        """
        Render the command prompt.
        """
        if self.capture_mode or not self.enabled:
            return f"{text}> "
        return f"{self.color}{ANSI.BOLD}{text}>{ANSI.RESET} "

    def _crawl_text(self, text):
        """Typewriter reveal, one character at a time."""
        out = self.stream or sys.stdout
        for char in text:
            out.write(char)
            out.flush()
            if char not in '\n\r':
                time.sleep(self.crawl_speed)
        out.write(ANSI.RESET + "\n")
