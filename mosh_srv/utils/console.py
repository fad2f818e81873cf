"""Colorful console logging formatter."""

import logging
import re
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "mosh_srv.services.resolver": COLORS["bright_cyan"],
    "mosh_srv.services.shell": COLORS["bright_magenta"],
    "mosh_srv.services.dispatch": COLORS["bright_blue"],
    "mosh_srv.config": COLORS["green"],
    "default": COLORS["white"],
}

# host:port or host:low:high, e.g. "mosh.example.com:60001"
HOST_PORT_PATTERN = re.compile(r"([\w\.\-]+\.[\w\-]+:\d+(?::\d+)?)")
# SRV owner names, e.g. "_mosh._udp.example.com"
SRV_NAME_PATTERN = re.compile(r"(_[\w\-]+\._(?:udp|tcp)\.[\w\.\-]+)")


class ColorfulFormatter(logging.Formatter):
    """Log formatter with level colors and component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        """Format timestamp in local time."""
        dt = datetime.fromtimestamp(record.created)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d}"

    def _format_level(self, record: logging.LogRecord) -> str:
        """Format log level with color and fixed width."""
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        """Format component/logger name with color."""
        name = record.name
        if name.startswith("mosh_srv."):
            name = name[len("mosh_srv."):]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<18}", color)

    def _highlight_message(self, message: str) -> str:
        """Highlight SRV names and endpoints in log messages."""
        if not self.use_colors:
            return message

        if "._" in message:
            message = SRV_NAME_PATTERN.sub(
                f"{COLORS['bright_cyan']}\\1{COLORS['reset']}",
                message,
            )

        if ":" in message:
            message = HOST_PORT_PATTERN.sub(
                f"{COLORS['bright_magenta']}\\1{COLORS['reset']}",
                message,
            )

        return message

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as ``time | level | component | message``."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
