"""Line formatting — plain text for the file, ANSI-colored for the console."""

from datetime import datetime

from write_log.levels import RESET, LogLevel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
INDENT_UNIT = "  "


def format_entry(message: str, level: LogLevel, indent_level: int, now: datetime) -> str:
    """Return '[YYYY-MM-DD HH:MM:SS] [LEVEL  ] <indent><message>' with no trailing newline."""
    ts = now.strftime(TIMESTAMP_FORMAT)
    indent = INDENT_UNIT * indent_level
    return f"[{ts}] [{level.label}] {indent}{message}"


def colorize(line: str, level: LogLevel) -> str:
    """Wrap the whole line in the level's foreground color."""
    return f"{level.color}{line}{RESET}"
