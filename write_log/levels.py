"""Log levels — fixed-width labels and ANSI console colors."""

from enum import Enum

from write_log.errors import LogValidationError

LABEL_WIDTH = 7

# ANSI color codes
COLORS = {
    "Info": "\033[36m",     # cyan
    "Success": "\033[32m",  # green
    "Warning": "\033[33m",  # yellow
    "Error": "\033[31m",    # red
    "Debug": "\033[35m",    # magenta
}
RESET = "\033[0m"


class LogLevel(Enum):
    INFO = "Info"
    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"
    DEBUG = "Debug"

    @property
    def label(self) -> str:
        """Upper-case name padded so every level prints at the same width."""
        return f"{self.name:<{LABEL_WIDTH}}"

    @property
    def color(self) -> str:
        return COLORS[self.value]


def parse_level(value) -> LogLevel:
    """Accept a LogLevel or its name in any case ('warning', 'WARNING', 'Warning')."""
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in LogLevel.__members__:
            return LogLevel[key]
    choices = ", ".join(level.value for level in LogLevel)
    raise LogValidationError(f"Invalid log level {value!r} (expected one of: {choices})")
