"""Configuration module — frozen dataclass of logging options loaded from environment variables."""

import os
from dataclasses import dataclass, replace
from datetime import date

from write_log.errors import LogValidationError
from write_log.levels import LogLevel, parse_level

DEFAULT_LOG_PREFIX = "PowerShell"
MIN_INDENT = 0
MAX_INDENT = 10


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def default_log_path(today: date | None = None, cwd: str | None = None) -> str:
    """One file per calendar day in the working directory: <cwd>/PowerShell-YYYY-MM-DD.log."""
    today = today or date.today()
    cwd = cwd or os.getcwd()
    return os.path.join(cwd, f"{DEFAULT_LOG_PREFIX}-{today:%Y-%m-%d}.log")


@dataclass(frozen=True)
class LogOptions:
    level: LogLevel = LogLevel.INFO
    log_path: str | None = None  # None -> default_log_path()
    indent_level: int = 0
    suppress_console: bool = False
    color: bool = True

    def resolve_path(self) -> str:
        return self.log_path or default_log_path()


_ENV_READERS = {
    "level": lambda: parse_level(os.environ.get("WRITE_LOG_LEVEL", LogOptions.level.value)),
    "log_path": lambda: os.environ.get("WRITE_LOG_PATH") or None,
    "indent_level": lambda: _parse_indent(
        os.environ.get("WRITE_LOG_INDENT", str(LogOptions.indent_level))
    ),
    "suppress_console": lambda: _parse_bool(os.environ.get("WRITE_LOG_SUPPRESS_CONSOLE", "false")),
    "color": lambda: not os.environ.get("NO_COLOR"),
}


def load_config(**overrides) -> LogOptions:
    """Build LogOptions from defaults <- env vars <- overrides (highest priority).

    A field given a non-None override never reads its env var, so a bad
    value in the environment cannot block an explicit setting.
    """
    kwargs = {}
    for name, read_env in _ENV_READERS.items():
        value = overrides.get(name)
        kwargs[name] = value if value is not None else read_env()
    return LogOptions(**kwargs)


def _parse_indent(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise LogValidationError(f"Indent level must be an integer, got {value!r}") from None


def validate_options(options: LogOptions) -> LogOptions:
    """Check level and indent range. Returns options with the level normalised to a LogLevel."""
    level = parse_level(options.level)
    indent = options.indent_level
    if isinstance(indent, bool) or not isinstance(indent, int):
        raise LogValidationError(f"Indent level must be an integer, got {indent!r}")
    if not MIN_INDENT <= indent <= MAX_INDENT:
        raise LogValidationError(
            f"Indent level {indent} is outside the range {MIN_INDENT}..{MAX_INDENT}"
        )
    if level is options.level:
        return options
    return replace(options, level=level)


def validate_message(message) -> str:
    if not isinstance(message, str):
        raise LogValidationError(f"Message must be text, got {type(message).__name__}")
    if not message:
        raise LogValidationError("Message must not be empty")
    return message
