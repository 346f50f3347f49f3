"""Tests for the configuration module."""

import os
import unittest
from datetime import date

from write_log.config import (
    LogOptions,
    _parse_bool,
    default_log_path,
    load_config,
    validate_message,
    validate_options,
)
from write_log.errors import LogValidationError
from write_log.levels import LogLevel

ENV_KEYS = (
    "WRITE_LOG_LEVEL", "WRITE_LOG_PATH", "WRITE_LOG_INDENT",
    "WRITE_LOG_SUPPRESS_CONSOLE", "NO_COLOR",
)


class TestParseBool(unittest.TestCase):
    def test_true_values(self):
        for val in ("true", "True", "TRUE", "1", "yes", "YES", " true "):
            self.assertTrue(_parse_bool(val), f"Expected True for {val!r}")

    def test_false_values(self):
        for val in ("false", "False", "0", "no", "NO", "", "anything"):
            self.assertFalse(_parse_bool(val), f"Expected False for {val!r}")


class TestDefaultLogPath(unittest.TestCase):
    def test_daily_name_in_cwd(self):
        path = default_log_path(date(2025, 1, 20), "/work")
        self.assertEqual(path, os.path.join("/work", "PowerShell-2025-01-20.log"))

    def test_defaults_to_today_and_cwd(self):
        path = default_log_path()
        self.assertEqual(os.path.dirname(path), os.getcwd())
        self.assertEqual(
            os.path.basename(path), f"PowerShell-{date.today():%Y-%m-%d}.log"
        )


class TestLogOptionsDefaults(unittest.TestCase):
    def test_default_values(self):
        opts = LogOptions()
        self.assertIs(opts.level, LogLevel.INFO)
        self.assertIsNone(opts.log_path)
        self.assertEqual(opts.indent_level, 0)
        self.assertFalse(opts.suppress_console)
        self.assertTrue(opts.color)

    def test_frozen(self):
        opts = LogOptions()
        with self.assertRaises(AttributeError):
            opts.indent_level = 3

    def test_resolve_explicit_path(self):
        self.assertEqual(LogOptions(log_path="/tmp/x.log").resolve_path(), "/tmp/x.log")

    def test_resolve_default_path(self):
        self.assertEqual(LogOptions().resolve_path(), default_log_path())


class TestValidateOptions(unittest.TestCase):
    def test_indent_bounds_accepted(self):
        for indent in (0, 5, 10):
            opts = validate_options(LogOptions(indent_level=indent))
            self.assertEqual(opts.indent_level, indent)

    def test_indent_out_of_range(self):
        for indent in (-1, 11, 100):
            with self.assertRaises(LogValidationError):
                validate_options(LogOptions(indent_level=indent))

    def test_indent_must_be_int(self):
        for indent in ("2", 1.5, True, None):
            with self.assertRaises(LogValidationError):
                validate_options(LogOptions(indent_level=indent))

    def test_level_name_normalised(self):
        opts = validate_options(LogOptions(level="error"))
        self.assertIs(opts.level, LogLevel.ERROR)

    def test_invalid_level(self):
        with self.assertRaises(LogValidationError):
            validate_options(LogOptions(level="FATAL"))

    def test_unchanged_options_returned_as_is(self):
        opts = LogOptions(level=LogLevel.DEBUG)
        self.assertIs(validate_options(opts), opts)


class TestValidateMessage(unittest.TestCase):
    def test_accepts_text(self):
        self.assertEqual(validate_message("hello"), "hello")

    def test_rejects_empty(self):
        with self.assertRaises(LogValidationError):
            validate_message("")

    def test_rejects_none(self):
        with self.assertRaises(LogValidationError):
            validate_message(None)


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self._orig_env = os.environ.copy()
        for key in ENV_KEYS:
            os.environ.pop(key, None)

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self._orig_env)

    def test_defaults_without_env(self):
        self.assertEqual(load_config(), LogOptions())

    def test_env_var_overrides(self):
        os.environ["WRITE_LOG_LEVEL"] = "success"
        os.environ["WRITE_LOG_PATH"] = "/var/log/app/run.log"
        os.environ["WRITE_LOG_INDENT"] = "3"
        os.environ["WRITE_LOG_SUPPRESS_CONSOLE"] = "yes"
        os.environ["NO_COLOR"] = "1"
        cfg = load_config()
        self.assertIs(cfg.level, LogLevel.SUCCESS)
        self.assertEqual(cfg.log_path, "/var/log/app/run.log")
        self.assertEqual(cfg.indent_level, 3)
        self.assertTrue(cfg.suppress_console)
        self.assertFalse(cfg.color)

    def test_empty_path_means_default(self):
        os.environ["WRITE_LOG_PATH"] = ""
        self.assertIsNone(load_config().log_path)

    def test_invalid_level_env(self):
        os.environ["WRITE_LOG_LEVEL"] = "loud"
        with self.assertRaises(LogValidationError):
            load_config()

    def test_non_integer_indent_env(self):
        os.environ["WRITE_LOG_INDENT"] = "two"
        with self.assertRaises(LogValidationError):
            load_config()

    def test_overrides_beat_env(self):
        os.environ["WRITE_LOG_LEVEL"] = "Error"
        os.environ["WRITE_LOG_PATH"] = "/from/env.log"
        cfg = load_config(level="Debug", log_path="/from/flag.log", color=False)
        self.assertEqual(cfg.level, "Debug")
        self.assertEqual(cfg.log_path, "/from/flag.log")
        self.assertFalse(cfg.color)

    def test_none_override_falls_back_to_env(self):
        os.environ["WRITE_LOG_INDENT"] = "4"
        self.assertEqual(load_config(indent_level=None).indent_level, 4)

    def test_invalid_env_ignored_when_overridden(self):
        os.environ["WRITE_LOG_LEVEL"] = "loud"
        os.environ["WRITE_LOG_INDENT"] = "two"
        cfg = load_config(level=LogLevel.WARNING, indent_level=2)
        self.assertIs(cfg.level, LogLevel.WARNING)
        self.assertEqual(cfg.indent_level, 2)


if __name__ == "__main__":
    unittest.main()
