"""Tests for configuration value conversion"""

from pathlib import Path

import pytest

from pattern_logger import LoggerBuilder, LoggerConfig, LogLevel
from pattern_logger.core import internal_log
from pattern_logger.core.exceptions import OptionConversionError
from pattern_logger.core.option_converter import (
    substitute_variables,
    to_boolean,
    to_integer,
    to_level,
    to_positive_integer,
)


@pytest.fixture
def warnings():
    collected = []
    previous = internal_log.set_warning_handler(collected.append)
    yield collected
    internal_log.set_warning_handler(previous)


class TestToBoolean:
    """Test boolean conversion."""

    @pytest.mark.parametrize("value", [1, "1", True, "true", "on", "yes", "TRUE", " Yes "])
    def test_true_values(self, value):
        assert to_boolean(value) is True

    @pytest.mark.parametrize("value", [0, "0", False, "false", "off", "no", "OFF"])
    def test_false_values(self, value):
        assert to_boolean(value) is False

    def test_none(self):
        with pytest.raises(OptionConversionError) as exc_info:
            to_boolean(None)
        assert str(exc_info.value) == "Given value [NULL] cannot be converted to boolean."

    def test_invalid_string(self):
        with pytest.raises(OptionConversionError) as exc_info:
            to_boolean("foo")
        assert str(exc_info.value) == "Given value ['foo'] cannot be converted to boolean."

    def test_other_integers(self):
        with pytest.raises(OptionConversionError):
            to_boolean(2)


class TestToInteger:
    """Test integer conversion."""

    @pytest.mark.parametrize("value, expected", [
        ("1", 1), (1, 1), ("0", 0), (0, 0), ("-1", -1), (-1, -1),
    ])
    def test_valid(self, value, expected):
        assert to_integer(value) == expected

    @pytest.mark.parametrize("value, described", [
        (None, "NULL"),
        ("", "''"),
        ("foo", "'foo'"),
        (True, "true"),
        (False, "false"),
    ])
    def test_invalid(self, value, described):
        with pytest.raises(OptionConversionError) as exc_info:
            to_integer(value)
        assert str(exc_info.value) == f"Given value [{described}] cannot be converted to integer."

    def test_positive(self):
        assert to_positive_integer("5") == 5
        with pytest.raises(OptionConversionError):
            to_positive_integer("0")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            to_integer("x")


class TestToLevel:
    """Test level conversion."""

    def test_names_and_numbers(self):
        assert to_level("debug") == LogLevel.DEBUG
        assert to_level(LogLevel.ERROR) == LogLevel.ERROR
        assert to_level(30) == LogLevel.WARN

    def test_invalid(self):
        with pytest.raises(OptionConversionError):
            to_level("verbose")
        with pytest.raises(OptionConversionError):
            to_level(31)


class TestSubstituteVariables:
    """Test ${NAME} substitution."""

    def test_mapping(self):
        variables = {"MY_CONSTANT": "TEST", "OTHER_CONSTANT": "OTHER"}
        assert substitute_variables("Value of key is ${MY_CONSTANT}.", variables) == "Value of key is TEST."
        assert (
            substitute_variables("Value of key is ${MY_CONSTANT} or ${OTHER_CONSTANT}.", variables)
            == "Value of key is TEST or OTHER."
        )

    def test_similar_names(self):
        variables = {"MY_CONSTANT": "A", "MY_CONSTANT_CONSTANT": "B"}
        assert substitute_variables("${MY_CONSTANT_CONSTANT}/${MY_CONSTANT}", variables) == "B/A"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PATTERN_LOGGER_DIR", "/var/log/app")
        assert substitute_variables("${PATTERN_LOGGER_DIR}/log.txt") == "/var/log/app/log.txt"

    def test_unknown_becomes_empty(self):
        assert substitute_variables("[${NOPE}]", {}) == "[]"

    def test_no_references(self):
        assert substitute_variables("plain", {}) == "plain"


class TestConfigFromDict:
    """Test building configuration from an in-memory structure."""

    def test_string_values_converted(self):
        config = LoggerConfig.from_dict({
            "name": "app",
            "min_level": "debug",
            "async_mode": "off",
            "queue_size": "500",
            "batch_size": "50",
            "colored_output": "no",
            "capture_location": "yes",
            "conversion_pattern": "%d{ABSOLUTE} %-5p %c: %m",
        })
        assert config.name == "app"
        assert config.min_level == LogLevel.DEBUG
        assert config.async_mode is False
        assert config.queue_size == 500
        assert config.batch_size == 50
        assert config.colored_output is False
        assert config.capture_location is True
        assert config.conversion_pattern == "%d{ABSOLUTE} %-5p %c: %m"

    def test_log_file_substitution(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PATTERN_LOGGER_TMP", str(tmp_path))
        config = LoggerConfig.from_dict({"log_file": "${PATTERN_LOGGER_TMP}/app.log"})
        assert config.log_file == Path(str(tmp_path)) / "app.log"

    def test_none_keeps_default(self):
        config = LoggerConfig.from_dict({"min_level": None})
        assert config.min_level == LogLevel.INFO

    def test_unknown_keys_warned(self, warnings):
        config = LoggerConfig.from_dict({"name": "app", "appenders": {}})
        assert config.name == "app"
        assert warnings == ["Unknown configuration key [appenders]. Ignoring."]

    def test_invalid_value(self):
        with pytest.raises(OptionConversionError):
            LoggerConfig.from_dict({"async_mode": "maybe"})

    def test_invalid_combination(self):
        with pytest.raises(ValueError):
            LoggerConfig.from_dict({"queue_size": "10", "batch_size": "20"})

    def test_builder_from_config(self, tmp_path):
        config = LoggerConfig.from_dict({
            "name": "cfg",
            "async_mode": "false",
            "console_output": "false",
            "log_file": str(tmp_path / "cfg.log"),
            "conversion_pattern": "%c|%p|%m",
        })
        logger = LoggerBuilder.from_config(config).build()
        logger.warn("configured")
        logger.shutdown()

        assert (tmp_path / "cfg.log").read_text(encoding="utf-8") == "cfg|WARN|configured\n"


class TestWarningChannel:
    """Test the internal warning channel."""

    def test_default_prints_to_stderr(self, capsys):
        internal_log.warn("something odd")
        assert capsys.readouterr().err == "pattern_logger: something odd\n"

    def test_install_and_restore(self):
        collected = []
        previous = internal_log.set_warning_handler(collected.append)
        try:
            internal_log.warn("first")
            assert internal_log.get_warning_handler() == collected.append
        finally:
            internal_log.set_warning_handler(previous)

        assert collected == ["first"]

    def test_per_call_handler(self, warnings):
        local = []
        internal_log.warn("local only", local.append)
        assert local == ["local only"]
        assert warnings == []

    def test_broken_handler(self, capsys):
        def broken(message):
            raise RuntimeError("handler down")

        internal_log.warn("lost?", broken)
        err = capsys.readouterr().err
        assert "lost?" in err
        assert "handler down" in err

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            internal_log.set_warning_handler("not callable")
