"""Tests for field resolvers"""

import os
from datetime import datetime, timedelta

import pytest

from pattern_logger.core import internal_log
from pattern_logger.core.log_entry import LogEntry, START_TIME
from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.throwable_info import ThrowableInformation
from pattern_logger.pattern import (
    DEFAULT_WORD_TABLE,
    FIELD_RESOLVERS,
    FieldKind,
    FieldResolver,
    LOCATION_NA,
    compile_pattern,
)


def render(pattern, entry, word_table=None):
    return compile_pattern(pattern, word_table).format(entry)


@pytest.fixture
def entry():
    return LogEntry(
        level=LogLevel.WARN,
        message="Disk almost full",
        timestamp=datetime(2024, 1, 2, 3, 4, 5, 678000),
        thread_name="worker-1",
        process_id=4242,
        logger_name="app.db.pool",
        extra={"user": "bob", "request": 7},
    )


@pytest.fixture
def located_entry():
    return LogEntry(
        level=LogLevel.ERROR,
        message="failed",
        file_name="app/main.py",
        line_number=42,
        function_name="run",
    )


@pytest.fixture
def warnings():
    collected = []
    previous = internal_log.set_warning_handler(collected.append)
    yield collected
    internal_log.set_warning_handler(previous)


class TestRegistry:
    """Test the word table and resolver registry."""

    def test_every_kind_has_resolver(self):
        for kind in FieldKind:
            assert issubclass(FIELD_RESOLVERS[kind], FieldResolver)

    def test_every_word_maps_to_kind(self):
        for word, kind in DEFAULT_WORD_TABLE.items():
            assert word.isalpha()
            assert kind in FIELD_RESOLVERS

    def test_aliases(self, entry):
        assert render("%p %le %level", entry) == "WARN WARN WARN"
        assert render("%m|%msg|%message", entry) == "Disk almost full|" * 2 + "Disk almost full"
        assert render("%c %lo %logger", entry) == "app.db.pool app.db.pool app.db.pool"


class TestDate:
    """Test %d."""

    def test_default_is_iso8601(self, entry):
        assert render("%d", entry) == "2024-01-02T03:04:05.678"
        assert render("%d{ISO8601}", entry) == "2024-01-02T03:04:05.678"

    def test_named_formats(self, entry):
        assert render("%d{ABSOLUTE}", entry) == "03:04:05"
        assert render("%date{DATE}", entry) == "02 Jan 2024 03:04:05"

    def test_strftime_format(self, entry):
        assert render("%d{%Y/%m/%d %H:%M}", entry) == "2024/01/02 03:04"


class TestLoggerName:
    """Test %c."""

    def test_full_name(self, entry):
        assert render("%c", entry) == "app.db.pool"

    def test_depth(self, entry):
        assert render("%c{1}", entry) == "pool"
        assert render("%c{2}", entry) == "db.pool"
        assert render("%c{10}", entry) == "app.db.pool"

    def test_zero_depth_is_full_name(self, entry):
        assert render("%c{0}", entry) == "app.db.pool"

    def test_negative_depth_rejected(self, entry, warnings):
        assert render("%c{-1}", entry) == "app.db.pool"
        assert len(warnings) == 1

    def test_depth_with_width(self, entry):
        assert render("%-6c{1}|", entry) == "pool  |"


class TestLocation:
    """Test %F, %L, %M and %l."""

    def test_without_location(self, entry):
        assert render("%F:%L %M %l", entry) == " ".join([
            f"{LOCATION_NA}:{LOCATION_NA}", LOCATION_NA, LOCATION_NA
        ])

    def test_with_location(self, located_entry):
        assert render("%F:%L %M", located_entry) == "app/main.py:42 run"
        assert render("%l", located_entry) == "run(app/main.py:42)"

    def test_truncated_file(self, located_entry):
        assert render("%.-7F", located_entry) == "main.py"


class TestThrowable:
    """Test %ex."""

    def test_without_exception(self, entry):
        assert render("%m%ex", entry) == "Disk almost full"

    def test_traceback_lines_joined(self):
        try:
            raise ValueError("boom")
        except ValueError as e:
            error = e

        entry = LogEntry(level=LogLevel.ERROR, message="failed", throwable=error)
        assert isinstance(entry.throwable, ThrowableInformation)

        output = render("%ex", entry)
        lines = output.split(os.linesep)
        assert lines[0] == "Traceback (most recent call last):"
        assert lines[-1] == "ValueError: boom"
        assert output == os.linesep.join(entry.throwable.get_string_representation())

    def test_width_applies_to_joined_text(self):
        entry = LogEntry(
            level=LogLevel.ERROR,
            message="failed",
            throwable=ThrowableInformation(RuntimeError("x")),
        )
        assert render("%.-14throwable", entry) == "RuntimeError: x"[-14:]


class TestContextFields:
    """Test %X, %e, %t, %pid, %r and %n."""

    def test_mdc_key(self, entry):
        assert render("%X{user}", entry) == "bob"
        assert render("%mdc{request}", entry) == "7"

    def test_mdc_missing_key(self, entry):
        assert render("[%X{missing}]", entry) == "[]"

    def test_mdc_all(self, entry):
        assert render("%X", entry) == "user=bob, request=7"

    def test_env(self, entry, monkeypatch):
        monkeypatch.setenv("PATTERN_LOGGER_TEST_ENV", "prod")
        monkeypatch.delenv("PATTERN_LOGGER_UNSET", raising=False)
        assert render("%e{PATTERN_LOGGER_TEST_ENV}", entry) == "prod"
        assert render("[%env{PATTERN_LOGGER_UNSET}]", entry) == "[]"
        assert render("[%e]", entry) == "[]"

    def test_thread_and_process(self, entry):
        assert render("%t %pid %process", entry) == "worker-1 4242 4242"

    def test_relative(self):
        entry = LogEntry(
            level=LogLevel.INFO,
            message="x",
            timestamp=START_TIME + timedelta(milliseconds=1500),
        )
        assert render("%r", entry) == "1500"

    def test_newline(self, entry):
        assert render("%m%n", entry) == "Disk almost full" + os.linesep


class UpperMessageResolver(FieldResolver):
    def resolve(self, entry):
        return entry.message.upper()


class FailingResolver(FieldResolver):
    def resolve(self, entry):
        raise KeyError("missing")


class TestCustomResolvers:
    """Test word tables pointing straight at resolver classes."""

    def test_custom_resolver(self, entry):
        table = dict(DEFAULT_WORD_TABLE, U=UpperMessageResolver)
        assert render("%p %U", entry, table) == "WARN DISK ALMOST FULL"

    def test_failing_resolver_renders_empty(self, entry, warnings):
        output = render("[%boom]", entry, {"boom": FailingResolver})
        assert output == "[]"
        assert len(warnings) == 1
        assert "%boom" in warnings[0]

    def test_repeated_failures_reported_once(self, entry, warnings):
        chain = compile_pattern("[%boom]", {"boom": FailingResolver})
        outputs = [chain.format(entry) for _ in range(5)]
        assert outputs == ["[]"] * 5
        assert len(warnings) == 1

    def test_each_failing_directive_reported(self, entry, warnings):
        chain = compile_pattern("%boom %boom", {"boom": FailingResolver})
        chain.format(entry)
        chain.format(entry)
        assert len(warnings) == 2

    def test_failing_resolver_still_padded(self, entry, warnings):
        assert render("[%3boom]", entry, {"boom": FailingResolver}) == "[   ]"
