"""Tests for error records, settings, logging and testing helpers."""

from __future__ import annotations

import io

import orjson
import pytest
from pydantic import ValidationError

from failable import configure_logging, failable_pipe, failable_sequence, failure, get_logger, log_context, success
from failable.foundation.config import clear_settings_cache, get_settings
from failable.foundation.errors import (
    ErrorInfo,
    error_info,
    error_info_from_exc,
    error_message,
    validate_error_info,
)
from failable.foundation.testing import assert_failure, assert_success
from failable.runtime.observability import BoundLogger, ConsoleRenderer, JsonRenderer, NoOpRenderer


# ═════════════════════════════════════════════════════════════════════════════
# Errors
# ═════════════════════════════════════════════════════════════════════════════


def test_error_info_helpers() -> None:
    assert error_info("oops") == ErrorInfo(message="oops")
    assert str(ErrorInfo(message="oops")) == "oops"
    assert str(ErrorInfo(message="oops", cause="KeyError: 'a'")) == "oops (KeyError: 'a')"


def test_error_info_from_exc() -> None:
    try:
        raise ValueError("bad value")
    except ValueError as exc:
        info = error_info_from_exc(exc, "wrapped")

    assert info.message == "wrapped"
    assert info.cause == "ValueError: bad value"
    assert "Traceback" in info.details
    assert "details" not in repr(info)


def test_error_info_is_frozen() -> None:
    info = ErrorInfo(message="x")
    with pytest.raises(ValidationError):
        info.message = "y"  # type: ignore[misc]


def test_validate_error_info() -> None:
    assert validate_error_info({"message": "m"}) == ErrorInfo(message="m")
    with pytest.raises(ValidationError):
        validate_error_info({"cause": "no message"})
    with pytest.raises(ValidationError):
        validate_error_info({"message": "m", "unknown": 1})


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ErrorInfo(message="a"), "a"),
        ({"message": "b", "code": 1}, "b"),
        (ValueError("c"), "c"),
        ("d", "d"),
        (None, None),
        (42, None),
    ],
)
def test_error_message(error: object, expected: str | None) -> None:
    assert error_message(error) == expected


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("FAILABLE_DEBUG", "FAILABLE_LOG_LEVEL", "FAILABLE_LOG_FORMAT", "FAILABLE_LOG_COLORS"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()

    settings = get_settings()
    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.effective_log_level == "INFO"
    assert get_settings() is settings


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAILABLE_LOG_LEVEL", "warning")
    monkeypatch.setenv("FAILABLE_LOG_FORMAT", "json")
    clear_settings_cache()

    settings = get_settings()
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "json"


def test_debug_flag_lowers_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAILABLE_DEBUG", "true")
    monkeypatch.setenv("FAILABLE_LOG_LEVEL", "ERROR")
    clear_settings_cache()

    assert get_settings().effective_log_level == "DEBUG"


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_configure_logging_formats() -> None:
    assert isinstance(configure_logging("console", "INFO", output=io.StringIO()), ConsoleRenderer)
    assert isinstance(configure_logging("json", "INFO", output=io.StringIO()), JsonRenderer)
    assert isinstance(configure_logging("none", "INFO"), NoOpRenderer)
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging("xml", "INFO")


def test_configure_logging_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAILABLE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FAILABLE_LOG_FORMAT", "console")
    clear_settings_cache()
    buf = io.StringIO()

    configure_logging(output=buf)
    get_logger("test").debug("hello", x=1)

    out = buf.getvalue()
    assert "[debug] hello" in out
    assert "x=1" in out
    assert 'logger="test"' in out


def test_level_filtering() -> None:
    buf = io.StringIO()
    configure_logging("console", "WARNING", output=buf, colors=False)
    log = get_logger()

    log.info("hidden")
    log.warning("shown")

    assert "hidden" not in buf.getvalue()
    assert "shown" in buf.getvalue()


def test_bound_logger_context() -> None:
    buf = io.StringIO()
    log = BoundLogger(context={"a": 1}, _renderer=JsonRenderer(output=buf), _level=0)

    with log_context(request="r1"):
        log.bind(b=2).unbind("a").info("event", c=3)
    log.new(d=4).info("after")

    first, second = (orjson.loads(line) for line in buf.getvalue().splitlines())
    assert first["event"] == "event"
    assert (first["request"], first["b"], first["c"]) == ("r1", 2, 3)
    assert "a" not in first
    assert second["d"] == 4
    assert "request" not in second


@pytest.mark.asyncio
async def test_pipeline_logs_short_circuit_at_debug() -> None:
    buf = io.StringIO()
    configure_logging("json", "DEBUG", output=buf)

    def boom(_: object) -> None:
        raise KeyError("missing")

    await failable_sequence([lambda n: success(n), boom])(1)
    await failable_pipe([lambda n: failure("stop")])(1)

    entries = [orjson.loads(line) for line in buf.getvalue().splitlines()]
    raised = next(e for e in entries if e["event"] == "stage raised")
    assert raised["index"] == 1
    assert raised["cause"] == "KeyError: 'missing'"

    short = [e for e in entries if e["event"] == "short-circuit"]
    assert [(e["pipeline"], e["index"]) for e in short] == [("sequence", 1), ("pipe", 0)]


@pytest.mark.asyncio
async def test_pipeline_logs_stage_start_and_finish() -> None:
    buf = io.StringIO()
    configure_logging("json", "DEBUG", output=buf)

    await failable_pipe([lambda n: success(n + 1), lambda n: success(n * 2)])(3)

    entries = [orjson.loads(line) for line in buf.getvalue().splitlines()]
    stages = [(e["event"], e["pipeline"], e["index"]) for e in entries if e["event"].startswith("stage ")]
    assert stages == [("stage started", "pipe", 0), ("stage finished", "pipe", 0),
                      ("stage started", "pipe", 1), ("stage finished", "pipe", 1)]
    assert all(e["success"] for e in entries if e["event"] == "stage finished")
    assert entries[-1]["event"] == "all stages succeeded"
    assert entries[-1]["stages"] == 2


@pytest.mark.asyncio
async def test_pipeline_is_silent_at_default_level() -> None:
    buf = io.StringIO()
    configure_logging("console", "INFO", output=buf)

    await failable_sequence([lambda n: failure("x")])(1)
    assert buf.getvalue() == ""


# ═════════════════════════════════════════════════════════════════════════════
# Testing Helpers
# ═════════════════════════════════════════════════════════════════════════════


def test_assert_success() -> None:
    assert assert_success(success("bar")) == "bar"
    assert assert_success(success("bar"), "bar") == "bar"
    with pytest.raises(AssertionError):
        assert_success(success("bar"), "foo")
    with pytest.raises(AssertionError):
        assert_success(failure("bar"))
    with pytest.raises(AssertionError):
        assert_success("bar")  # type: ignore[arg-type]


def test_assert_failure() -> None:
    assert assert_failure(failure("bar"), "bar") == ErrorInfo(message="bar")
    assert_failure(failure({"message": "bar"}), "bar")
    assert_failure(failure({"code": 1}), {"code": 1})
    with pytest.raises(AssertionError):
        assert_failure(failure("bar"), "foo")
    with pytest.raises(AssertionError):
        assert_failure(success("bar"))
