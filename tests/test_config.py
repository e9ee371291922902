"""Settings resolution tests: defaults, environment variables, validation."""

from __future__ import annotations

import dataclasses
import logging

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from fallible import (
    ConfigurationError,
    Err,
    Settings,
    attempt,
    get_settings,
    settings_scope,
)
from fallible.config import effective_settings, log_tracebacks_enabled

pytestmark = pytest.mark.unit


def test_defaults_without_environment() -> None:
    resolved = get_settings()
    assert resolved == Settings()
    assert resolved.log_captured_tracebacks is False
    assert resolved.render_indent == 2


def test_settings_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Settings().render_indent = 4  # type: ignore[misc]


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("0", False), ("true", False)])
def test_log_tracebacks_flag_requires_exactly_one(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("FALLIBLE_LOG_TRACEBACKS", raw)
    assert get_settings().log_captured_tracebacks is expected


def test_render_indent_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", " 4 ")
    assert get_settings().render_indent == 4


def test_blank_render_indent_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "  ")
    assert get_settings().render_indent == 2


def test_non_integer_render_indent_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "wide")

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()

    assert "FALLIBLE_RENDER_INDENT" in str(exc_info.value)
    assert exc_info.value.hint


@given(indent=st.integers(max_value=-1))
@settings(max_examples=10, deadline=None, derandomize=True)
def test_negative_render_indent_is_rejected(indent: int) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        Settings(render_indent=indent)

    assert "FALLIBLE_RENDER_INDENT" in (exc_info.value.hint or "")


def test_environment_changes_apply_on_next_call(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_settings().render_indent == 2
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "0")
    assert get_settings().render_indent == 0


def test_log_tracebacks_override_takes_precedence(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FALLIBLE_LOG_TRACEBACKS", "1")
    assert log_tracebacks_enabled() is True
    assert log_tracebacks_enabled(override=False) is False
    monkeypatch.delenv("FALLIBLE_LOG_TRACEBACKS")
    assert log_tracebacks_enabled(override=True) is True


def test_invalid_render_indent_does_not_break_attempt(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "wide")
    error = ValueError("x")

    def explode() -> None:
        raise error

    assert attempt(explode) == Err(error)


# =============================================================================
# settings_scope
# =============================================================================


def test_scope_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "0")
    scoped = Settings(render_indent=4)

    with settings_scope(scoped) as active:
        assert active is scoped
        assert get_settings() is scoped

    assert get_settings().render_indent == 0


def test_scopes_nest_and_restore() -> None:
    outer = Settings(render_indent=1)
    inner = Settings(render_indent=3)

    with settings_scope(outer):
        with settings_scope(inner):
            assert get_settings() is inner
        assert get_settings() is outer
    assert get_settings() == Settings()


def test_scope_resets_after_exception() -> None:
    with pytest.raises(RuntimeError), settings_scope(Settings(render_indent=5)):
        raise RuntimeError("inside scope")

    assert get_settings() == Settings()


def test_scope_shields_from_invalid_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "wide")

    with settings_scope(Settings()):
        assert get_settings() == Settings()


# =============================================================================
# effective_settings
# =============================================================================


def test_effective_settings_fall_back_on_invalid_environment(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "-3")
    monkeypatch.setenv("FALLIBLE_LOG_TRACEBACKS", "1")

    with caplog.at_level(logging.WARNING, logger="fallible"):
        resolved = effective_settings()

    assert resolved == Settings(log_captured_tracebacks=True)
    assert any("FALLIBLE_RENDER_INDENT" in r.getMessage() for r in caplog.records)


def test_effective_settings_match_valid_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FALLIBLE_RENDER_INDENT", "3")
    assert effective_settings() == get_settings()
