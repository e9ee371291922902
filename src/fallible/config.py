"""Configuration: frozen Settings resolved from the environment or a scope."""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fallible.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator

load_dotenv()

logger = logging.getLogger(__name__)

LOG_TRACEBACKS_ENV = "FALLIBLE_LOG_TRACEBACKS"
RENDER_INDENT_ENV = "FALLIBLE_RENDER_INDENT"


@dataclass(frozen=True)
class Settings:
    """Immutable library settings.

    Example:
        with settings_scope(Settings(render_indent=4)):
            print(Ok({"a": 1}))  # rendered with four-space indentation
    """

    #: Attach ``exc_info`` when adapters log a captured exception.
    log_captured_tracebacks: bool = False
    #: JSON indentation used when rendering a result with ``str()``.
    render_indent: int = 2

    def __post_init__(self) -> None:
        """Validate numeric fields."""
        if self.render_indent < 0:
            raise ConfigurationError(
                f"render_indent must be ≥ 0, got {self.render_indent}",
                hint=f"Set {RENDER_INDENT_ENV} to a non-negative integer.",
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``FALLIBLE_*`` environment variables."""
        raw_indent = os.environ.get(RENDER_INDENT_ENV)
        if raw_indent is None or not raw_indent.strip():
            indent = cls.render_indent
        else:
            try:
                indent = int(raw_indent)
            except ValueError:
                raise ConfigurationError(
                    f"{RENDER_INDENT_ENV} must be an integer, got {raw_indent!r}",
                    hint=f"Unset {RENDER_INDENT_ENV} to use the default of 2.",
                ) from None

        return cls(
            log_captured_tracebacks=log_tracebacks_enabled(),
            render_indent=indent,
        )


def log_tracebacks_enabled(*, override: bool | None = None) -> bool:
    """Return True when captured exceptions should be logged with tracebacks.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when ``FALLIBLE_LOG_TRACEBACKS`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(LOG_TRACEBACKS_ENV) == "1"


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "fallible_settings", default=None
)


@contextmanager
def settings_scope(settings: Settings) -> Generator[Settings]:
    """Use ``settings`` instead of the environment inside the ``with`` block.

    Scopes nest and are isolated per thread and per asyncio task.
    """
    token = _AMBIENT.set(settings)
    try:
        yield settings
    finally:
        _AMBIENT.reset(token)


def get_settings() -> Settings:
    """Return the active settings.

    The innermost ``settings_scope`` wins; otherwise the environment is read
    on every call so changes take effect immediately. Raises
    ``ConfigurationError`` when a ``FALLIBLE_*`` variable is invalid.
    """
    scoped = _AMBIENT.get()
    if scoped is not None:
        return scoped
    return Settings.from_env()


def effective_settings() -> Settings:
    """Return the active settings, falling back to defaults when invalid.

    Rendering and the adapters use this so a bad ``FALLIBLE_*`` value can
    never make ``str(result)`` or ``attempt()`` raise.
    """
    try:
        return get_settings()
    except ConfigurationError as exc:
        logger.warning("Ignoring invalid fallible settings: %s (%s)", exc, exc.hint)
        return Settings(log_captured_tracebacks=log_tracebacks_enabled())
