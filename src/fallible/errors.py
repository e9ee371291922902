"""Exception hierarchy for fallible."""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FallibleError):
    """Settings could not be resolved from the environment."""


class UnwrapError(FallibleError):
    """``get_or_raise()`` was called on an ``Err`` holding a non-exception.

    Exception payloads are re-raised as-is; everything else is carried here
    on ``error`` so callers can still recover the original value.
    """

    def __init__(self, error: Any, *, hint: str | None = None) -> None:
        super().__init__(
            f"get_or_raise() called on Err({error!r})",
            hint=hint or "Use fold(), get_or_default() or error_or_none() instead.",
        )
        self.error = error
