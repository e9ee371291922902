"""Adapters from exception-raising code to ``Result`` values.

``attempt`` and ``attempt_async`` run a zero-argument callable and capture
any ``Exception`` it raises as ``Err(exc)``; ``attempting`` and
``attempting_async`` do the same for every call of a decorated function.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` still propagate so that
interrupts and task cancellation behave as usual.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from fallible.config import effective_settings
from fallible.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fallible.result import Result

__all__ = ["attempt", "attempt_async", "attempting", "attempting_async"]

logger = logging.getLogger(__name__)


def _log_captured(fn: Callable[..., object], exc: Exception) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Captured %s from %s: %s",
        type(exc).__name__,
        getattr(fn, "__qualname__", repr(fn)),
        exc,
        exc_info=exc if effective_settings().log_captured_tracebacks else None,
    )


def attempt[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn()`` and wrap the outcome in a ``Result``.

    Args:
        fn: Zero-argument callable. Use ``functools.partial`` or a lambda to
            bind arguments.

    Returns:
        ``Ok(value)`` when ``fn`` returns, ``Err(exc)`` when it raises.

    Example:
        result = attempt(lambda: json.loads(raw))
        payload = result.get_or_default({})
    """
    try:
        value = fn()
    except Exception as exc:
        _log_captured(fn, exc)
        return Err(exc)
    return Ok(value)


async def attempt_async[T](fn: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """Await ``fn()`` once and wrap the outcome in a ``Result``.

    Exceptions raised while creating the awaitable and while awaiting it
    both become ``Err(exc)``. Nothing else is scheduled: no timeout, retry
    or cancellation handling is added around the single await.

    Example:
        result = await attempt_async(lambda: client.get(url))
        result.on_error(lambda exc: logger.warning("fetch failed: %s", exc))
    """
    try:
        value = await fn()
    except Exception as exc:
        _log_captured(fn, exc)
        return Err(exc)
    return Ok(value)


def attempting[**P, T](fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Decorate ``fn`` so every call returns a ``Result`` instead of raising.

    Example:
        @attempting
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port("80")    # Ok(80)
        parse_port("http")  # Err(ValueError(...))
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return attempt(functools.partial(fn, *args, **kwargs))

    return wrapper


def attempting_async[**P, T](
    fn: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]:
    """Async counterpart of ``attempting`` for coroutine functions."""

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return await attempt_async(functools.partial(fn, *args, **kwargs))

    return wrapper
