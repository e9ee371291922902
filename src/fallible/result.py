"""Result type for explicit, composable error handling.

A ``Result`` is exactly one of two frozen variants:

- ``Ok(value)``: the computation succeeded with ``value``.
- ``Err(error)``: the computation failed with ``error``.

Both variants expose the same operations, so callers can transform and
inspect a result without branching on its variant first::

    Ok(42).map(lambda x: x * 2).fold(lambda v: v, lambda e: -1)  # 84

The variant set is closed, so ``match`` statements over ``Ok(value)`` and
``Err(error)`` are exhaustive. ``Ok`` has no ``error`` field and ``Err``
has no ``value`` field; type checkers reject reads of the wrong one.
"""

from __future__ import annotations

from collections.abc import Awaitable
import dataclasses
from typing import TYPE_CHECKING, Any, Literal, NoReturn, TypeGuard, TypeVar

from fallible._render import render_result
from fallible.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["AsyncResult", "Err", "Ok", "Result", "is_err", "is_ok"]

T = TypeVar("T")
E = TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful outcome holding ``value``."""

    value: T

    @property
    def is_ok(self) -> Literal[True]:
        return True

    @property
    def is_error(self) -> Literal[False]:
        return False

    def get_or_none(self) -> T:
        """Return the value."""
        return self.value

    def get_or_default[D](self, default: D) -> T:
        """Return the value; ``default`` is ignored."""
        del default
        return self.value

    def get_or_raise(self) -> T:
        """Return the value. Never raises for ``Ok``."""
        return self.value

    def error_or_none(self) -> None:
        return None

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Transform the value. Exceptions raised by ``fn`` propagate."""
        return Ok(fn(self.value))

    def map_error(self, fn: Callable[[Any], Any]) -> Ok[T]:
        """No-op for ``Ok``."""
        del fn
        return self

    def fold[R](self, on_ok: Callable[[T], R], on_error: Callable[[Any], R]) -> R:
        """Collapse to a single value by applying ``on_ok`` to the value."""
        del on_error
        return on_ok(self.value)

    def on_ok(self, fn: Callable[[T], object]) -> None:
        """Call ``fn`` with the value for its side effect."""
        fn(self.value)

    def on_error(self, fn: Callable[[Any], object]) -> None:
        """No-op for ``Ok``."""
        del fn

    def __str__(self) -> str:
        return render_result(self)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed outcome holding ``error``.

    ``error`` may be any value. Exceptions get two special cases:
    ``get_or_raise()`` re-raises the same object, and ``str()`` shows the
    exception message instead of a JSON rendering.
    """

    error: E

    @property
    def is_ok(self) -> Literal[False]:
        return False

    @property
    def is_error(self) -> Literal[True]:
        return True

    def get_or_none(self) -> None:
        return None

    def get_or_default[D](self, default: D) -> D:
        """Return ``default``."""
        return default

    def get_or_raise(self) -> NoReturn:
        """Raise the stored error.

        Exception payloads are raised unchanged so existing ``except``
        clauses still match; any other payload is raised inside an
        ``UnwrapError``.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def error_or_none(self) -> E:
        """Return the error."""
        return self.error

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        """No-op for ``Err``."""
        del fn
        return self

    def map_error[F](self, fn: Callable[[E], F]) -> Err[F]:
        """Transform the error. Exceptions raised by ``fn`` propagate."""
        return Err(fn(self.error))

    def fold[R](self, on_ok: Callable[[Any], R], on_error: Callable[[E], R]) -> R:
        """Collapse to a single value by applying ``on_error`` to the error."""
        del on_ok
        return on_error(self.error)

    def on_ok(self, fn: Callable[[Any], object]) -> None:
        """No-op for ``Err``."""
        del fn

    def on_error(self, fn: Callable[[E], object]) -> None:
        """Call ``fn`` with the error for its side effect."""
        fn(self.error)

    def __str__(self) -> str:
        if isinstance(self.error, BaseException):
            return f"Err({self.error})"
        return render_result(self)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[E]

#: Awaitable of a ``Result``, as returned by ``attempt_async``.
AsyncResult = Awaitable[Result[T, E]]


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard for the ``Ok`` variant."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard for the ``Err`` variant."""
    return isinstance(result, Err)