"""fallible: errors as values.

Public API:
    - Ok / Err: the two variants of a Result
    - attempt() / attempt_async(): capture exceptions from a callable as Err
    - attempting / attempting_async: decorator forms of the adapters
    - Settings / get_settings() / settings_scope(): library options
"""

from __future__ import annotations

import logging

from fallible.adapters import attempt, attempt_async, attempting, attempting_async
from fallible.config import Settings, get_settings, settings_scope
from fallible.errors import ConfigurationError, FallibleError, UnwrapError
from fallible.result import AsyncResult, Err, Ok, Result, is_err, is_ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "AsyncResult",
    "ConfigurationError",
    "Err",
    "FallibleError",
    "Ok",
    "Result",
    "Settings",
    "UnwrapError",
    "attempt",
    "attempt_async",
    "attempting",
    "attempting_async",
    "get_settings",
    "is_err",
    "is_ok",
    "settings_scope",
]
