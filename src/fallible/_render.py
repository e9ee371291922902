"""String rendering shared by both result variants.

Payloads go through pydantic's JSON-compatible conversion and are then
dumped with indentation, so ``str(Ok({"a": 1}))`` reads like pretty JSON.
"""

from __future__ import annotations

import json
import reprlib
from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from fallible.config import effective_settings

if TYPE_CHECKING:
    from fallible.result import Result

__all__ = ["render_payload", "render_result"]


def _fallback(obj: Any) -> str:
    # Exceptions nested in a payload read best as their message.
    if isinstance(obj, BaseException):
        return str(obj)
    return repr(obj)


def render_payload(payload: Any, *, indent: int | None = None) -> str:
    """Serialize ``payload`` as indented JSON; never raises.

    Payloads the serializer rejects (circular or very deep containers,
    bytes that are not UTF-8) render as a depth-limited ``repr`` string.
    """
    if indent is None:
        indent = effective_settings().render_indent
    try:
        data = to_jsonable_python(payload, fallback=_fallback)
    except (PydanticSerializationError, ValueError, RecursionError):
        # UnicodeDecodeError is a ValueError; reprlib bounds recursion.
        data = reprlib.repr(payload)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def render_result(result: Result[Any, Any]) -> str:
    """Render whichever payload is present as ``Ok(...)`` or ``Err(...)``."""
    if result.is_ok:
        return f"Ok({render_payload(result.get_or_none())})"
    return f"Err({render_payload(result.error_or_none())})"
