"""JSON codec for identifier values and error values.

Identifiers travel as their canonical string; decoding goes back through the
identifier's own ``from_string`` so a decoded value is exactly as trusted as
a parsed one.

to_json(value) -> str: JSON string literal of the canonical form.
from_json(parse, text) -> Result[T, IdentError | str].
canonical_bytes(obj) -> Result[bytes, str]: deterministic JSON bytes.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable
from enum import Enum
from typing import Any

from finident.core.errors import IdentError
from finident.core.result import Err, Ok
from finident.core.types import UtcDatetime


def _is_identifier(obj: object) -> bool:
    return callable(getattr(obj, "to_string_tagged", None))


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert a value to a JSON-compatible Python value."""
    if obj is None:
        return None
    # bool before int (bool is subclass of int)
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, str)):
        return obj
    if _is_identifier(obj):
        return str(obj)
    if isinstance(obj, IdentError):
        return obj.to_dict()
    if isinstance(obj, UtcDatetime):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (tuple, list, frozenset)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.items())}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        field_names = sorted(f.name for f in dataclasses.fields(obj))
        result: dict[str, Any] = {"_type": type(obj).__name__}
        for name in field_names:
            result[name] = _to_serializable(getattr(obj, name))
        return result
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Deterministic JSON bytes. Returns Err on unsupported types."""
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8"))


def to_json(value: object) -> str:
    """JSON string literal holding the identifier's canonical form."""
    if not _is_identifier(value):
        raise TypeError(f"Expected an identifier value, got {type(value).__name__}")
    return json.dumps(str(value))


def from_json[T](parse: Callable[[str], Ok[T] | Err[IdentError]], text: str) -> Ok[T] | Err[IdentError | str]:
    """Decode a JSON string literal with ``parse`` (e.g. ``Cusip.from_string``)."""
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(f"Invalid JSON: {e}")
    if not isinstance(decoded, str):
        return Err(f"Expected a JSON string, got {type(decoded).__name__}")
    return parse(decoded)
