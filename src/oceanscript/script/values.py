"""Script value space.

Restricted scripts see plain Python values: numbers, strings, booleans,
``None``, lists/tuples and mappings. Objects handed to scripts by the host are
:class:`ScriptObject` instances, which read like dicts and like attribute
bags but cannot be modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator


class _Undefined:
    """Marker for a positional argument the script did not pass."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


class ScriptObject(Mapping):
    """Immutable, ordered field set exposed to scripts."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        merged = dict(fields or {})
        merged.update(kwargs)
        object.__setattr__(self, "_fields", merged)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getattribute__(self, name: str) -> Any:
        # fields shadow Mapping methods, so a field named "get" stays reachable
        if not name.startswith("_"):
            fields = object.__getattribute__(self, "_fields")
            if name in fields:
                return fields[name]
        return object.__getattribute__(self, name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScriptObject):
            return self._fields == other._fields
        if isinstance(other, Mapping):
            return self._fields == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"cannot set field {name!r}: object is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete field {name!r}: object is read-only")

    def __repr__(self) -> str:
        body = ", ".join(f"{key}={value!r}" for key, value in self._fields.items())
        return f"ScriptObject({body})"


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_object(value: object) -> bool:
    return isinstance(value, Mapping)


def to_script_value(value: Any) -> Any:
    """Convert a host value into the script value space.

    Raises
    ------
    TypeError
        If ``value`` (or anything nested in it) has no script representation.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, ScriptObject):
        return value
    if isinstance(value, Mapping):
        converted = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, got {type(key).__name__}")
            converted[key] = to_script_value(item)
        return ScriptObject(converted)
    if isinstance(value, (list, tuple)):
        return tuple(to_script_value(item) for item in value)
    raise TypeError(f"unsupported value of type {type(value).__name__}")


__all__ = ["UNDEFINED", "ScriptObject", "is_number", "is_object", "to_script_value"]
