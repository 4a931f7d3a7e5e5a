"""
Substitution sources.

A template engine resolves each placeholder key through a single-method
capability: `resolve(key, format) -> value | ABSENT`. Two adapters cover the
supported shapes of caller input: a key -> value mapping and a callback.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Protocol, runtime_checkable


class _Absent:
    """Marker for "no value for this key"."""
    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

SubstitutionCallback = Callable[[str, Optional[str]], Any]


@runtime_checkable
class SubstitutionSource(Protocol):
    """
    Provider of placeholder values.

    `strict_format` tells the renderer whether a format specifier on a
    non-numeric value is an error (True) or was already consumed by the
    source (False).
    """
    strict_format: bool

    def resolve(self, key: str, format: Optional[str]) -> Any:
        ...


class MappingSource:
    """
    Mapping-backed source.

    Only real absence of a key is ABSENT: a key present with a None value
    resolves to None. Lookup goes through the mapping protocol, never through
    attributes, so names like "keys" or "__class__" are plain keys.
    """
    strict_format = True

    def __init__(self, mapping: Mapping[str, Any]):
        self.mapping = mapping

    def resolve(self, key: str, format: Optional[str]) -> Any:
        if key not in self.mapping:
            return ABSENT
        return self.mapping[key]


class CallbackSource:
    """
    Callback-backed source.

    The callback is invoked once per placeholder occurrence with the key and
    the raw format field (None if absent). Returning None or ABSENT means the
    key has no value. Any other return value is used as the substitution; a
    callback may format values itself and return text.
    """
    strict_format = False

    def __init__(self, callback: SubstitutionCallback):
        self.callback = callback

    def resolve(self, key: str, format: Optional[str]) -> Any:
        value = self.callback(key, format)
        if value is None:
            return ABSENT
        return value


def as_source(substitutions: Any) -> SubstitutionSource:
    """
    Adapts caller input to a SubstitutionSource.

    Accepts an existing source, a Mapping, or a callable.
    """
    if isinstance(substitutions, SubstitutionSource):
        return substitutions
    if isinstance(substitutions, Mapping):
        return MappingSource(substitutions)
    if callable(substitutions):
        return CallbackSource(substitutions)
    raise TypeError(
        f"Substitutions must be a mapping or a callable, got {type(substitutions).__name__}"
    )


__all__ = [
    "ABSENT",
    "SubstitutionSource",
    "SubstitutionCallback",
    "MappingSource",
    "CallbackSource",
    "as_source",
]
