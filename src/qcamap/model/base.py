"""Entity proxy: attribute access over a remote JSON record.

An ``Entity`` exposes every key of its backing record as a read/write
attribute. The exposed field set is fixed to the keys present when the
entity is constructed; values are forwarded untouched, with no validation.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


class Entity:
    """Base class for objects backed by a remote record."""

    def __init__(self, record: MutableMapping[str, Any]) -> None:
        object.__setattr__(self, "_record", record)
        object.__setattr__(self, "_fields", frozenset(record))

    @property
    def record(self) -> MutableMapping[str, Any]:
        """The backing record itself (not a copy)."""
        return self._record

    @property
    def fields(self) -> frozenset[str]:
        return self._fields

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._fields:
            return self._record[name]
        raise AttributeError(f"{type(self).__name__!s} has no field {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fields:
            self._record[name] = value
        else:
            object.__setattr__(self, name, value)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | self._fields)

    def __repr__(self) -> str:
        parts = [f"id={self._record.get('id')!r}"]
        for label in ("name", "title"):
            if label in self._record:
                parts.append(f"{label}={self._record[label]!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)
