"""Keyed property container holding owned values and borrowed references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

NO_SUCH = 0xFFFFFF
"""Value returned by the numeric getters when a property does not exist."""


@dataclass
class _Entry:
    value: Any = None
    keep: Any = None


class PropertyContainer:
    """Mapping of string keys to one owned value and one kept reference each.

    Each key holds two slots. The *value* slot is written by the typed
    setters and :meth:`set_ptr`. The *keep* slot is written by
    :meth:`set_ptr_keep`. Setting either slot replaces the whole entry.
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def _put(self, key: str, value: Any, keep: Any) -> None:
        self.delete(key)
        self._entries[key] = _Entry(value=value, keep=keep)

    def set_text(self, key: str, value: str) -> None:
        """Store a copy of ``value`` as text."""
        self.set_ptr(key, str(value))

    def get_text(self, key: str) -> str | None:
        """Return the text stored under ``key``, or ``None``."""
        return self.get_ptr(key)

    def set_integer(self, key: str, value: int) -> None:
        """Store an integer."""
        self.set_ptr(key, int(value))

    def get_integer(self, key: str) -> int:
        """Return the integer under ``key``, or :data:`NO_SUCH`."""
        value = self.get_ptr(key)
        if value is None:
            return NO_SUCH
        return int(value)

    def set_floating(self, key: str, value: float) -> None:
        """Store a floating point number."""
        self.set_ptr(key, float(value))

    def get_floating(self, key: str) -> float:
        """Return the number under ``key``, or :data:`NO_SUCH` as a float."""
        value = self.get_ptr(key)
        if value is None:
            return float(NO_SUCH)
        return float(value)

    def set_ptr(self, key: str, value: Any) -> None:
        """Store an owned value; any kept reference for ``key`` is dropped."""
        self._put(key, value, None)

    def get_ptr(self, key: str) -> Any:
        """Return the owned value under ``key``, or ``None``."""
        entry = self._entries.get(key)
        return None if entry is None else entry.value

    def set_ptr_keep(self, key: str, value: Any) -> None:
        """Store a borrowed reference; any owned value for ``key`` is dropped."""
        self._put(key, None, value)

    def get_ptr_keep(self, key: str) -> Any:
        """Return the borrowed reference under ``key``, or ``None``."""
        entry = self._entries.get(key)
        return None if entry is None else entry.keep

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every property."""
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))