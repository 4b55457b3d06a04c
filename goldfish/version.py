"""Engine version information."""

from __future__ import annotations

from dataclasses import dataclass

_LIMITS = {
    "date": 63,
    "full": 63,
    "backend": 31,
    "driver": 31,
    "lua": 31,
    "zlib": 31,
    "thread": 31,
}


@dataclass(frozen=True)
class Version:
    """Version numbers and build details.

    Text fields are bounded in encoded UTF-8 length: ``date`` and ``full``
    to 63 bytes, the rest to 31 bytes.
    """

    major: int
    minor: int
    patch: int
    date: str = ""
    full: str = ""
    backend: str = ""
    driver: str = ""
    lua: str = ""
    zlib: str = ""
    thread: str = ""

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if not isinstance(getattr(self, name), int):
                raise TypeError(f"{name} must be an integer")
        for name, limit in _LIMITS.items():
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string")
            if len(value.encode("utf-8")) > limit:
                raise ValueError(f"{name} is longer than {limit} bytes")