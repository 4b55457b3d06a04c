"""Drawing dimensions and colours."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum


class Dimension(IntEnum):
    """Number of coordinates per vertex."""

    TWO_D = 2
    THREE_D = 3


@dataclass(frozen=True)
class Color:
    """RGBA colour with components as floats."""

    r: float
    g: float
    b: float
    a: float

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy with a different alpha."""
        return replace(self, a=float(alpha))