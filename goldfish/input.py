"""Mouse input state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag


class MouseButton(IntFlag):
    """Bit masks for mouse buttons."""

    LEFT = 1 << 0
    MIDDLE = 1 << 1
    RIGHT = 1 << 2


@dataclass
class InputState:
    """Current mouse position and button flags."""

    mouse_x: int = 0
    mouse_y: int = 0
    mouse_flag: MouseButton = field(default_factory=lambda: MouseButton(0))

    def __post_init__(self) -> None:
        self.mouse_flag = MouseButton(self.mouse_flag)

    def is_pressed(self, button: MouseButton) -> bool:
        """Return whether every button in ``button`` is held down."""
        mask = MouseButton(button)
        if not mask:
            raise ValueError("no button given")
        return (self.mouse_flag & mask) == mask