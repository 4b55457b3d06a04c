"""GUI component kinds, events and the component record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional

from goldfish.graphic import Color
from goldfish.prop import PropertyContainer

FONT_SIZE = 24
"""Default GUI font size."""

SMALL_FONT_SIZE = 14
"""Default small GUI font size."""

ComponentId = int

Callback = Callable[[Any, Any, ComponentId, "GuiEvent"], None]
"""Event callback: ``(engine, draw, component_id, event)``."""


class GuiEvent(IntEnum):
    """Events delivered to component callbacks."""

    PRESS = 0
    CHANGE = 1


class ComponentType(IntEnum):
    """Kinds of GUI component."""

    BUTTON = 0
    WINDOW = 1
    FRAME = 2
    TEXT = 3
    SCROLLBAR = 4
    RANGE = 5
    TAB = 6
    PROGRESS = 7


class BorderStyle(IntEnum):
    """How a box border is shaded."""

    NORMAL = 1
    INVERT = -1


_REGISTRY: dict[str, ComponentType] = {
    "button": ComponentType.BUTTON,
    "frame": ComponentType.FRAME,
    "progress": ComponentType.PROGRESS,
    "range": ComponentType.RANGE,
    "scrollbar": ComponentType.SCROLLBAR,
    "tab": ComponentType.TAB,
    "text": ComponentType.TEXT,
    "window": ComponentType.WINDOW,
}

COMPONENT_NAMES: tuple[str, ...] = tuple(_REGISTRY)
"""Names accepted by :func:`lookup_component`, in registration order."""


def lookup_component(name: str) -> ComponentType:
    """Return the component type registered under ``name``.

    Raises :class:`KeyError` when no component has that name.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"no such GUI component: {name!r}") from None


def _black() -> Color:
    return Color(0.0, 0.0, 0.0, 1.0)


@dataclass
class Component:
    """A single GUI component and its state."""

    key: ComponentId
    type: ComponentType
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    pressed: bool = False
    parent: Optional[ComponentId] = None
    prop: PropertyContainer = field(default_factory=PropertyContainer)
    callback: Optional[Callback] = None
    text: Optional[str] = None
    font: Color = field(default_factory=_black)
    hover_font: Color = field(default_factory=_black)
    texture: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            self.type = lookup_component(self.type)
        else:
            self.type = ComponentType(self.type)
        if self.parent == self.key:
            raise ValueError("a component cannot be its own parent")