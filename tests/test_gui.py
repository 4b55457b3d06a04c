import pytest

from goldfish.graphic import Color
from goldfish.gui import (
    COMPONENT_NAMES,
    BorderStyle,
    Component,
    ComponentType,
    GuiEvent,
    lookup_component,
)
from goldfish.prop import PropertyContainer


@pytest.mark.parametrize(
    "name, expected",
    [
        ("button", ComponentType.BUTTON),
        ("frame", ComponentType.FRAME),
        ("progress", ComponentType.PROGRESS),
        ("range", ComponentType.RANGE),
        ("scrollbar", ComponentType.SCROLLBAR),
        ("tab", ComponentType.TAB),
        ("text", ComponentType.TEXT),
        ("window", ComponentType.WINDOW),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_component(name) is expected


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_component("checkbox")


def test_lookup_is_case_sensitive():
    with pytest.raises(KeyError):
        lookup_component("Button")


def test_registry_order_and_completeness():
    assert COMPONENT_NAMES == (
        "button",
        "frame",
        "progress",
        "range",
        "scrollbar",
        "tab",
        "text",
        "window",
    )
    assert {lookup_component(n) for n in COMPONENT_NAMES} == set(ComponentType)


def test_event_and_border_values_from_header():
    assert GuiEvent(0) is GuiEvent.PRESS
    assert GuiEvent(1) is GuiEvent.CHANGE
    assert BorderStyle(1) is BorderStyle.NORMAL
    assert BorderStyle(-1) is BorderStyle.INVERT
    assert ComponentType(0) is ComponentType.BUTTON
    assert ComponentType(7) is ComponentType.PROGRESS


def test_component_type_from_name():
    c = Component(key=1, type="window", x=1.0, y=2.0, width=3.0, height=4.0)
    assert c.type is ComponentType.WINDOW
    assert (c.x, c.y, c.width, c.height) == (1.0, 2.0, 3.0, 4.0)


def test_component_type_from_int():
    c = Component(key=2, type=3)
    assert c.type is ComponentType.TEXT


def test_component_invalid_type():
    with pytest.raises(ValueError):
        Component(key=1, type=42)
    with pytest.raises(KeyError):
        Component(key=1, type="nothing")


def test_component_self_parent_rejected():
    with pytest.raises(ValueError):
        Component(key=5, type=ComponentType.FRAME, parent=5)


def test_component_defaults():
    c = Component(key=0, type=ComponentType.BUTTON)
    assert c.pressed is False
    assert c.parent is None
    assert c.callback is None
    assert c.text is None
    assert len(c.prop) == 0


def test_component_props_are_independent():
    a = Component(key=0, type=ComponentType.BUTTON)
    b = Component(key=1, type=ComponentType.BUTTON)
    a.prop.set_integer("value", 10)
    assert a.prop.get_integer("value") == 10
    assert "value" not in b.prop


def test_component_keeps_given_prop_and_colors():
    prop = PropertyContainer()
    prop.set_text("label", "hello")
    red = Color(1.0, 0.0, 0.0, 1.0)
    c = Component(key=3, type=ComponentType.TAB, prop=prop, font=red)
    assert c.prop.get_text("label") == "hello"
    assert c.font == red


def test_component_callback_invoked_with_event():
    seen = []
    c = Component(
        key=9,
        type=ComponentType.BUTTON,
        callback=lambda engine, draw, cid, event: seen.append((cid, event)),
    )
    c.callback(None, None, c.key, GuiEvent.PRESS)
    assert seen == [(9, GuiEvent.PRESS)]