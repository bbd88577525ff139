import pytest

from mogi.ui.consts import (
    FLEX_BASIS_AUTO,
    AlignItems,
    ComponentKind,
    Display,
    FlexContainerProps,
    FlexDirection,
    FlexItemProps,
    FlexWrap,
    JustifyContent,
    Position,
    PositionType,
)
from mogi.vector import Vec2


@pytest.mark.parametrize(
    "kind, name",
    [
        (ComponentKind.CONTAINER, "Container"),
        (ComponentKind.TEXT, "Text"),
        (ComponentKind.BUTTON, "Button"),
        (ComponentKind.IMAGE, "Image"),
        (ComponentKind.TABLE, "Table"),
    ],
)
def test_component_kind_str(kind, name):
    assert str(kind) == name


def test_display_order_matches_declaration():
    assert [Display(i).name for i in range(5)] == ["BLOCK", "INLINE", "FLEX", "GRID", "NONE"]


def test_position_default_is_absolute_at_origin():
    pos = Position()
    assert pos.type == PositionType.ABSOLUTE
    assert pos.to_vec() == Vec2(0, 0)


def test_position_to_vec_round_trip():
    pos = Position(3.5, -2.0, PositionType.RELATIVE)
    vec = pos.to_vec()
    assert (vec.x, vec.y) == (pos.x, pos.y)


def test_position_to_vec_returns_independent_vector():
    pos = Position(1, 2)
    vec = pos.to_vec()
    vec.scale(10)
    assert pos.to_vec() == Vec2(1, 2)


def test_flex_item_props_defaults():
    props = FlexItemProps()
    assert props.grow == 0
    assert props.shrink == 1
    assert props.basis == FLEX_BASIS_AUTO
    assert props.align_self == AlignItems.SELF_AUTO
    assert props.order == 0


def test_flex_container_props_defaults():
    props = FlexContainerProps()
    assert props.enabled is False
    assert props.direction == FlexDirection.ROW
    assert props.wrap == FlexWrap.NO_WRAP
    assert props.justify == JustifyContent.FLEX_START
    assert props.align_items == AlignItems.STRETCH
    assert props.align_content == AlignItems.STRETCH
    assert props.gap == 0


def test_align_self_auto_is_sentinel_below_others():
    sentinel = AlignItems(-1)
    assert sentinel is AlignItems.SELF_AUTO
    assert all(sentinel < a for a in AlignItems if a is not sentinel)


def test_default_flex_basis_is_negative_auto():
    basis = FlexItemProps().basis
    assert basis == FLEX_BASIS_AUTO
    assert basis < 0