import pytest

from mogi.color import BLUE, GREEN, RED, WHITE
from mogi.render import (
    RenderCommand,
    RenderCommandKind,
    generate_render_commands,
    handle_clicks,
    sort_commands,
)
from mogi.ui.button import Button
from mogi.ui.consts import Display, Position, PositionType
from mogi.ui.container import Container
from mogi.ui.image import Image
from mogi.ui.text import Text
from mogi.ui.wrap import wrap_lines
from mogi.vector import Vec2


def measure(text, font_size):
    return len(text) * font_size / 2


def _absolute(x, y):
    return Position(x, y, PositionType.ABSOLUTE)


def test_kind_names():
    rect = generate_render_commands(Container(), measure)[0]
    text = generate_render_commands(Text("t"), measure)[0]
    texture = generate_render_commands(Image("p.png"), measure)[0]
    assert str(rect.kind) == "RenderCommandDrawRectangle"
    assert str(text.kind) == "RenderCommandDrawText"
    assert str(texture.kind) == "RenderCommandDrawTexture"
    assert str(RenderCommand().kind) == "RenderCommandNone"


def test_none_component_gives_no_commands():
    assert generate_render_commands(None, measure) == []


def test_container_rectangle():
    box = (
        Container()
        .set_position(_absolute(10, 20))
        .set_size(Vec2(30, 40))
        .set_background_color(RED)
        .set_border(Vec2(2, 3))
        .set_border_radius(5)
        .set_z_index(7)
    )
    commands = generate_render_commands(box, measure)
    assert len(commands) == 1
    command = commands[0]
    assert command.kind == RenderCommandKind.DRAW_RECTANGLE
    assert command.pos == Vec2(10, 20)
    assert command.size == Vec2(30, 40)
    assert command.background_color == RED
    assert command.border_width == Vec2(2, 3)
    assert command.border_radius == 5
    assert command.z_index == 7


def test_hidden_component_and_subtree_skipped():
    root = Container().set_position(_absolute(0, 0))
    hidden = Container().set_display(Display.NONE).add_child(Text("inside"))
    root.add_children(hidden, Text("shown"))
    commands = generate_render_commands(root, measure)
    assert [c.kind for c in commands] == [RenderCommandKind.DRAW_RECTANGLE, RenderCommandKind.DRAW_TEXT]
    assert commands[1].text == "shown"


def test_plain_text_command():
    text = Text("hello").set_color(GREEN).set_font_size(20).set_position(_absolute(4, 5))
    commands = generate_render_commands(text, measure)
    assert len(commands) == 1
    assert commands[0].kind == RenderCommandKind.DRAW_TEXT
    assert commands[0].text == "hello"
    assert commands[0].color == GREEN
    assert commands[0].font_size == 20
    assert commands[0].pos == Vec2(4, 5)


def test_wrapped_text_one_command_per_line():
    content = "one two three four five six"
    text = (
        Text(content)
        .set_text_wrapped(True)
        .set_font_size(10)
        .set_size(Vec2(60, 0))
        .set_position(_absolute(1, 2))
    )
    commands = generate_render_commands(text, measure)
    expected = wrap_lines(content, 10, 60, measure)
    assert [c.text for c in commands] == expected
    assert len(commands) > 1
    assert " ".join(c.text for c in commands) == content
    for index, command in enumerate(commands):
        assert command.pos == Vec2(1, 2 + index * 10)


def test_button_commands_and_centered_label():
    button = Button("Buy").set_position(_absolute(100, 50)).set_size(Vec2(80, 40))
    button.set_background_color(BLUE)
    rect, label = generate_render_commands(button, measure)
    assert rect.kind == RenderCommandKind.DRAW_RECTANGLE
    assert rect.background_color == BLUE
    assert label.kind == RenderCommandKind.DRAW_TEXT
    assert label.text == "Buy"
    assert label.z_index == rect.z_index + 1
    assert label.font_size == button.font_size()
    width = measure("Buy", button.font_size())
    assert label.pos.x + width / 2 == pytest.approx(100 + 80 / 2)
    assert label.pos.y + button.font_size() / 2 == pytest.approx(50 + 40 / 2)
    assert rect.pos == Vec2(100, 50)


def test_button_hover_and_pressed_colors():
    button = Button("b").set_size(Vec2(10, 10))
    button.is_mouse_over = True
    assert generate_render_commands(button, measure)[0].background_color == button.hover_color
    button.is_pressed = True
    assert generate_render_commands(button, measure)[0].background_color == button.pressed_color


def test_image_texture_command():
    image = Image("pic.png").set_size(Vec2(16, 16)).set_position(_absolute(3, 3))
    commands = generate_render_commands(image, measure)
    assert len(commands) == 1
    assert commands[0].kind == RenderCommandKind.DRAW_TEXTURE
    assert commands[0].path == "pic.png"
    assert commands[0].size == Vec2(16, 16)


def test_children_follow_parent_with_relative_positions():
    root = Container().set_position(_absolute(10, 10))
    child = Container().set_position(Position(5, 6, PositionType.RELATIVE))
    root.add_child(child)
    parent_cmd, child_cmd = generate_render_commands(root, measure)
    assert child_cmd.pos == Vec2(15, 16)
    assert child_cmd.z_index == parent_cmd.z_index + 1


def test_sort_commands_by_z_index_stable():
    commands = [
        RenderCommand(text="a", z_index=2),
        RenderCommand(text="b", z_index=0),
        RenderCommand(text="c", z_index=2),
        RenderCommand(text="d", z_index=1),
    ]
    ordered = sort_commands(commands)
    assert [c.text for c in ordered] == ["b", "d", "a", "c"]


def test_sort_commands_drops_hidden():
    commands = [
        RenderCommand(text="a", z_index=0),
        RenderCommand(text="b", z_index=0, display=Display.NONE),
    ]
    assert [c.text for c in sort_commands(commands)] == ["a"]


def _tree_with_button():
    clicks = []
    button = (
        Button("ok")
        .set_position(_absolute(0, 0))
        .set_size(Vec2(50, 20))
        .set_on_click(lambda b: clicks.append(b.label))
    )
    root = Container().set_position(_absolute(0, 0)).add_child(button)
    return root, button, clicks


def test_press_then_release_fires_callback_once():
    root, button, clicks = _tree_with_button()
    inside = Vec2(10, 10)
    assert handle_clicks(root, inside, True, False) == []
    assert button.is_pressed is True
    assert button.is_mouse_over is True
    clicked = handle_clicks(root, inside, False, True)
    assert clicked == [button]
    assert clicks == ["ok"]
    assert button.is_pressed is False
    assert handle_clicks(root, inside, False, True) == []
    assert clicks == ["ok"]


def test_leaving_button_cancels_press():
    root, button, clicks = _tree_with_button()
    handle_clicks(root, Vec2(10, 10), True, False)
    handle_clicks(root, Vec2(200, 200), True, False)
    assert button.is_pressed is False
    assert button.is_mouse_over is False
    assert handle_clicks(root, Vec2(10, 10), False, True) == []
    assert clicks == []


def test_hidden_button_ignored():
    root, button, clicks = _tree_with_button()
    button.set_display(Display.NONE)
    handle_clicks(root, Vec2(10, 10), True, False)
    assert button.is_pressed is False
    assert handle_clicks(root, Vec2(10, 10), False, True) == []
    assert clicks == []


def test_button_without_callback_still_reported():
    button = Button("x").set_position(_absolute(0, 0)).set_size(Vec2(10, 10))
    handle_clicks(button, Vec2(5, 5), True, False)
    assert handle_clicks(button, Vec2(5, 5), False, True) == [button]


def test_text_color_default_in_command():
    commands = generate_render_commands(Text("t"), measure)
    assert commands[0].color == WHITE