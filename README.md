# mogi

The core of a small UI toolkit. You build a tree of components with chained
setters and run it through a flow layout engine. The laid-out tree then
becomes a list of render commands that a drawing backend can execute. Button
hover, press and click handling works from a cursor position and the mouse
state.

## Install

```
pip install .
```

## Modules

- `mogi.color`: the frozen dataclasses `RGBA` and `HSLA` and the `Hex` class.
  `Hex` parses `#RGB`, `#RGBA`, `#RRGGBB` and `#RRGGBBAA` and raises
  `ValueError` on a bad digit or a bad length. Each of the three converts with
  `to_rgba()`. `RGBA.blend_over(dst)` alpha-composites one colour over
  another. `hue_to_rgb` is the helper for HSL conversion. Named colours:
  `RED`, `GREEN`, `BLUE`, `WHITE`, `BLACK`, `GRAY`, `YELLOW`, `CYAN`,
  `MAGENTA`, `ORANGE`, `PINK`, `PURPLE`, `BROWN`, `TRANSPARENT`, `SKIN`.
- `mogi.vector`: mutable `Vec2`, `Vec3` and `Vec4` with `add`, `sub`, `scale`,
  `dot`, `norm`, `normalize` and `clone`. `Vec3` also has `cross`. The
  arithmetic methods change the vector in place and return it, so calls can
  be chained. Use `clone()` first if the original must stay unchanged.
- `mogi.ui.consts`: `Display`, `PositionType`, `Position`, `ComponentKind`,
  the flex enumerations (`FlexDirection`, `FlexWrap`, `JustifyContent`,
  `AlignItems`) and `FlexItemProps` / `FlexContainerProps`.
- `mogi.ui.component`: the base `Component`. It holds position, size, margin,
  padding, border, colours, z-index and percentage sizes. It also provides
  `absolute_pos()`, `absolute_z_index()` and `contains_point()`.
- `mogi.ui.container`, `mogi.ui.text`, `mogi.ui.button`, `mogi.ui.image`,
  `mogi.ui.table`: the `Container`, `Text`, `Button`, `Image` and `Table` /
  `Row` components.
- `mogi.ui.wrap`: greedy word wrapping, through `wrap_lines` and
  `wrapped_size`.
- `mogi.ui.primitives`: `to_primitives` replaces every `Table` in a tree with
  containers of wrapped text cells.
- `mogi.ui.layout`: `LayoutEngine`, which sizes the tree bottom-up and then
  positions it top-down. It also provides:
  - `assign_ids()`, which gives each component a path-based full ID.
  - `copy_state_from_components()` and `copy_state_to_components()`, which
    carry `ComponentState` from one frame to the next.
  - `describe_tree()`, which returns a text dump of the tree.
- `mogi.render`:
  - `generate_render_commands` turns a laid-out tree into `RenderCommand`s.
  - `sort_commands` drops hidden commands and orders the rest by z-index.
  - `handle_clicks` updates button state, calls click callbacks and returns
    the buttons that were clicked.

## Example

Every text measurement goes through a function you supply,
`measure(text, font_size) -> width`.

```python
from mogi.color import BLACK
from mogi.vector import Vec2
from mogi.ui.container import Container
from mogi.ui.text import Text
from mogi.ui.button import Button
from mogi.ui.layout import LayoutEngine
from mogi.render import generate_render_commands, sort_commands, handle_clicks


def measure(text, font_size):
    return len(text) * font_size * 0.6


root = (
    Container()
    .set_id("card")
    .set_background_color(BLACK)
    .set_padding(Vec2(4, 4))
    .add_children(
        Text("Hello").set_font_size(24),
        Button("Buy now").set_on_click(lambda button: print("clicked", button.label)),
    )
)

engine = LayoutEngine(measure)
engine.begin_layout()
root = engine.convert_to_primitives(root)
engine.assign_ids(root)
engine.layout(root, Vec2(), Vec2(800, 600))

for command in sort_commands(generate_render_commands(root, measure)):
    print(command.kind, command.pos, command.size)

clicked = handle_clicks(root, Vec2(20, 40), mouse_down=False, mouse_released=True)
engine.copy_state_from_components(root)
engine.end_layout()
```

### Rebuilding the tree each frame

When the tree is rebuilt every frame, keep state between frames with these
steps:

1. Call `begin_layout()`.
2. Call `assign_ids()` on the new tree.
3. On every frame after the first, call `copy_state_to_components()`. It
   restores display and button state by full ID.
4. Lay out the tree, then handle clicks.
5. Call `copy_state_from_components()`.
6. Call `end_layout()`. It returns the full IDs seen during the frame.

## What it does not do

This package opens no window and draws nothing. It loads no fonts or image
files and has no command to run. A backend of your own must do these things:

- measure text;
- execute the `RenderCommand` list;
- supply the cursor position and the mouse state for each frame.

The flex properties can be stored on components, but the layout engine
ignores them. Layout is a left-to-right flow that wraps lines, with block
children each starting a new line.

## Tests

```
pip install .[test]
pytest
```