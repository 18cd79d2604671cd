# gltoolkit

Building blocks for a small real-time 3D renderer that need no graphics
context: input bindings, a first-person camera, vertex stride descriptions,
shape generators and lighting math.

## Modules

- `gltoolkit.keys`: the `Keys`, `Mods`, `Mouse`, `MouseChange`, `Action` and
  `Direction` enums, plus `is_letter` and `is_arrow`.
- `gltoolkit.window_input`: binding records (`KeyCombInputOne`,
  `KeyCombInputPoly`, `MouseButtonInput`, `AABButtonInput`, `MouseMoveInput`)
  and the callbacks built from them (`KeyComb`, `MouseButton`,
  `MouseMovement`, `AABButton`). Each callback stores its arguments, can be
  given an updater that runs before every call, and accepts new arguments
  through `change_parameters` (a `TypeError` if they do not match).
- `gltoolkit.key_control.KeyControl`: single-key bindings per action and
  multi-key bindings; every binding is also recorded in
  `gltoolkit.key_usage_registry.KeyUsageRegistry`.
- `gltoolkit.mouse_control.MouseControl` and
  `gltoolkit.aabb_button_control.AABButtonControl`: cursor tracking, one
  mouse-movement binding, and named on-screen rectangular buttons.
- `gltoolkit.window.Window`: combines the three controls, keeps window size,
  orthographic bounds (`set_ortho`, `set_ortho_bounds`), frame timing
  (`reset_delta_time`) and a close flag, and dispatches events given to
  `handle_keys`, `handle_mouse_cursor` and `handle_mouse_buttons`.
- `gltoolkit.camera`: `Camera` built from `CameraBundlePerspective` or
  `CameraBundleOrthographic`, with the `perspective`, `ortho` and `look_at`
  matrix helpers (4x4 numpy arrays, applied as `M @ p`).
- `gltoolkit.geometry`: `create_sphere_vertices`, `create_sphere_indices`,
  `create_circle_vertices`, `create_circle_indices`.
- `gltoolkit.lighting`: `calculate_vertex_normal`, `calculate_vertex_normals`,
  `calculate_face_normals` and `DirectionalLightBundle`.
- `gltoolkit.stride`, `gltoolkit.stride_composition`: vertex attribute
  strides and their component counts.
- `gltoolkit.timer.Timer`, `gltoolkit.scope_exiter.ScopeExiter`,
  `gltoolkit.threads` (`Worker`, `ConditionSignal`),
  `gltoolkit.json_reader.JsonReader`, `gltoolkit.config.Config`: supporting
  utilities.

## Installation

```
pip install .
```

## Example

```python
from gltoolkit.camera import Camera, CameraBundlePerspective
from gltoolkit.geometry import create_sphere_indices, create_sphere_vertices
from gltoolkit.keys import Action, Keys
from gltoolkit.window import Window

window = Window(800, 600, "Demo")
window.set_escape_button(Keys.ESC)

camera = Camera(CameraBundlePerspective(
    position=(0.0, 0.0, 1.0),
    near_z=0.1, far_z=1000.0,
    speed=0.01, turn_speed=0.1,
    aspect_ratio=window.aspect_ratio,
))
camera.set_commands_to_window(window)

# Feed the frame time and cursor movement into the bindings before they run.
window.set_func_param_updater_keys(
    Keys.W, lambda: window.find_key_comb(Keys.W).change_parameters(window.delta_time)
)
window.set_mouse_change_updater(
    lambda: window.mouse_move.change_parameters(
        window.delta_time, window.mouse_change_x, window.mouse_change_y
    )
)

window.reset_delta_time()
window.handle_keys(Keys.W, 0, Action.PRESS, 0)   # moves the camera
window.handle_mouse_cursor(410.0, 300.0)         # turns the camera
window.handle_keys(Keys.ESC, 0, Action.PRESS, 0)
assert window.should_close

view = camera.view
vertices = create_sphere_vertices(0.5, 5, 5)
indices = create_sphere_indices(5, 5)
```

## What this package does not do

It opens no window, creates no graphics context, compiles no shaders and
draws nothing. Events reach a `Window` only when your code calls its
`handle_*` methods, and vertex, index and matrix data are returned as plain
lists and numpy arrays for you to hand to whatever renderer you use. There is
no command-line program.

## Running the tests

```
pip install .[test]
pytest
```