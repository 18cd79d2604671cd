from gltoolkit.keys import Mouse, MouseChange
from gltoolkit.mouse_control import MouseControl
from gltoolkit.window_input import MouseMoveInput


def test_defaults():
    control = MouseControl()
    assert control.mouse_current_x == 0.0
    assert control.mouse_change_y == 0.0
    assert control.mouse_first_moved is True
    assert control.is_mouse_button_pressed is False
    assert control.mouse_move is None


def test_add_mouse_change_binds_movement():
    control = MouseControl()
    seen = []
    move = control.add_mouse_change(
        MouseMoveInput(MouseChange.MOVE_X | MouseChange.MOVE_Y, Mouse.NONE),
        lambda dt, x, y: seen.append((dt, x, y)) or True,
        0.0, 0.0, 0.0,
    )
    assert control.mouse_move is move
    assert move.execute() is True
    assert seen == [(0.0, 0.0, 0.0)]


def test_add_mouse_change_replaces_previous():
    control = MouseControl()
    first = control.add_mouse_change(MouseMoveInput(MouseChange.MOVE_X), lambda: True)
    second = control.add_mouse_change(MouseMoveInput(MouseChange.MOVE_Y), lambda: False)
    assert control.mouse_move is second
    assert control.mouse_move is not first
    assert control.mouse_move.execute() is False


def test_updater_feeds_current_mouse_change():
    control = MouseControl()
    seen = []
    control.add_mouse_change(
        MouseMoveInput(MouseChange.MOVE_X), lambda x, y: seen.append((x, y)) or True, 0.0, 0.0
    )
    control.mouse_change_x = 1.5
    control.mouse_change_y = -2.5
    control.set_mouse_change_updater(
        lambda: control.mouse_move.change_parameters(control.mouse_change_x, control.mouse_change_y)
    )
    control.mouse_move.execute()
    assert seen == [(1.5, -2.5)]


def test_updater_without_binding_is_ignored():
    control = MouseControl()
    control.set_mouse_change_updater(lambda: True)
    assert control.mouse_move is None