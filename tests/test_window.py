import pytest

from gltoolkit.key_usage_registry import KeyUsageRegistry
from gltoolkit.keys import Action, Keys, Mods, Mouse, MouseChange
from gltoolkit.timer import MIN_DELTA_MS
from gltoolkit.window import Window
from gltoolkit.window_input import (
    AABButtonInput,
    KeyCombInputOne,
    KeyCombInputPoly,
    MouseMoveInput,
)


def make_window(width=800.0, height=800.0, clock=None):
    kwargs = {"registry": KeyUsageRegistry()}
    if clock is not None:
        kwargs["clock"] = clock
    return Window(width, height, "test", **kwargs)


class FakeClock:
    def __init__(self, values):
        self._values = list(values)

    def __call__(self):
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


def test_default_window():
    window = Window(registry=KeyUsageRegistry())
    assert window.name == "Untitled Window"
    assert window.aspect_ratio == 1.0
    assert window.mouse_current_x == window.width / 2
    assert window.mouse_current_y == window.height / 2
    assert window.should_close is False


def test_set_ortho_wide():
    window = make_window(1600.0, 800.0)
    window.set_ortho()
    assert window.is_ortho
    assert window.aspect_ratio == window.width / window.height
    assert window.left_ortho == -window.aspect_ratio
    assert window.right_ortho == window.aspect_ratio
    assert window.top_ortho == 1.0
    assert window.bottom_ortho == -1.0


def test_set_ortho_tall():
    window = make_window(400.0, 800.0)
    window.set_ortho()
    assert window.left_ortho == -1.0
    assert window.right_ortho == 1.0
    assert window.top_ortho == 1.0 / window.aspect_ratio
    assert window.bottom_ortho == -window.top_ortho


def test_ortho_bounds_unset_raise():
    window = make_window()
    with pytest.raises(RuntimeError):
        window.left_ortho
    with pytest.raises(RuntimeError):
        window.bottom_ortho
    window.set_ortho()
    assert window.left_ortho == -1.0
    assert window.bottom_ortho == -1.0


def test_set_ortho_bounds_round_trip():
    window = make_window()
    window.set_ortho_bounds(-2.0, 3.0, 4.0, -5.0)
    assert (window.left_ortho, window.right_ortho, window.top_ortho, window.bottom_ortho) == (
        -2.0,
        3.0,
        4.0,
        -5.0,
    )


def test_escape_button_closes_and_marks_updated():
    window = make_window()
    window.set_escape_button(Keys.ESC)
    window.handle_keys(Keys.ESC, 0, Action.PRESS, 0)
    assert window.should_close is True
    assert window.is_updated() is True
    assert window.is_updated() is False
    assert window.keys[Keys.ESC] is True


def test_escape_button_registers_key():
    registry = KeyUsageRegistry()
    window = Window(registry=registry)
    window.set_escape_button(Keys.ESC, Mods.SHIFT)
    assert registry.keys_in_use() == [(Keys.ESC, Mods.SHIFT)]


def test_modifier_must_match():
    window = make_window()
    calls = []
    window.add_key_comb(
        False, KeyCombInputOne(Keys.A, Action.PRESS, Mods.CONTROL), lambda: calls.append(1) or True
    )
    window.handle_keys(Keys.A, 0, Action.PRESS, 0)
    assert calls == []
    window.handle_keys(Keys.A, 0, Action.PRESS, int(Mods.CONTROL))
    assert calls == [1]


def test_repeat_as_well_and_release_clears_key():
    window = make_window()
    calls = []
    window.add_key_comb(
        True, KeyCombInputOne(Keys.W, Action.PRESS), lambda: calls.append("w") or True
    )
    window.handle_keys(Keys.W, 0, Action.REPEAT, 0)
    assert calls == ["w"]
    assert window.keys[Keys.W] is True
    assert window.is_updated() is False
    window.handle_keys(Keys.W, 0, Action.RELEASE, 0)
    assert window.keys[Keys.W] is False
    assert calls == ["w"]


def test_release_binding_runs_on_release_only():
    window = make_window()
    calls = []
    window.add_key_comb(
        False, KeyCombInputOne(Keys.S, Action.RELEASE), lambda: calls.append("s") or True
    )
    window.handle_keys(Keys.S, 0, Action.PRESS, 0)
    assert calls == []
    window.handle_keys(Keys.S, 0, Action.RELEASE, 0)
    assert calls == ["s"]


def test_poly_binding_needs_all_keys_held():
    window = make_window()
    calls = []
    window.add_key_comb_poly(
        KeyCombInputPoly((Keys.A, Keys.B), Action.PRESS), lambda: calls.append("ab") or True
    )
    window.handle_keys(Keys.A, 0, Action.PRESS, 0)
    assert calls == []
    window.handle_keys(Keys.B, 0, Action.PRESS, 0)
    assert calls == ["ab"]
    window.handle_keys(Keys.A, 0, Action.RELEASE, 0)
    assert window.key_state(Keys.A) == int(Action.RELEASE)
    assert calls == ["ab"]


def test_updater_feeds_delta_time():
    window = make_window(clock=FakeClock([0.0, 0.5, 0.5]))
    seen = []

    def move(dt):
        seen.append(dt)
        return True

    window.add_key_comb(False, KeyCombInputOne(Keys.D, Action.PRESS), move, 0.0)
    comb = window.find_key_comb(Keys.D)
    window.set_func_param_updater_keys(Keys.D, lambda: comb.change_parameters(window.delta_time))
    window.reset_delta_time()
    window.handle_keys(Keys.D, 0, Action.PRESS, 0)
    assert seen == [window.delta_time]
    assert window.delta_time == 500.0


def test_reset_delta_time_has_minimum():
    window = make_window(clock=FakeClock([1.0]))
    assert window.reset_delta_time() == MIN_DELTA_MS
    assert window.delta_time == MIN_DELTA_MS


def test_mouse_cursor_change_and_callback():
    window = make_window()
    moves = []
    window.add_mouse_change(
        MouseMoveInput(MouseChange.MOVE_X | MouseChange.MOVE_Y),
        lambda dt, x, y: moves.append((x, y)) or True,
        0.0,
        0.0,
        0.0,
    )
    window.set_mouse_change_updater(
        lambda: window.mouse_move.change_parameters(
            0.0, window.mouse_change_x, window.mouse_change_y
        )
    )
    start_x, start_y = window.mouse_current_x, window.mouse_current_y
    window.handle_mouse_cursor(start_x + 10.0, start_y - 5.0)
    assert window.mouse_change_x == 10.0
    assert window.mouse_change_y == 5.0
    assert (window.mouse_current_x, window.mouse_current_y) == (start_x + 10.0, start_y - 5.0)
    assert moves == [(10.0, 5.0)]


def test_mouse_buttons_hit_rectangle():
    window = make_window()
    clicks = []
    window.add_aab_button(
        AABButtonInput(0.0, 0.0, 100.0, 100.0, Action.PRESS, Mouse.LEFT, "ok"),
        lambda: clicks.append("ok") or True,
        "ok",
    )
    window.handle_mouse_cursor(50.0, 50.0)
    window.handle_mouse_buttons(int(Mouse.LEFT), Action.PRESS, 0)
    assert clicks == ["ok"]
    window.handle_mouse_buttons(int(Mouse.RIGHT), Action.PRESS, 0)
    window.handle_mouse_buttons(int(Mouse.LEFT), Action.RELEASE, 0)
    assert clicks == ["ok"]
    window.handle_mouse_cursor(200.0, 200.0)
    window.handle_mouse_buttons(int(Mouse.LEFT), Action.PRESS, 0)
    assert clicks == ["ok"]


def test_set_should_close_round_trip():
    window = make_window()
    window.set_should_close(True)
    assert window.should_close is True
    window.set_should_close(False)
    assert window.should_close is False