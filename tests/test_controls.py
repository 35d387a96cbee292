import pytest

from noisecancel.controls import (
    Action,
    Button,
    ControlPanel,
    MouseEvent,
    MouseKind,
    button_judge,
    slider_position,
    slider_value,
)


@pytest.mark.parametrize("x, y, expected", [
    (80, 40, Button.RUN),
    (200, 40, Button.START),
    (280, 40, Button.CLEAN),
    (30, 40, Button.NONE),
    (130, 40, Button.NONE),
    (150, 40, Button.NONE),
    (80, 100, Button.NONE),
])
def test_button_judge(x, y, expected):
    assert button_judge(x, y) is expected


def test_slider_left_edge_is_minimum():
    assert slider_value(150) == 20
    assert slider_position(20) == 150


@pytest.mark.parametrize("x", [151, 200, 329])
def test_slider_round_trip(x):
    assert slider_position(slider_value(x)) == x


def test_slider_value_is_monotonic():
    values = [slider_value(x) for x in range(151, 330)]
    assert values == sorted(values)
    assert 20 < values[0] and values[-1] < 200


def test_run_button_plays_input():
    panel = ControlPanel()
    assert panel.handle(MouseEvent(MouseKind.LEFT_DOWN, 80, 40)) is Action.PLAY_INPUT


def test_start_button_filters():
    panel = ControlPanel()
    assert panel.handle(MouseEvent(MouseKind.LEFT_DOWN, 200, 40)) is Action.FILTER_AND_PLAY


def test_clean_button_resets_tap_length():
    panel = ControlPanel(tap_length=120)
    assert panel.handle(MouseEvent(MouseKind.LEFT_DOWN, 280, 40)) is None
    assert panel.tap_length == 20


def test_moving_over_slider_sets_tap_length():
    panel = ControlPanel()
    panel.handle(MouseEvent(MouseKind.MOVE, 250, 200))
    assert panel.tap_length == slider_value(250)


def test_events_outside_slider_keep_tap_length():
    panel = ControlPanel(tap_length=77)
    panel.handle(MouseEvent(MouseKind.MOVE, 400, 300))
    panel.handle(MouseEvent(MouseKind.LEFT_UP, 10, 10))
    assert panel.tap_length == 77


def test_hover_tracks_button():
    panel = ControlPanel()
    panel.handle(MouseEvent(MouseKind.MOVE, 200, 40))
    assert panel.hovered is Button.START
    panel.handle(MouseEvent(MouseKind.MOVE, 5, 5))
    assert panel.hovered is Button.NONE


def test_reset():
    panel = ControlPanel(tap_length=150)
    panel.reset()
    assert panel.tap_length == 20