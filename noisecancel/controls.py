"""State of the control panel: three buttons and a tap-length slider."""

from __future__ import annotations

import enum
from dataclasses import dataclass

TAP_MIN = 20
TAP_MAX = 200
SLIDER_LEFT = 150
SLIDER_RIGHT = 330
SLIDER_TOP = 180
SLIDER_BOTTOM = 220


class Button(enum.IntEnum):
    NONE = 0
    RUN = 1
    START = 2
    CLEAN = 3


BUTTON_RECTS = {
    Button.RUN: (30, 20, 130, 60),
    Button.START: (170, 20, 220, 60),
    Button.CLEAN: (260, 20, 310, 60),
}


class MouseKind(enum.Enum):
    MOVE = "move"
    LEFT_DOWN = "left_down"
    LEFT_UP = "left_up"


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseKind
    x: int
    y: int


class Action(enum.Enum):
    """What the application should do after an event."""

    PLAY_INPUT = "play_input"
    FILTER_AND_PLAY = "filter_and_play"


def button_judge(x: int, y: int) -> Button:
    """Return the button strictly inside whose rectangle (x, y) lies."""
    for button, (left, top, right, bottom) in BUTTON_RECTS.items():
        if left < x < right and top < y < bottom:
            return button
    return Button.NONE


def slider_value(x: int) -> int:
    """Tap length selected by a pointer at horizontal position ``x``."""
    span = SLIDER_RIGHT - SLIDER_LEFT
    return TAP_MIN + int((x - SLIDER_LEFT) * (TAP_MAX - TAP_MIN) / float(span))


def slider_position(tap_length: int) -> int:
    """Horizontal position of the slider knob for ``tap_length``."""
    span = SLIDER_RIGHT - SLIDER_LEFT
    return SLIDER_LEFT + (tap_length - TAP_MIN) * (span // (TAP_MAX - TAP_MIN))


def _in_slider(x: int, y: int) -> bool:
    return SLIDER_LEFT < x < SLIDER_RIGHT and SLIDER_TOP < y < SLIDER_BOTTOM


@dataclass
class ControlPanel:
    """Tracks the tap length and the button under the pointer."""

    tap_length: int = TAP_MIN
    hovered: Button = Button.NONE

    def handle(self, event: MouseEvent) -> Action | None:
        """Apply a mouse event and return the action it triggers, if any."""
        action = None
        if event.kind is MouseKind.MOVE:
            self.hovered = button_judge(event.x, event.y)
        elif event.kind is MouseKind.LEFT_DOWN:
            button = button_judge(event.x, event.y)
            if button is Button.RUN:
                action = Action.PLAY_INPUT
            elif button is Button.START:
                action = Action.FILTER_AND_PLAY
            elif button is Button.CLEAN:
                self.reset()
        if _in_slider(event.x, event.y):
            self.tap_length = slider_value(event.x)
        return action

    def reset(self) -> None:
        """Return the tap length to its default."""
        self.tap_length = TAP_MIN