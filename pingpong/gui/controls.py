"""
Keyboard input handling for the pygame presenter
"""

import math
from collections.abc import Mapping, Sequence

import pygame

from pingpong.core.entities import Direction
from pingpong.utils.config import KeyboardLayout

# pygame.key.get_pressed() returns a ScancodeWrapper, which is only indexable
KeysPressed = Sequence[bool] | Mapping[int, bool]

MAX_SPEED_DIGITS = 6


def _is_pressed(keys_pressed: KeysPressed, key: int) -> bool:
    if isinstance(keys_pressed, Mapping):
        return bool(keys_pressed.get(key, False))
    return bool(keys_pressed[key])


def direction_from_keys(keys_pressed: KeysPressed, key_mapping: Mapping[str, int]) -> Direction:
    """Resolves the up/down keys of one paddle; both or none held means NONE"""
    up = _is_pressed(keys_pressed, key_mapping["up"])
    down = _is_pressed(keys_pressed, key_mapping["down"])
    if up and not down:
        return Direction.UP
    if down and not up:
        return Direction.DOWN
    return Direction.NONE


class PaddleControls:
    """Maps the keyboard state to the direction of both paddles"""

    def __init__(self, layout: KeyboardLayout):
        self.layout = layout
        self.left_keys = dict(layout.left_keys)
        self.right_keys = dict(layout.right_keys)

    def directions(self, keys_pressed: KeysPressed) -> tuple[Direction, Direction]:
        return (
            direction_from_keys(keys_pressed, self.left_keys),
            direction_from_keys(keys_pressed, self.right_keys),
        )


def parse_ball_speed(text: str, default: float) -> float:
    """
    Parses the ball speed typed by the user.

    Empty, non-numeric, non-finite or negative input gives back the default.
    """
    try:
        speed = float(text.strip().replace(",", "."))
    except ValueError:
        return default
    if not math.isfinite(speed) or speed < 0:
        return default
    return speed


class SpeedPrompt:
    """Text entry collecting the ball speed before the first match"""

    def __init__(self, default: float):
        self.default = default
        self.text = ""
        self.done = False

    def handle_key(self, key: int, unicode: str) -> None:
        """Feeds one KEYDOWN event into the prompt"""
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.done = True
        elif key == pygame.K_ESCAPE:
            self.text = ""
            self.done = True
        elif key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif unicode and (unicode.isdigit() or unicode in ".,") and len(self.text) < MAX_SPEED_DIGITS:
            self.text += unicode

    @property
    def value(self) -> float:
        return parse_ball_speed(self.text, self.default)
