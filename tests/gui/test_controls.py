"""
Tests for keyboard controls and the ball speed prompt
"""

import pygame
import pytest

from pingpong.core.entities import Direction
from pingpong.gui.controls import (
    PaddleControls,
    SpeedPrompt,
    direction_from_keys,
    parse_ball_speed,
)
from pingpong.utils.config import KEYBOARD_LAYOUTS

UP_DOWN = {"up": pygame.K_w, "down": pygame.K_s}


class TestDirectionFromKeys:
    """Tests for key state to direction mapping"""

    @pytest.mark.parametrize(
        "pressed,expected",
        [
            ({}, Direction.NONE),
            ({pygame.K_w: True}, Direction.UP),
            ({pygame.K_s: True}, Direction.DOWN),
            ({pygame.K_w: True, pygame.K_s: True}, Direction.NONE),
            ({pygame.K_w: False, pygame.K_s: True}, Direction.DOWN),
        ],
    )
    def test_mapping(self, pressed, expected):
        assert direction_from_keys(pressed, UP_DOWN) is expected

    def test_paddle_controls(self):
        controls = PaddleControls(KEYBOARD_LAYOUTS["qwerty"])
        assert controls.directions({pygame.K_w: True}) == (Direction.UP, Direction.NONE)
        assert controls.directions({pygame.K_s: True, pygame.K_UP: True}) == (
            Direction.DOWN,
            Direction.UP,
        )

    def test_azerty_left_paddle(self):
        controls = PaddleControls(KEYBOARD_LAYOUTS["azerty"])
        assert controls.directions({pygame.K_z: True, pygame.K_DOWN: True}) == (
            Direction.UP,
            Direction.DOWN,
        )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("450", 450.0),
        (" 12.5 ", 12.5),
        ("3,5", 3.5),
        ("0", 0.0),
        ("", 300.0),
        ("fast", 300.0),
        ("-5", 300.0),
        ("inf", 300.0),
        ("nan", 300.0),
    ],
)
def test_parse_ball_speed(text, expected):
    assert parse_ball_speed(text, 300.0) == expected


class TestSpeedPrompt:
    """Tests for the ball speed prompt"""

    def type_text(self, prompt: SpeedPrompt, text: str) -> None:
        for char in text:
            prompt.handle_key(ord(char), char)

    def test_enter_confirms(self):
        prompt = SpeedPrompt(300.0)
        self.type_text(prompt, "450")
        assert not prompt.done
        prompt.handle_key(pygame.K_RETURN, "\r")
        assert prompt.done
        assert prompt.value == 450.0

    def test_backspace(self):
        prompt = SpeedPrompt(300.0)
        self.type_text(prompt, "4509")
        prompt.handle_key(pygame.K_BACKSPACE, "\b")
        assert prompt.text == "450"

    def test_escape_keeps_default(self):
        prompt = SpeedPrompt(300.0)
        self.type_text(prompt, "450")
        prompt.handle_key(pygame.K_ESCAPE, "\x1b")
        assert prompt.done
        assert prompt.value == 300.0

    def test_ignores_letters_and_long_input(self):
        prompt = SpeedPrompt(300.0)
        self.type_text(prompt, "a1b2")
        assert prompt.text == "12"
        self.type_text(prompt, "3456789")
        assert prompt.text == "123456"
