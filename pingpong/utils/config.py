"""
Ping Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Paddle keys for a keyboard layout"""

    name: str
    left_keys: dict[str, int]
    right_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        right_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}

AUTO_LAYOUT = "auto"


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Reference field dimensions, every base size below is expressed for them
    FIELD_WIDTH: float = Field(default=800.0, gt=0, description="Base field width")
    FIELD_HEIGHT: float = Field(default=600.0, gt=0, description="Base field height")

    # Ball
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius at scale 1")
    BALL_SPEED: float = Field(default=300.0, ge=0, description="Ball speed in units/s")
    SERVE_MIN_COS: float = Field(
        default=0.0, ge=0, lt=1, description="Reroll serves with |cos| below this value"
    )

    # Paddles
    PADDLE_WIDTH: float = Field(default=18.0, gt=0, description="Paddle width at scale 1")
    PADDLE_HEIGHT: float = Field(default=74.0, gt=0, description="Paddle height at scale 1")
    PADDLE_SPEED: float = Field(default=250.0, ge=0, description="Paddle speed at scale 1")
    PADDLE_OFFSET: float = Field(default=20.0, ge=0, description="Paddle distance from its side")

    # Match
    MATCH_SECONDS: int = Field(default=180, gt=0, description="Match duration in seconds")
    MAX_DT: float = Field(default=0.05, gt=0, description="Largest simulated frame delta")
    RANDOM_SEED: int | None = Field(default=None, description="Serve angle seed")

    # Controls
    KEYBOARD_LAYOUT: str = Field(default=AUTO_LAYOUT, description="Keyboard layout name")
    ASK_BALL_SPEED: bool = Field(default=True, description="Prompt for ball speed once")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(100, 100, 100), description="RGB color")

    # Sound
    SOUND_ENABLED: bool = Field(default=True, description="Play sound effects")
    SOUNDS_DIR: str = Field(default="sounds", description="Directory holding sound files")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v != AUTO_LAYOUT and v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: "
                f"{[AUTO_LAYOUT, *KEYBOARD_LAYOUTS.keys()]}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_OFFSET + self.PADDLE_WIDTH + self.BALL_RADIUS)
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be greater than {min_width}")

        if self.FIELD_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(f"FIELD_HEIGHT must be greater than {self.PADDLE_HEIGHT}")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "pingpong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "pingpong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path, encoding="utf-8") as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields:
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance, used by the launcher and the pygame presenter
game_config = GameConfig()


def load_config_from_file(filepath: str = "pingpong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        logger.error("Error loading config %s: %s", filepath, e)
        return False

    for field_name in GameConfig.model_fields:
        setattr(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
