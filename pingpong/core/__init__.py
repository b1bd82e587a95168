"""
Core module of Ping Pong game
"""

from pingpong.core.engine import EngineState
from pingpong.core.engine import GameEngine
from pingpong.core.entities import Ball
from pingpong.core.entities import Direction
from pingpong.core.entities import Paddle
from pingpong.core.entities import Side
from pingpong.core.events import EventRecorder
from pingpong.core.events import EventType
from pingpong.core.events import GameEvent
from pingpong.core.field import Field
from pingpong.core.geometry import Rect
from pingpong.core.geometry import Vector2D

__all__ = [
    "Ball",
    "Direction",
    "EngineState",
    "EventRecorder",
    "EventType",
    "Field",
    "GameEngine",
    "GameEvent",
    "Paddle",
    "Rect",
    "Side",
    "Vector2D",
]
