"""
Semantic events emitted by the game engine
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from pingpong.core.entities import Side


class EventType(Enum):
    """Tag carried by every engine event"""

    MATCH_STARTED = "match_started"
    MATCH_ENDED = "match_ended"
    PADDLE_HIT = "paddle_hit"
    WALL_HIT = "wall_hit"
    SCORED = "scored"
    CLOCK_TICK = "clock_tick"


@dataclass(frozen=True)
class GameEvent:
    """Base class of engine events"""

    type: ClassVar[EventType]


@dataclass(frozen=True)
class MatchStarted(GameEvent):
    type: ClassVar[EventType] = EventType.MATCH_STARTED


@dataclass(frozen=True)
class MatchEnded(GameEvent):
    type: ClassVar[EventType] = EventType.MATCH_ENDED


@dataclass(frozen=True)
class PaddleHit(GameEvent):
    """The ball bounced on the paddle of the given side"""

    side: Side
    type: ClassVar[EventType] = EventType.PADDLE_HIT


@dataclass(frozen=True)
class WallHit(GameEvent):
    type: ClassVar[EventType] = EventType.WALL_HIT


@dataclass(frozen=True)
class Scored(GameEvent):
    """A point was scored; carries the scorer and both totals after the point"""

    scorer: Side
    left: int
    right: int
    type: ClassVar[EventType] = EventType.SCORED


@dataclass(frozen=True)
class ClockTick(GameEvent):
    remaining_seconds: int
    type: ClassVar[EventType] = EventType.CLOCK_TICK


class EventRecorder:
    """Event sink keeping every received event, for headless runs and tests"""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def __call__(self, event: GameEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        return [event for event in self.events if event.type == event_type]

    def clear(self) -> None:
        self.events.clear()
