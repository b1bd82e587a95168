"""
Presenter protocol - defines the contract between the engine and whatever drives and displays it
"""

from collections.abc import Callable
from typing import Protocol

from pingpong.core.events import GameEvent

EventSink = Callable[[GameEvent], None]


class PresenterProtocol(Protocol):
    """
    Protocol for presenters (pygame window, headless runner, tests...).

    The presenter owns the time source and the input devices. It pushes frame
    deltas, clock ticks, resize notifications and direction commands into the
    engine from a single thread, and receives engine events through on_event.
    The engine never draws, plays sounds or reads the wall clock.
    """

    def on_event(self, event: GameEvent) -> None:
        """
        Receive an engine event.

        Called synchronously from inside engine commands, in emission order.
        Presenters may ignore events they do not care about.

        Args:
            event: MatchStarted, MatchEnded, PaddleHit, WallHit, Scored or ClockTick
        """
        ...
