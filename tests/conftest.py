"""
Shared fixtures: deterministic serve angles and engines recording their events
"""

import pytest

from pingpong.core.engine import GameEngine
from pingpong.core.events import EventRecorder


class FixedAngles:
    """Angle source returning a scripted sequence, repeating the last angle"""

    def __init__(self, *angles: float):
        self.angles = list(angles) or [0.0]
        self.calls = 0

    def uniform(self, low: float, high: float) -> float:
        angle = self.angles[min(self.calls, len(self.angles) - 1)]
        self.calls += 1
        return angle


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def make_engine(recorder):
    """Factory building an engine with scripted serve angles (default: straight right)"""

    def _make(*angles: float, **kwargs) -> GameEngine:
        rng = FixedAngles(*angles) if angles else FixedAngles(0.0)
        return GameEngine(rng=rng, event_sink=recorder, **kwargs)

    return _make


@pytest.fixture
def fixed_angles() -> type[FixedAngles]:
    return FixedAngles
