"""
Game engine for Ping Pong: owns the ball, the paddles, the field, the score
and the match clock, and turns time deltas and commands into events
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

import numpy as np

from pingpong.core.entities import AngleSource, Ball, Direction, Paddle, Side
from pingpong.core.events import (
    ClockTick,
    GameEvent,
    MatchEnded,
    MatchStarted,
    PaddleHit,
    Scored,
    WallHit,
)
from pingpong.core.field import Field
from pingpong.core.geometry import circle_intersects_rect, clamp
from pingpong.core.interfaces.presenter import EventSink

if TYPE_CHECKING:
    from pingpong.utils.config import GameConfig

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """Engine lifecycle state"""

    IDLE = "idle"
    RUNNING = "running"


@dataclass
class Score:
    """Points of both players"""

    left: int = 0
    right: int = 0

    def add_point(self, side: Side) -> None:
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def total(self) -> int:
        return self.left + self.right

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class MatchClock:
    """Match countdown, advanced by the driver once per real second"""

    total_seconds: int = 180
    remaining_seconds: int = 180

    def reset(self) -> None:
        self.remaining_seconds = self.total_seconds

    def tick(self) -> int:
        """Consumes one second and returns the remaining time"""
        self.remaining_seconds = max(0, self.remaining_seconds - 1)
        return self.remaining_seconds

    @property
    def expired(self) -> bool:
        return self.remaining_seconds == 0


class GameEngine:
    """
    Ping Pong simulation core.

    The engine is driven from a single thread: the presenter calls tick() with
    frame deltas, tick_clock() once per real second, resize() when the
    playfield changes and the direction setters on input. Events are reported
    synchronously through the event sink, in the order they happen.
    """

    def __init__(
        self,
        base_width: float = 800.0,
        base_height: float = 600.0,
        base_ball_speed: float = 300.0,
        base_paddle_speed: float = 250.0,
        base_paddle_size: tuple[float, float] = (18.0, 74.0),
        base_ball_radius: float = 10.0,
        paddle_offset: float = 20.0,
        match_seconds: int = 180,
        rng_seed: int | None = None,
        *,
        rng: AngleSource | None = None,
        event_sink: EventSink | None = None,
        max_dt: float | None = None,
        serve_min_cos: float = 0.0,
    ):
        """
        Args:
            base_width: Reference field width, also the initial field width
            base_height: Reference field height, also the initial field height
            base_ball_speed: Ball speed in world units per second (never scaled)
            base_paddle_speed: Paddle speed at scale 1
            base_paddle_size: Paddle (width, height) at scale 1
            base_ball_radius: Ball radius at scale 1
            paddle_offset: Distance between a paddle and its side of the field at scale 1
            match_seconds: Match duration
            rng_seed: Seed of the default random generator
            rng: Random source overriding the default numpy generator
            event_sink: Callable receiving every emitted event
            max_dt: Optional upper bound applied to each tick delta
            serve_min_cos: Serve angles with |cos| below this value are redrawn
        """
        self.field = Field(base_width, base_height)
        self.base_ball_speed = base_ball_speed
        self.base_paddle_speed = base_paddle_speed
        self.base_paddle_width, self.base_paddle_height = base_paddle_size
        self.base_ball_radius = base_ball_radius
        self.paddle_offset = paddle_offset
        self.max_dt = max_dt
        self.serve_min_cos = serve_min_cos

        self.rng: AngleSource = rng if rng is not None else np.random.default_rng(rng_seed)
        self.event_sink = event_sink

        self.ball = Ball(0.0, 0.0, base_ball_radius, base_ball_speed)
        self.left_paddle = Paddle(
            0.0, 0.0, self.base_paddle_width, self.base_paddle_height, base_paddle_speed, Side.LEFT
        )
        self.right_paddle = Paddle(
            0.0, 0.0, self.base_paddle_width, self.base_paddle_height, base_paddle_speed, Side.RIGHT
        )

        self.score = Score()
        self.clock = MatchClock(match_seconds, match_seconds)
        self.score_history: list[Scored] = []
        self.state = EngineState.IDLE

        self._apply_field_scale()
        self._center_entities()

    @classmethod
    def from_config(
        cls,
        config: "GameConfig",
        event_sink: EventSink | None = None,
        rng: AngleSource | None = None,
    ) -> "GameEngine":
        """Builds an engine from a GameConfig"""
        return cls(
            base_width=config.FIELD_WIDTH,
            base_height=config.FIELD_HEIGHT,
            base_ball_speed=config.BALL_SPEED,
            base_paddle_speed=config.PADDLE_SPEED,
            base_paddle_size=(config.PADDLE_WIDTH, config.PADDLE_HEIGHT),
            base_ball_radius=config.BALL_RADIUS,
            paddle_offset=config.PADDLE_OFFSET,
            match_seconds=config.MATCH_SECONDS,
            rng_seed=config.RANDOM_SEED,
            rng=rng,
            event_sink=event_sink,
            max_dt=config.MAX_DT,
            serve_min_cos=config.SERVE_MIN_COS,
        )

    # Commands

    def start(self) -> None:
        """Starts a new match (restarts it when one is already running)"""
        self.score.reset()
        self.score_history.clear()
        self.clock.reset()
        self._respawn_ball()
        self._reset_paddles()
        self.state = EngineState.RUNNING
        logger.debug("Match started (%d s)", self.clock.total_seconds)
        self._emit(MatchStarted())

    def stop(self) -> None:
        """Ends the running match; does nothing when already idle"""
        if self.state is not EngineState.RUNNING:
            return
        self.state = EngineState.IDLE
        logger.debug("Match ended with score %d-%d", self.score.left, self.score.right)
        self._emit(MatchEnded())

    def tick(self, dt: float) -> None:
        """Advances the simulation by dt seconds and resolves collisions"""
        if self.state is not EngineState.RUNNING:
            return
        if self.max_dt is not None:
            dt = min(dt, self.max_dt)

        self.ball.advance(dt)
        self.left_paddle.advance(dt, self.field.height)
        self.right_paddle.advance(dt, self.field.height)

        scored = False
        # A paddle hit cancels scoring for this tick so the ball cannot score through a paddle
        if not self._check_paddles():
            scored = self._check_goals()
        if not scored:
            self._check_walls()

    def tick_clock(self) -> None:
        """Consumes one second of match time; ends the match when time is up"""
        if self.state is not EngineState.RUNNING:
            return
        remaining = self.clock.tick()
        self._emit(ClockTick(remaining))
        if self.clock.expired:
            self.stop()

    def resize(self, width: float, height: float) -> None:
        """Resizes the field and rescales paddles, paddle speed and ball radius"""
        self.field.resize(width, height)
        self._apply_field_scale()
        if self.state is EngineState.IDLE:
            self._center_entities()
        else:
            # The ball keeps its position; wall reflection brings it back if needed
            for paddle in (self.left_paddle, self.right_paddle):
                paddle.position.y = clamp(
                    paddle.position.y, 0.0, max(0.0, self.field.height - paddle.height)
                )
        logger.debug("Field resized to %sx%s (scale %.3f)", width, height, self.field.scale)

    def set_ball_base_speed(self, speed: float) -> None:
        """Sets the ball speed used from the next serve on"""
        self.base_ball_speed = speed
        self.ball.set_speed(speed)

    def set_paddle_base_speed(self, speed: float) -> None:
        """Sets the paddle speed at scale 1 and applies it at the current scale"""
        self.base_paddle_speed = speed
        self._apply_paddle_speed()

    def set_left_direction(self, direction: Direction) -> None:
        self.left_paddle.set_direction(direction)

    def set_right_direction(self, direction: Direction) -> None:
        self.right_paddle.set_direction(direction)

    # Queries

    @property
    def is_running(self) -> bool:
        return self.state is EngineState.RUNNING

    @property
    def remaining_seconds(self) -> int:
        return self.clock.remaining_seconds

    @property
    def field_size(self) -> tuple[float, float]:
        return self.field.size()

    def get_scores(self) -> tuple[int, int]:
        return self.score.to_tuple()

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the engine state"""
        return {
            "state": self.state.value,
            "score": self.score.to_tuple(),
            "field_size": self.field.size(),
            "scale": self.field.scale,
            "ball_center": self.ball.center.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.velocity.magnitude(),
            "ball_radius": self.ball.radius,
            "left_paddle": tuple(self.left_paddle.get_rect()),
            "right_paddle": tuple(self.right_paddle.get_rect()),
            "remaining_seconds": self.clock.remaining_seconds,
        }

    # Internals

    def _emit(self, event: GameEvent) -> None:
        if self.event_sink is not None:
            self.event_sink(event)

    def _apply_field_scale(self) -> None:
        """Recomputes every size derived from the field dimensions"""
        scale = self.field.scale
        paddle_width = self.base_paddle_width * self.field.width_ratio
        paddle_height = self.base_paddle_height * self.field.height_ratio
        offset = self.paddle_offset * scale

        for paddle in (self.left_paddle, self.right_paddle):
            paddle.width = paddle_width
            paddle.height = paddle_height
        self.left_paddle.position.x = offset
        self.right_paddle.position.x = self.field.width - offset - paddle_width

        self.ball.radius = self.base_ball_radius * self.field.height_ratio
        self._apply_paddle_speed()

    def _apply_paddle_speed(self) -> None:
        speed = self.base_paddle_speed * self.field.scale
        self.left_paddle.set_speed(speed)
        self.right_paddle.set_speed(speed)

    def _center_entities(self) -> None:
        self.ball.center = self.field.center
        self._reset_paddles()

    def _reset_paddles(self) -> None:
        center_y = self.field.height / 2
        self.left_paddle.reset(center_y)
        self.right_paddle.reset(center_y)

    def _respawn_ball(self) -> None:
        center = self.field.center
        self.ball.respawn(center.x, center.y, self.rng, self.serve_min_cos)

    def _check_paddles(self) -> bool:
        """Resolves at most one paddle collision, left paddle first"""
        ball = self.ball
        for paddle in (self.left_paddle, self.right_paddle):
            rect = paddle.get_rect()
            if not circle_intersects_rect(ball.center.x, ball.center.y, ball.radius, rect):
                continue

            # Push the ball out through the face looking at the middle of the field
            if rect.center_x < self.field.width / 2:
                ball.center.x = rect.max_x + ball.radius
                outwards = math.inf
            else:
                ball.center.x = rect.min_x - ball.radius
                outwards = -math.inf
            # The sum can round back into the paddle at non-integer scales
            while circle_intersects_rect(ball.center.x, ball.center.y, ball.radius, rect):
                ball.center.x = math.nextafter(ball.center.x, outwards)
            ball.reverse_x()
            self._emit(PaddleHit(paddle.side))
            return True
        return False

    def _check_goals(self) -> bool:
        ball = self.ball
        if ball.center.x - ball.radius <= 0:
            scorer = Side.RIGHT
        elif ball.center.x + ball.radius >= self.field.width:
            scorer = Side.LEFT
        else:
            return False

        self.score.add_point(scorer)
        event = Scored(scorer, self.score.left, self.score.right)
        self.score_history.append(event)
        logger.debug("Point for %s: %d-%d", scorer.value, self.score.left, self.score.right)
        self._emit(event)
        self._respawn_ball()
        return True

    def _check_walls(self) -> None:
        ball = self.ball
        # Only reflect a ball heading into the wall, otherwise a ball left outside
        # the field by a resize would flip back and forth forever
        top_hit = ball.center.y - ball.radius <= 0 and ball.velocity.y < 0
        bottom_hit = ball.center.y + ball.radius >= self.field.height and ball.velocity.y > 0
        if top_hit or bottom_hit:
            ball.reverse_y()
            self._emit(WallHit())
