"""
Headless Ping Pong match: drives the engine with a fixed frame rate and
prints the events it emits
"""

from pingpong.core.engine import GameEngine
from pingpong.core.entities import Direction
from pingpong.core.events import ClockTick, EventType, GameEvent

FPS = 60
MATCH_SECONDS = 20


def print_event(event: GameEvent) -> None:
    if isinstance(event, ClockTick):
        return
    print(f"{event.type.value:>14}: {event}")


def run_headless_match(seed: int = 7) -> tuple[int, int]:
    """Plays a full match where both paddles follow the ball"""
    engine = GameEngine(match_seconds=MATCH_SECONDS, rng_seed=seed, event_sink=print_event)
    engine.start()

    frame = 0
    while engine.is_running:
        for paddle, setter in (
            (engine.left_paddle, engine.set_left_direction),
            (engine.right_paddle, engine.set_right_direction),
        ):
            paddle_center = paddle.position.y + paddle.height / 2
            if engine.ball.center.y < paddle_center - 5:
                setter(Direction.UP)
            elif engine.ball.center.y > paddle_center + 5:
                setter(Direction.DOWN)
            else:
                setter(Direction.NONE)

        engine.tick(1 / FPS)
        frame += 1
        if frame % FPS == 0:
            engine.tick_clock()

    print(f"Final score: {engine.get_scores()}")
    print(f"Points: {len(engine.score_history)}, last: {engine.score_history[-1:]}")
    return engine.get_scores()


if __name__ == "__main__":
    print(f"Event types: {[event_type.value for event_type in EventType]}")
    run_headless_match()
