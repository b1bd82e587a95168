"""
Main game application with PyGame GUI: drives the engine and presents its events
"""

import logging

import pygame

from pingpong.core.engine import GameEngine
from pingpong.core.events import GameEvent, MatchEnded, MatchStarted
from pingpong.gui.controls import PaddleControls, SpeedPrompt
from pingpong.gui.pygame_renderer import PygameRenderer
from pingpong.gui.sound import SoundBoard
from pingpong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class PingPongApp:
    """Main application class for Ping Pong with PyGame GUI"""

    def __init__(self, config: GameConfig = game_config) -> None:
        self.config = config
        self.renderer = PygameRenderer(config=config)
        self.sounds = SoundBoard(config.SOUNDS_DIR, enabled=config.SOUND_ENABLED)
        self.controls = PaddleControls(config.get_keyboard_layout())
        self.engine = GameEngine.from_config(config, event_sink=self.on_event)
        self.engine.resize(self.renderer.width, self.renderer.height)

        self.running = True
        self.ask_ball_speed = config.ASK_BALL_SPEED
        self.prompt: SpeedPrompt | None = None
        # Real time accumulated towards the next match clock tick
        self.clock_accumulator = 0.0

    def on_event(self, event: GameEvent) -> None:
        """Engine event sink: plays sounds and logs the match lifecycle"""
        self.sounds.play_for(event)
        if isinstance(event, MatchStarted):
            logger.info("Match started")
        elif isinstance(event, MatchEnded):
            left, right = self.engine.get_scores()
            logger.info("Match over, final score %d - %d", left, right)

    def toggle_match(self) -> None:
        """Start/stop control; the first start asks for the ball speed"""
        if self.engine.is_running:
            self.engine.stop()
        elif self.ask_ball_speed:
            self.prompt = SpeedPrompt(self.engine.base_ball_speed)
        else:
            self.start_match()

    def start_match(self) -> None:
        self.clock_accumulator = 0.0
        self.engine.start()

    def handle_resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        self.renderer.resize(width, height)
        self.engine.resize(width, height)

    def handle_keydown(self, event: pygame.event.Event) -> None:
        if self.prompt is not None:
            self.prompt.handle_key(event.key, event.unicode)
            if self.prompt.done:
                self.engine.set_ball_base_speed(self.prompt.value)
                logger.info("Ball speed set to %g", self.prompt.value)
                self.prompt = None
                self.ask_ball_speed = False
                self.start_match()
        elif event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_SPACE:
            self.toggle_match()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.handle_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                self.handle_keydown(event)

    def update(self, dt: float) -> None:
        """Push input and elapsed time into the engine"""
        left, right = self.controls.directions(pygame.key.get_pressed())
        self.engine.set_left_direction(left)
        self.engine.set_right_direction(right)

        # The engine caps dt itself; the clock runs on real time
        self.engine.tick(dt)
        if not self.engine.is_running:
            return
        self.clock_accumulator += dt
        while self.clock_accumulator >= 1.0 and self.engine.is_running:
            self.clock_accumulator -= 1.0
            self.engine.tick_clock()

    def render(self) -> None:
        self.renderer.render_game_state(self.engine.get_game_state())
        if self.prompt is not None:
            self.renderer.draw_speed_prompt(self.prompt.text, self.prompt.default)
        self.renderer.present()

    def run(self) -> None:
        """Main loop"""
        try:
            while self.running:
                dt = self.renderer.update(self.config.FPS)
                self.handle_events()
                self.update(dt)
                self.render()
        finally:
            self.renderer.cleanup()


def main() -> None:
    """Main entry point"""
    app = PingPongApp()
    app.run()


if __name__ == "__main__":
    main()
