"""
PyGame renderer for Ping Pong game
"""

from typing import Any

import pygame

from pingpong.utils.config import GameConfig, game_config


def format_time(seconds: int) -> str:
    """Formats a number of seconds as MM:SS"""
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class PygameRenderer:
    """PyGame-based renderer for Ping Pong"""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        config: GameConfig = game_config,
    ):
        """Initialize the PyGame renderer with a resizable window"""
        self.width = width or int(config.FIELD_WIDTH)
        self.height = height or int(config.FIELD_HEIGHT)

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption("Ping Pong")

        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = config.LINE_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)

        self.font_large = pygame.font.Font(None, 74)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 36)

    def resize(self, width: int, height: int) -> None:
        """Follow a window resize (pygame 2 resizes the display surface itself)"""
        self.width = width
        self.height = height
        self.screen = pygame.display.get_surface()

    def clear_screen(self) -> None:
        self.screen.fill(self.background_color)

    def draw_field(self) -> None:
        """Draw the center line"""
        center_x = self.width // 2
        pygame.draw.line(self.screen, self.line_color, (center_x, 0), (center_x, self.height), 2)

    def draw_ball(self, center: tuple[float, float], radius: float) -> None:
        pos = (int(center[0]), int(center[1]))
        pygame.draw.circle(self.screen, self.ball_color, pos, max(1, int(radius)))

    def draw_paddle(self, rect: tuple[float, float, float, float]) -> None:
        x, y, width, height = rect
        pygame.draw.rect(self.screen, self.paddle_color, pygame.Rect(x, y, width, height))

    def draw_scores(self, score: tuple[int, int], margin: int = 10) -> None:
        """Draw the scores in the top corners"""
        left_surface = self.font_large.render(str(score[0]), True, self.text_color)
        self.screen.blit(left_surface, (margin, margin))

        right_surface = self.font_large.render(str(score[1]), True, self.text_color)
        right_rect = right_surface.get_rect()
        right_rect.topright = (self.width - margin, margin)
        self.screen.blit(right_surface, right_rect)

    def draw_timer(self, remaining_seconds: int, margin: int = 10) -> None:
        """Draw the countdown at the top center"""
        time_surface = self.font_medium.render(format_time(remaining_seconds), True, self.text_color)
        time_rect = time_surface.get_rect()
        time_rect.midtop = (self.width // 2, margin)
        self.screen.blit(time_surface, time_rect)

    def draw_hint(self, running: bool, margin: int = 10) -> None:
        """Draw the start/stop hint at the bottom center"""
        hint = "SPACE: Stop" if running else "SPACE: Start"
        hint_surface = self.font_small.render(hint, True, self.line_color)
        hint_rect = hint_surface.get_rect()
        hint_rect.midbottom = (self.width // 2, self.height - margin)
        self.screen.blit(hint_surface, hint_rect)

    def draw_speed_prompt(self, text: str, default: float) -> None:
        """Draw the ball speed prompt shown before the first match"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        title_surface = self.font_medium.render("Ball speed:", True, self.text_color)
        title_rect = title_surface.get_rect()
        title_rect.center = (self.width // 2, self.height // 2 - 50)
        self.screen.blit(title_surface, title_rect)

        value = text or f"{default:g}"
        color = self.text_color if text else self.line_color
        value_surface = self.font_large.render(value, True, color)
        value_rect = value_surface.get_rect()
        value_rect.center = (self.width // 2, self.height // 2 + 10)
        self.screen.blit(value_surface, value_rect)

        inst_surface = self.font_small.render(
            "ENTER to confirm, ESC for default", True, self.text_color
        )
        inst_rect = inst_surface.get_rect()
        inst_rect.center = (self.width // 2, self.height // 2 + 70)
        self.screen.blit(inst_surface, inst_rect)

    def render_game_state(self, game_state: dict[str, Any]) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_field()

        self.draw_ball(game_state["ball_center"], game_state["ball_radius"])
        self.draw_paddle(game_state["left_paddle"])
        self.draw_paddle(game_state["right_paddle"])

        self.draw_scores(game_state["score"])
        self.draw_timer(game_state["remaining_seconds"])
        self.draw_hint(game_state["state"] == "running")

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int) -> float:
        """Wait for the next frame and return the elapsed time in seconds"""
        return self.clock.tick(fps) / 1000.0

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
