"""
Sound effects played by the pygame presenter in response to engine events
"""

import logging
from pathlib import Path

import pygame

from pingpong.core.events import EventType, GameEvent

logger = logging.getLogger(__name__)

# Wall hits reuse the paddle clip
EVENT_SOUNDS: dict[EventType, str] = {
    EventType.MATCH_STARTED: "game_start.wav",
    EventType.MATCH_ENDED: "game_over.wav",
    EventType.PADDLE_HIT: "ping.wav",
    EventType.WALL_HIT: "ping.wav",
    EventType.SCORED: "score.wav",
}


class SoundBoard:
    """Loads one clip per event type; events without a playable clip stay silent"""

    def __init__(self, sounds_dir: str | Path, enabled: bool = True):
        self.sounds_dir = Path(sounds_dir)
        self.clips: dict[EventType, pygame.mixer.Sound] = {}
        self.enabled = enabled and self._init_mixer()
        if self.enabled:
            self._load_clips()

    @staticmethod
    def _init_mixer() -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio unavailable, sounds disabled: %s", e)
            return False
        return True

    def _load_clips(self) -> None:
        loaded: dict[str, pygame.mixer.Sound | None] = {}
        for event_type, file_name in EVENT_SOUNDS.items():
            if file_name not in loaded:
                loaded[file_name] = self._load(file_name)
            clip = loaded[file_name]
            if clip is not None:
                self.clips[event_type] = clip

    def _load(self, file_name: str) -> pygame.mixer.Sound | None:
        path = self.sounds_dir / file_name
        if not path.is_file():
            logger.warning("Sound file not found: %s", path)
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.warning("Could not load sound %s: %s", path, e)
            return None

    def play_for(self, event: GameEvent) -> None:
        if not self.enabled:
            return
        clip = self.clips.get(event.type)
        if clip is not None:
            clip.play()
