"""
Utility module of the Ping Pong game
"""

from pingpong.utils.config import GameConfig
from pingpong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
