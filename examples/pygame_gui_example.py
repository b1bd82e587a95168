"""
Simple Ping Pong game example with graphical interface
"""

import sys

try:
    from pingpong.gui.game_app import PingPongApp
    from pingpong.utils.config import GameConfig
except ImportError as e:
    print(f"Error: Unable to import required modules: {e}")
    print("Make sure pygame is installed: pip install pygame")
    sys.exit(1)


def run_short_match():
    """Launch a one minute match without the ball speed prompt"""
    print("Launching a one minute Ping Pong match...")

    config = GameConfig(MATCH_SECONDS=60, ASK_BALL_SPEED=False, KEYBOARD_LAYOUT="qwerty")
    app = PingPongApp(config)
    app.run()


if __name__ == "__main__":
    run_short_match()
