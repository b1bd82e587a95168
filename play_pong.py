#!/usr/bin/env python3
"""
Main script to launch Ping Pong with PyGame graphical interface
"""

import argparse
import logging
import sys

from pingpong.gui.game_app import main
from pingpong.utils.config import KEYBOARD_LAYOUTS, game_config, load_config_from_file
from pingpong.utils.keyboard_layout import auto_configure_layout, show_layout_help


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Ping Pong")
    parser.add_argument(
        "--config", default="pingpong_config.json", help="JSON settings file to load if present"
    )
    parser.add_argument("--seconds", type=int, help="Match duration in seconds")
    parser.add_argument("--ball-speed", type=float, help="Ball speed, skips the speed prompt")
    parser.add_argument("--layout", choices=sorted(KEYBOARD_LAYOUTS), help="Keyboard layout")
    parser.add_argument("--seed", type=int, help="Seed for the serve angles")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args()


def apply_args(args: argparse.Namespace) -> None:
    """Override the loaded settings with command line options"""
    if args.seconds is not None:
        game_config.MATCH_SECONDS = args.seconds
    if args.ball_speed is not None:
        game_config.BALL_SPEED = args.ball_speed
        game_config.ASK_BALL_SPEED = False
    if args.layout is not None:
        game_config.KEYBOARD_LAYOUT = args.layout
    if args.seed is not None:
        game_config.RANDOM_SEED = args.seed
    if args.mute:
        game_config.SOUND_ENABLED = False


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=== PING PONG ===")
    print()

    if load_config_from_file(args.config):
        print(f"Loaded settings from {args.config}")
    apply_args(args)

    layout = auto_configure_layout()
    print(f"Keyboard configuration: {layout.upper()}")
    print()
    print(show_layout_help())

    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
