"""
Keyboard layout detection for Ping Pong
"""

import locale
import os

from pingpong.utils.config import AUTO_LAYOUT, KEYBOARD_LAYOUTS, GameConfig, game_config


def layout_for_locale(locale_name: str) -> str:
    """Maps a locale name such as 'fr_FR' or 'de_DE.UTF-8' to a layout name"""
    locale_name = locale_name.lower()
    if locale_name.startswith("fr"):
        return "azerty"
    if locale_name.startswith("de"):
        return "qwertz"
    return "qwerty"


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None
    if system_locale:
        return layout_for_locale(system_locale)

    # Fallback to environment variables
    lang = os.environ.get("LANG", "")
    if lang:
        return layout_for_locale(lang)

    return "qwerty"


def auto_configure_layout(config: GameConfig = game_config) -> str:
    """
    Resolves an 'auto' keyboard layout into a concrete one

    Returns:
        The selected layout name
    """
    if config.KEYBOARD_LAYOUT == AUTO_LAYOUT:
        config.KEYBOARD_LAYOUT = detect_system_layout()
    return config.KEYBOARD_LAYOUT


def show_layout_help(config: GameConfig = game_config) -> str:
    """
    Generate help text showing current key mappings

    Returns:
        Formatted help text
    """
    layout = config.get_keyboard_layout()

    help_text = f"Keyboard layout: {layout.name}\n"
    help_text += f"  Left paddle:  {layout.display_names['up']} / {layout.display_names['down']}\n"
    help_text += "  Right paddle: ↑ / ↓\n"
    help_text += "  SPACE: Start/Stop\n"
    help_text += "  ESC: Quit\n"
    help_text += f"Available layouts: {', '.join(sorted(KEYBOARD_LAYOUTS))}\n"

    return help_text
