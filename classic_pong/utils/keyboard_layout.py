"""
Keyboard layout detection for Classic Pong
"""

import locale
import os

from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config


def _layout_for_language(language: str) -> str | None:
    language = language.lower()
    if language.startswith("fr"):
        return "azerty"
    if language.startswith("de"):
        return "qwertz"
    if language and language not in ("c", "posix"):
        return "qwerty"
    return None


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
        layout = _layout_for_language(system_locale)
        if layout is not None:
            return layout

    # Fallback to environment variables
    for variable in ("LC_ALL", "LANG"):
        layout = _layout_for_language(os.environ.get(variable, ""))
        if layout is not None:
            return layout

    return "qwerty"


def auto_configure_layout(config: GameConfig = game_config) -> str:
    """Apply the detected layout to the configuration and return its name"""
    layout = detect_system_layout()
    if layout in KEYBOARD_LAYOUTS:
        config.KEYBOARD_LAYOUT = layout
    return config.KEYBOARD_LAYOUT


def describe_controls(config: GameConfig = game_config) -> list[str]:
    """Human readable control lines for the active layout"""
    layout = config.get_keyboard_layout()
    names = layout.display_names
    return [
        f"  Player 1 (Left): {names['up']}/{names['down']} ({layout.name})",
        "  Player 2 (Right): Up/Down arrows",
        "  Close the window to quit",
    ]
