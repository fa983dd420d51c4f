"""
Utility modules of Classic Pong
"""

from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import KeyboardLayout
from classic_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig", "KeyboardLayout", "KEYBOARD_LAYOUTS"]
