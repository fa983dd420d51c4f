"""
PyGame front end of Classic Pong
"""

from classic_pong.gui.keyboard import PygameInputSource
from classic_pong.gui.keyboard import key_identifier
from classic_pong.gui.pygame_renderer import CaptionScoreDisplay
from classic_pong.gui.pygame_renderer import PygameSurface

__all__ = ["CaptionScoreDisplay", "PygameInputSource", "PygameSurface", "key_identifier"]
