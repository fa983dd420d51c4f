"""
Protocols between the simulation core and its collaborators
"""

from classic_pong.core.interfaces.input import InputSourceProtocol
from classic_pong.core.interfaces.physics import PhysicsBackend
from classic_pong.core.interfaces.renderer import DrawingSurface
from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.core.interfaces.renderer import ScoreDisplay

__all__ = [
    "DrawingSurface",
    "InputSourceProtocol",
    "PhysicsBackend",
    "RendererProtocol",
    "ScoreDisplay",
]
