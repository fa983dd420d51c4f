"""
Core module of Classic Pong game
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Court
from classic_pong.core.entities import GameState
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import create_game_state
from classic_pong.core.game_engine import GameEngine
from classic_pong.core.input import InputMapper
from classic_pong.core.physics import PhysicsEngine
from classic_pong.core.renderer import Renderer

__all__ = [
    "Ball",
    "Court",
    "GameEngine",
    "GameState",
    "InputMapper",
    "Paddle",
    "PhysicsEngine",
    "Renderer",
    "create_game_state",
]
