"""
Shared pytest configuration: pygame runs without a real display or audio device
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random  # noqa: E402

import pytest  # noqa: E402

from classic_pong.core.entities import GameState  # noqa: E402
from classic_pong.core.entities import create_game_state  # noqa: E402
from classic_pong.core.physics import PhysicsEngine  # noqa: E402
from classic_pong.utils.config import GameConfig  # noqa: E402


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def state(config: GameConfig) -> GameState:
    return create_game_state(config)


@pytest.fixture
def engine(config: GameConfig) -> PhysicsEngine:
    return PhysicsEngine(config, random.Random(1234))
