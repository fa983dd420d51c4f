"""
Physics backend protocol - defines interface for physics engines
"""

from typing import Any
from typing import Protocol

from classic_pong.core.entities import GameState


class PhysicsBackend(Protocol):
    """
    Protocol for physics engine implementations.

    This allows swapping physics implementations without changing the loop.
    """

    def reset_ball(self, state: GameState, serving_player: int) -> None:
        """
        Reset ball to center, served toward a player.

        Args:
            state: Simulation state to modify
            serving_player: 1 for a serve to the left, 2 to the right
        """
        ...

    def update(self, state: GameState) -> dict[str, Any]:
        """
        Update the simulation by one frame.

        Returns:
            Dictionary with events that occurred:
            {
                "wall_bounces": [...],
                "goals": [...],
                "paddle_hits": [...]
            }
        """
        ...
