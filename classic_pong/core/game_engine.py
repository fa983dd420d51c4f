"""
Classic Pong main game engine
"""

from typing import Any

from classic_pong.core.entities import GameState
from classic_pong.core.interfaces.physics import PhysicsBackend
from classic_pong.core.interfaces.renderer import RendererProtocol


class GameEngine:
    """Runs one frame at a time: physics update, then rendering"""

    def __init__(
        self,
        state: GameState,
        physics: PhysicsBackend,
        renderer: RendererProtocol | None = None,
    ):
        self.state = state
        self.physics = physics
        self.renderer = renderer
        self.frame_count = 0

    def tick(self) -> dict[str, Any]:
        """
        Updates the game by one frame and draws it

        Returns:
            The physics events of this frame
        """
        events = self.physics.update(self.state)
        if self.renderer is not None:
            self.renderer.render_frame(self.state)
        self.frame_count += 1
        return events

    def run_frames(self, count: int) -> list[dict[str, Any]]:
        """Runs several frames back to back, without any frame pacing"""
        return [self.tick() for _ in range(count)]

    def get_score(self) -> tuple[int, int]:
        return self.state.score
