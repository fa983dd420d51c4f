"""
Renderer protocols - drawing surface, score display and renderer interfaces
"""

from typing import Protocol

from classic_pong.core.entities import GameState

Color = tuple[int, int, int]
Point = tuple[float, float]


class DrawingSurface(Protocol):
    """
    Protocol for 2D drawing targets with a fixed logical size.

    Enables multiple backends: Pygame, in-memory recorders for tests, etc.
    """

    def fill_background(self, color: Color) -> None:
        """Fill the whole surface with one color"""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a filled axis-aligned rectangle"""
        ...

    def fill_circle(self, center_x: float, center_y: float, radius: float, color: Color) -> None:
        """Draw a filled circle"""
        ...

    def stroke_dashed_line(
        self,
        start: Point,
        end: Point,
        color: Color,
        width: int,
        dash: tuple[float, float],
    ) -> None:
        """
        Draw a dashed line.

        Args:
            start: Line start point
            end: Line end point
            color: Stroke color
            width: Stroke width in pixels
            dash: (dash length, gap length)
        """
        ...


class ScoreDisplay(Protocol):
    """Text element showing the score outside the drawing surface"""

    def set_text(self, text: str) -> None:
        ...


class RendererProtocol(Protocol):
    """Draws a GameState without modifying it"""

    def render_frame(self, state: GameState) -> None:
        ...
