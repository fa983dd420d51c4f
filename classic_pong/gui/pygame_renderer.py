"""
PyGame drawing backend for Classic Pong
"""

import math

import pygame

from classic_pong.core.interfaces.renderer import Color
from classic_pong.core.interfaces.renderer import Point

WINDOW_TITLE = "Classic Pong"


def dash_segments(start: Point, end: Point, dash: tuple[float, float]) -> list[tuple[Point, Point]]:
    """
    Splits a line into its visible dash segments.

    Args:
        start: Line start point
        end: Line end point
        dash: (dash length, gap length)

    Returns:
        List of (segment start, segment end) pairs, the last one may be shorter
    """
    dash_length, gap_length = dash
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    if length == 0:
        return []

    ux = (end[0] - start[0]) / length
    uy = (end[1] - start[1]) / length
    period = dash_length + gap_length

    segments = []
    distance = 0.0
    while distance < length:
        stop = min(distance + dash_length, length)
        segments.append(
            (
                (start[0] + ux * distance, start[1] + uy * distance),
                (start[0] + ux * stop, start[1] + uy * stop),
            )
        )
        distance += period
    return segments


class PygameSurface:
    """DrawingSurface implementation on top of a pygame.Surface"""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen

    def fill_background(self, color: Color) -> None:
        self.screen.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.screen, color, rect)

    def fill_circle(self, center_x: float, center_y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.screen, color, (int(center_x), int(center_y)), int(radius))

    def stroke_dashed_line(
        self,
        start: Point,
        end: Point,
        color: Color,
        width: int,
        dash: tuple[float, float],
    ) -> None:
        for seg_start, seg_end in dash_segments(start, end, dash):
            pygame.draw.line(
                self.screen,
                color,
                (round(seg_start[0]), round(seg_start[1])),
                (round(seg_end[0]), round(seg_end[1])),
                width,
            )


class CaptionScoreDisplay:
    """Shows the score in the window title bar"""

    def __init__(self, title: str = WINDOW_TITLE):
        self.title = title
        self.text: str | None = None

    def set_text(self, text: str) -> None:
        if text == self.text:
            return
        self.text = text
        pygame.display.set_caption(f"{self.title} - {text}")
