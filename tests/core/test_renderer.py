"""
Unit tests for the backend independent renderer
"""

import copy
from typing import Any

from classic_pong.core.renderer import Renderer, format_score


class RecordingSurface:
    """DrawingSurface that records every primitive call"""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def fill_background(self, color):
        self.calls.append(("background", color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def fill_circle(self, center_x, center_y, radius, color):
        self.calls.append(("circle", center_x, center_y, radius, color))

    def stroke_dashed_line(self, start, end, color, width, dash):
        self.calls.append(("dashed_line", start, end, color, width, dash))


class RecordingScoreDisplay:
    def __init__(self) -> None:
        self.texts: list[str] = []

    def set_text(self, text: str) -> None:
        self.texts.append(text)


WHITE = (255, 255, 255)


class TestRenderFrame:
    """Test a complete frame"""

    def test_draw_order(self, config, state):
        """Test background, center line, paddles then ball"""
        surface = RecordingSurface()
        renderer = Renderer(surface, config)

        renderer.render_frame(state)

        assert surface.calls == [
            ("background", (0, 0, 0)),
            ("dashed_line", (400, 0), (400, 600), (211, 211, 211), 2, (5, 5)),
            ("rect", 10, 262.5, 10, 75, WHITE),
            ("rect", 780, 262.5, 10, 75, WHITE),
            ("circle", 400, 300, 8, WHITE),
        ]

    def test_publishes_score(self, config, state):
        """Test score text goes to the score display"""
        display = RecordingScoreDisplay()
        renderer = Renderer(RecordingSurface(), config, display)
        state.player1.score = 3
        state.player2.score = 7

        renderer.render_frame(state)

        assert display.texts == ["Player 1: 3 - Player 2: 7"]

    def test_missing_score_display(self, config, state):
        """Test a frame renders fully without a score display"""
        surface = RecordingSurface()
        renderer = Renderer(surface, config, score_display=None)

        renderer.render_frame(state)
        renderer.draw_score(state)

        assert len(surface.calls) == 5

    def test_does_not_mutate_state(self, config, state):
        """Test rendering leaves the simulation untouched"""
        state.player1.dy = -5
        before = copy.deepcopy(state)
        renderer = Renderer(RecordingSurface(), config, RecordingScoreDisplay())

        renderer.render_frame(state)

        assert state == before

    def test_follows_state(self, config, state):
        """Test drawn positions track the state"""
        surface = RecordingSurface()
        renderer = Renderer(surface, config)
        state.ball.x, state.ball.y = 120, 45
        state.player2.y = 0

        renderer.render_frame(state)

        assert ("circle", 120, 45, 8, WHITE) in surface.calls
        assert ("rect", 780, 0, 10, 75, WHITE) in surface.calls


def test_format_score():
    assert format_score((0, 0)) == "Player 1: 0 - Player 2: 0"
    assert format_score((11, 2)) == "Player 1: 11 - Player 2: 2"
