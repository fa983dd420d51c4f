"""
Frame renderer for Classic Pong, independent of the drawing backend
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import GameState
from classic_pong.core.entities import Paddle
from classic_pong.core.interfaces.renderer import DrawingSurface
from classic_pong.core.interfaces.renderer import ScoreDisplay
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config


def format_score(score: tuple[int, int]) -> str:
    return f"Player 1: {score[0]} - Player 2: {score[1]}"


class Renderer:
    """Draws the court, paddles and ball, and publishes the score text"""

    def __init__(
        self,
        surface: DrawingSurface,
        config: GameConfig = game_config,
        score_display: ScoreDisplay | None = None,
    ):
        self.surface = surface
        self.score_display = score_display

        self.background_color = config.BACKGROUND_COLOR
        self.ball_color = config.BALL_COLOR
        self.paddle_color = config.PADDLE_COLOR
        self.line_color = config.CENTER_LINE_COLOR
        self.line_width = config.CENTER_LINE_WIDTH
        self.line_dash = config.CENTER_LINE_DASH

    def draw_court(self, state: GameState) -> None:
        """Clear the surface and draw the dashed center line"""
        self.surface.fill_background(self.background_color)

        center_x = state.court.width / 2
        self.surface.stroke_dashed_line(
            (center_x, 0),
            (center_x, state.court.height),
            self.line_color,
            self.line_width,
            self.line_dash,
        )

    def draw_paddle(self, paddle: Paddle) -> None:
        self.surface.fill_rect(*paddle.get_rect(), self.paddle_color)

    def draw_ball(self, ball: Ball) -> None:
        self.surface.fill_circle(ball.x, ball.y, ball.radius, self.ball_color)

    def draw_score(self, state: GameState) -> None:
        """Publish the score text, skipped when there is no score display"""
        if self.score_display is None:
            return
        self.score_display.set_text(format_score(state.score))

    def render_frame(self, state: GameState) -> None:
        """Render the complete game state"""
        self.draw_court(state)
        self.draw_paddle(state.player1)
        self.draw_paddle(state.player2)
        self.draw_ball(state.ball)
        self.draw_score(state)
