"""
Physics system for Classic Pong
"""

import random
from typing import Any

from classic_pong.core.collision import LEFT_GOAL
from classic_pong.core.collision import RIGHT_GOAL
from classic_pong.core.collision import CollisionDetector
from classic_pong.core.entities import GameState
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config


class PhysicsEngine:
    """Advances a GameState by one frame"""

    def __init__(self, config: GameConfig = game_config, rng: random.Random | None = None):
        self.ball_speed = config.BALL_SPEED
        self.collision_detector = CollisionDetector()
        self.rng = rng or random.Random()

    def reset_ball(self, state: GameState, serving_player: int) -> None:
        """
        Puts the ball back at the center, served toward serving_player.

        Args:
            state: Simulation state to modify
            serving_player: 1 sends the ball left, 2 sends it right
        """
        dx = -self.ball_speed if serving_player == 1 else self.ball_speed
        dy = self.ball_speed * (1 if self.rng.random() > 0.5 else -1)
        state.ball.reset_to_center(state.court, dx, dy)

    def update(self, state: GameState) -> dict[str, list]:
        """
        Updates the state by one frame.

        Paddles move first, then the ball. Wall reflection, scoring and paddle
        collision are then resolved in that order.

        Returns:
            Dictionary with the events of this frame:
            {"wall_bounces": [...], "goals": [...], "paddle_hits": [...]}
        """
        court = state.court
        ball = state.ball

        # Move players
        for paddle in state.paddles():
            paddle.move()
            paddle.constrain_position(court)

        ball.update()

        events: dict[str, list] = {
            "wall_bounces": [],
            "goals": [],
            "paddle_hits": [],
        }

        wall_collision = self.collision_detector.check_ball_walls(ball, court)
        if wall_collision is not None:
            ball.bounce_vertical()
            events["wall_bounces"].append(wall_collision)

        goal = self.collision_detector.check_goal(ball, court)
        if goal == LEFT_GOAL:
            # Player 1 missed
            state.player2.score += 1
            self.reset_ball(state, serving_player=1)
            events["goals"].append({"player": 2, "score": list(state.score)})
        elif goal == RIGHT_GOAL:
            # Player 2 missed
            state.player1.score += 1
            self.reset_ball(state, serving_player=2)
            events["goals"].append({"player": 1, "score": list(state.score)})

        if self.collision_detector.check_ball_paddle(ball, state.player1, 1):
            events["paddle_hits"].append({"player": 1})
        if self.collision_detector.check_ball_paddle(ball, state.player2, 2):
            events["paddle_hits"].append({"player": 2})

        return events

    def get_game_state(self, state: GameState) -> dict[str, Any]:
        """Returns a plain snapshot of the simulation state"""
        ball = state.ball
        return {
            "ball_position": (ball.x, ball.y),
            "ball_velocity": (ball.dx, ball.dy),
            "player1_position": (state.player1.x, state.player1.y),
            "player2_position": (state.player2.x, state.player2.y),
            "player1_velocity": state.player1.dy,
            "player2_velocity": state.player2.dy,
            "score": list(state.score),
            "field_bounds": (0, state.court.width, 0, state.court.height),
        }
