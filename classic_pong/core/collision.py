"""
Collision checks for Classic Pong

All checks are axis-aligned: the ball is treated as a circle only through its
radius on each axis, paddles as rectangles.
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Court
from classic_pong.core.entities import Paddle

TOP = "top"
BOTTOM = "bottom"
LEFT_GOAL = "left_goal"
RIGHT_GOAL = "right_goal"


def hits_top_or_bottom(ball: Ball, court: Court) -> str | None:
    """Returns "bottom" or "top" when the ball crosses a horizontal wall"""
    if ball.bottom > court.height:
        return BOTTOM
    if ball.top < 0:
        return TOP
    return None


def crosses_goal_line(ball: Ball, court: Court) -> str | None:
    """Returns which goal line the ball crossed, the left one wins a tie"""
    if ball.left < 0:
        return LEFT_GOAL
    if ball.right > court.width:
        return RIGHT_GOAL
    return None


def hits_left_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Leading edge past the paddle face, inside its span and moving left"""
    return ball.left < paddle.x + paddle.width and paddle.spans(ball.y) and ball.dx < 0


def hits_right_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Leading edge past the paddle face, inside its span and moving right"""
    return ball.right > paddle.x and paddle.spans(ball.y) and ball.dx > 0


class CollisionDetector:
    """Collision detection entry points used by the physics engine"""

    def check_ball_walls(self, ball: Ball, court: Court) -> str | None:
        return hits_top_or_bottom(ball, court)

    def check_goal(self, ball: Ball, court: Court) -> str | None:
        return crosses_goal_line(ball, court)

    def check_ball_paddle(self, ball: Ball, paddle: Paddle, player_id: int) -> bool:
        """Checks a paddle collision and reflects the ball on a hit"""
        if player_id == 1:
            hit = hits_left_paddle(ball, paddle)
        else:
            hit = hits_right_paddle(ball, paddle)

        if hit:
            ball.bounce_horizontal()
        return hit
