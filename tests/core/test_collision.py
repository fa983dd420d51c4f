"""
Unit tests for collision checks
"""

from classic_pong.core.collision import (
    BOTTOM,
    LEFT_GOAL,
    RIGHT_GOAL,
    TOP,
    CollisionDetector,
    crosses_goal_line,
    hits_left_paddle,
    hits_right_paddle,
    hits_top_or_bottom,
)
from classic_pong.core.entities import Ball, Court, Paddle

COURT = Court(800, 600)


def make_ball(x: float, y: float, dx: float = 4, dy: float = 4) -> Ball:
    return Ball(x=x, y=y, radius=8, dx=dx, dy=dy)


class TestWalls:
    """Test top and bottom wall detection"""

    def test_inside_court(self):
        assert hits_top_or_bottom(make_ball(400, 300), COURT) is None

    def test_bottom(self):
        assert hits_top_or_bottom(make_ball(400, 593), COURT) == BOTTOM

    def test_touching_bottom_is_not_a_hit(self):
        """Only crossing the wall counts, touching it does not"""
        assert hits_top_or_bottom(make_ball(400, 592), COURT) is None

    def test_top(self):
        assert hits_top_or_bottom(make_ball(400, 7), COURT) == TOP

    def test_touching_top_is_not_a_hit(self):
        assert hits_top_or_bottom(make_ball(400, 8), COURT) is None


class TestGoalLines:
    """Test goal line detection"""

    def test_left_goal(self):
        assert crosses_goal_line(make_ball(7, 300), COURT) == LEFT_GOAL

    def test_right_goal(self):
        assert crosses_goal_line(make_ball(793, 300), COURT) == RIGHT_GOAL

    def test_no_goal_on_the_line(self):
        assert crosses_goal_line(make_ball(8, 300), COURT) is None
        assert crosses_goal_line(make_ball(792, 300), COURT) is None


class TestPaddleHits:
    """Test paddle collision predicates"""

    def setup_method(self) -> None:
        self.left = Paddle(x=10, y=262.5, width=10, height=75)
        self.right = Paddle(x=780, y=262.5, width=10, height=75)

    def test_left_paddle_hit(self):
        assert hits_left_paddle(make_ball(27, 300, dx=-4), self.left)

    def test_left_paddle_needs_leftward_motion(self):
        assert not hits_left_paddle(make_ball(27, 300, dx=4), self.left)

    def test_left_paddle_outside_span(self):
        assert not hits_left_paddle(make_ball(27, 100, dx=-4), self.left)
        assert not hits_left_paddle(make_ball(27, 262.5, dx=-4), self.left)

    def test_left_paddle_not_reached(self):
        assert not hits_left_paddle(make_ball(28, 300, dx=-4), self.left)

    def test_ball_behind_left_paddle_still_hits(self):
        """Only the paddle plane is checked, not the ball's previous side"""
        assert hits_left_paddle(make_ball(12, 300, dx=-4), self.left)

    def test_right_paddle_hit(self):
        assert hits_right_paddle(make_ball(773, 300, dx=4), self.right)

    def test_right_paddle_needs_rightward_motion(self):
        assert not hits_right_paddle(make_ball(773, 300, dx=-4), self.right)

    def test_right_paddle_not_reached(self):
        assert not hits_right_paddle(make_ball(772, 300, dx=4), self.right)


class TestCollisionDetector:
    """Test the detector used by the physics engine"""

    def test_hit_reflects_ball(self):
        detector = CollisionDetector()
        ball = make_ball(27, 300, dx=-4, dy=3)
        paddle = Paddle(x=10, y=262.5, width=10, height=75)

        assert detector.check_ball_paddle(ball, paddle, 1)
        assert ball.dx == 4
        assert ball.dy == 3

    def test_miss_leaves_ball(self):
        detector = CollisionDetector()
        ball = make_ball(773, 100, dx=4)
        paddle = Paddle(x=780, y=262.5, width=10, height=75)

        assert not detector.check_ball_paddle(ball, paddle, 2)
        assert ball.dx == 4
