"""
Classic Pong game entities: court, paddles, ball and the simulation state
"""

from dataclasses import dataclass

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config


@dataclass(frozen=True)
class Court:
    """Playing area, fixed for the whole game"""

    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


@dataclass
class Paddle:
    """Player paddle, only moves vertically"""

    x: float
    y: float
    width: float
    height: float
    score: int = 0
    dy: float = 0.0

    def move(self) -> None:
        """Applies the current vertical velocity"""
        self.y += self.dy

    def constrain_position(self, court: Court) -> None:
        """Ensures the paddle stays inside the court, velocity is kept"""
        self.y = max(0.0, min(self.y, court.height - self.height))

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)

    def spans(self, y: float) -> bool:
        """True when y lies strictly between the paddle top and bottom edges"""
        return self.y < y < self.y + self.height


@dataclass
class Ball:
    """Game ball"""

    x: float
    y: float
    radius: float
    dx: float
    dy: float

    def update(self) -> None:
        """Updates the ball position by one frame"""
        self.x += self.dx
        self.y += self.dy

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.dy = -self.dy

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.dx = -self.dx

    def reset_to_center(self, court: Court, dx: float, dy: float) -> None:
        """Puts the ball back at the court center with a new velocity"""
        self.x, self.y = court.center
        self.dx = dx
        self.dy = dy

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius


@dataclass
class GameState:
    """Complete simulation state, passed explicitly to physics and rendering"""

    court: Court
    player1: Paddle
    player2: Paddle
    ball: Ball

    @property
    def score(self) -> tuple[int, int]:
        return (self.player1.score, self.player2.score)

    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.player1, self.player2)


def create_game_state(config: GameConfig = game_config) -> GameState:
    """Builds the startup state: centered paddles and the ball at the court center"""
    court = Court(config.FIELD_WIDTH, config.FIELD_HEIGHT)
    paddle_y = court.height / 2 - config.PADDLE_HEIGHT / 2

    player1 = Paddle(
        x=config.PADDLE_OFFSET,
        y=paddle_y,
        width=config.PADDLE_WIDTH,
        height=config.PADDLE_HEIGHT,
    )
    player2 = Paddle(
        x=court.width - config.PADDLE_OFFSET - config.PADDLE_WIDTH,
        y=paddle_y,
        width=config.PADDLE_WIDTH,
        height=config.PADDLE_HEIGHT,
    )

    center_x, center_y = court.center
    ball = Ball(
        x=center_x,
        y=center_y,
        radius=config.BALL_RADIUS,
        dx=config.BALL_SPEED,
        dy=config.BALL_SPEED,
    )
    return GameState(court=court, player1=player1, player2=player2, ball=ball)
