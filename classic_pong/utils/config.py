"""
Classic Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

Color = tuple[int, int, int]


@dataclass(frozen=True)
class KeyboardLayout:
    """Key identifiers driving each paddle for one keyboard layout"""

    name: str
    player1_up: tuple[str, ...]
    player1_down: tuple[str, ...]
    player2_up: tuple[str, ...]
    player2_down: tuple[str, ...]
    display_names: dict[str, str]


ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        player1_up=("w", "W"),
        player1_down=("s", "S"),
        player2_up=(ARROW_UP,),
        player2_down=(ARROW_DOWN,),
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        player1_up=("z", "Z"),  # Z instead of W
        player1_down=("s", "S"),
        player2_up=(ARROW_UP,),
        player2_down=(ARROW_DOWN,),
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        player1_up=("w", "W"),
        player1_down=("s", "S"),
        player2_up=(ARROW_UP,),
        player2_down=(ARROW_DOWN,),
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Court dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Court width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Court height in pixels")

    # Ball, speeds are in pixels per frame
    BALL_RADIUS: float = Field(default=8.0, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=4.0, gt=0, description="Ball speed on each axis")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=75.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=5.0, gt=0, description="Paddle speed")
    PADDLE_OFFSET: float = Field(default=10.0, ge=0, description="Paddle distance from edge")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    CENTER_LINE_COLOR: Color = Field(default=(211, 211, 211), description="RGB color")
    CENTER_LINE_WIDTH: int = Field(default=2, gt=0, description="Center line width")
    CENTER_LINE_DASH: tuple[float, float] = Field(
        default=(5.0, 5.0), description="Dash length and gap of the center line"
    )

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("CENTER_LINE_DASH")
    @classmethod
    def validate_center_line_dash(cls, v: tuple[float, float]) -> tuple[float, float]:
        """A dash needs a visible stroke and a non-negative gap"""
        dash, gap = v
        if dash <= 0 or gap < 0:
            raise ValueError(f"CENTER_LINE_DASH ({v}) needs a positive dash and a gap >= 0")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the court is large enough for game elements"""
        min_width = 2 * (self.PADDLE_OFFSET + self.PADDLE_WIDTH + 2 * self.BALL_RADIUS)
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be greater than {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, 2 * self.BALL_RADIUS)
        if self.FIELD_HEIGHT <= min_height:
            raise ValueError(f"FIELD_HEIGHT must be greater than {min_height} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values, recording the old value of each applied change"""
    for name, new_value in kwargs.items():
        old_value = getattr(obj, name)
        setattr(obj, name, new_value)
        old_values[name] = old_value


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        _change_values(game_config, {}, **old_values)
