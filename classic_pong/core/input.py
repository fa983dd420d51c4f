"""
Keyboard to paddle velocity mapping for the two human players
"""

from classic_pong.core.entities import Paddle
from classic_pong.core.interfaces.input import KEY_DOWN
from classic_pong.core.interfaces.input import KEY_UP
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import KeyboardLayout
from classic_pong.utils.config import game_config


class PaddleControls:
    """Up and down keys bound to one paddle"""

    def __init__(self, paddle: Paddle, up_keys: tuple[str, ...], down_keys: tuple[str, ...]):
        self.paddle = paddle
        self.up_keys = frozenset(up_keys)
        self.down_keys = frozenset(down_keys)

    def owns(self, key: str) -> bool:
        return key in self.up_keys or key in self.down_keys

    def press(self, key: str, speed: float) -> None:
        if key in self.up_keys:
            self.paddle.dy = -speed
        elif key in self.down_keys:
            self.paddle.dy = speed

    def release(self) -> None:
        self.paddle.dy = 0.0


class InputMapper:
    """
    Writes paddle velocities from key identifiers.

    A key down sets the paddle moving (negative is up), a key up of either key
    of that paddle stops it. When both keys of a paddle are held, the last
    processed event wins.
    """

    def __init__(
        self,
        player1: Paddle,
        player2: Paddle,
        layout: KeyboardLayout | None = None,
        config: GameConfig = game_config,
    ):
        layout = layout or config.get_keyboard_layout()
        self.speed = config.PADDLE_SPEED
        self.controls = [
            PaddleControls(player1, layout.player1_up, layout.player1_down),
            PaddleControls(player2, layout.player2_up, layout.player2_down),
        ]

        p1_keys = self.controls[0].up_keys | self.controls[0].down_keys
        p2_keys = self.controls[1].up_keys | self.controls[1].down_keys
        if p1_keys & p2_keys:
            raise ValueError(f"Layout {layout.name} binds keys to both paddles: {p1_keys & p2_keys}")

    def key_down(self, key: str) -> bool:
        handled = False
        for control in self.controls:
            if control.owns(key):
                control.press(key, self.speed)
                handled = True
        return handled

    def key_up(self, key: str) -> bool:
        handled = False
        for control in self.controls:
            if control.owns(key):
                control.release()
                handled = True
        return handled

    def dispatch(self, event_type: str, key: str) -> bool:
        """Handle a "keydown" or "keyup" event, returns whether the key is bound"""
        if event_type == KEY_DOWN:
            return self.key_down(key)
        if event_type == KEY_UP:
            return self.key_up(key)
        raise ValueError(f"Unknown key event type: {event_type}")
