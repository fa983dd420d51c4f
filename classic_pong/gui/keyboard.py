"""
PyGame keyboard events to key identifiers
"""

from collections.abc import Iterable

import pygame

from classic_pong.core.interfaces.input import KEY_DOWN
from classic_pong.core.interfaces.input import KEY_UP
from classic_pong.core.interfaces.input import InputSourceProtocol

SPECIAL_KEYS = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}

EVENT_TYPES = {
    pygame.KEYDOWN: KEY_DOWN,
    pygame.KEYUP: KEY_UP,
}


def key_identifier(event: pygame.event.Event) -> str | None:
    """
    Name of the key of a KEYDOWN/KEYUP event.

    Arrow keys map to "ArrowUp", "ArrowDown", ...; printable ASCII keys to
    their character (pygame key codes for letters are lowercase). Other keys
    return None.
    """
    key = getattr(event, "key", None)
    if key is None:
        return None
    if key in SPECIAL_KEYS:
        return SPECIAL_KEYS[key]
    if 32 < key < 127:
        return chr(key)
    return None


class PygameInputSource:
    """Feeds pygame events to an input mapper"""

    def __init__(self, mapper: InputSourceProtocol):
        self.mapper = mapper

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle one pygame event

        Returns:
            False when the window was closed, True otherwise
        """
        if event.type == pygame.QUIT:
            return False

        event_type = EVENT_TYPES.get(event.type)
        if event_type is not None:
            key = key_identifier(event)
            if key is not None:
                self.mapper.dispatch(event_type, key)
        return True

    def process_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """Handle all pending events, returns False once a QUIT was seen"""
        keep_running = True
        for event in events:
            if not self.handle_event(event):
                keep_running = False
        return keep_running
