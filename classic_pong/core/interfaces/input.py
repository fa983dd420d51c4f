"""
Input protocol - defines interface for key event sources
"""

from typing import Protocol

KEY_DOWN = "keydown"
KEY_UP = "keyup"


class InputSourceProtocol(Protocol):
    """
    Protocol for anything that turns key events into paddle velocities.

    Events are handled strictly between two ticks, so a velocity written here
    is seen in full by the next physics update.
    """

    def dispatch(self, event_type: str, key: str) -> bool:
        """
        Handle one key event.

        Args:
            event_type: "keydown" or "keyup"
            key: Key identifier, e.g. "w" or "ArrowUp"

        Returns:
            True if the key drives a paddle, False if it was ignored
        """
        ...
