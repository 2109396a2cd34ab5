from __future__ import annotations

from typing import Any


class GameStateError(ValueError):
    """Base class for errors raised by the engine."""


class NoTransitionFound(GameStateError):
    """No conditional transition matched and no default transition is set.

    Usually this means the transitions between states are configured
    incorrectly for the value an action actually returned.
    """

    def __init__(self, *, state_id: int, value: Any):
        self.state_id = state_id
        self.value = value
        super().__init__("no relevant state or default state found")


class StateNotFound(GameStateError, KeyError):
    def __init__(self, state_id: int):
        self.state_id = state_id
        super().__init__(f"State not found: {state_id}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class ValueEncodingError(GameStateError):
    """A value could not be encoded for a persistent value store."""
