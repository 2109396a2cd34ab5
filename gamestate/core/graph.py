from __future__ import annotations

from collections.abc import Iterator
from types import MappingProxyType
from typing import Any, Callable, Mapping

from gamestate.core.values import InMemoryValueStore, ValueStore
from gamestate.errors import NoTransitionFound, StateNotFound

Action = Callable[[], Any]


class GameState:
    """A single state a game can be in.

    Executing a state means calling its ``action``. The returned value picks
    the next state: a conditional transition registered for that exact value
    wins, otherwise the default transition is used.

    Instances are created through ``GameMap.new_state``.
    """

    __slots__ = ("_id", "_action", "_transitions", "_default_transition")

    def __init__(self, *, state_id: int, action: Action):
        self._id = state_id
        self._action = action
        self._transitions: dict[Any, GameState] = {}
        self._default_transition: GameState | None = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def action(self) -> Action:
        return self._action

    @property
    def transitions(self) -> Mapping[Any, GameState]:
        return MappingProxyType(self._transitions)

    @property
    def default_transition(self) -> GameState | None:
        return self._default_transition

    def transition(self, to_state: GameState) -> None:
        """Set the fallback transition, replacing any previous one."""
        self._default_transition = to_state

    def transition_on(self, to_state: GameState, on: Any) -> None:
        """Transition to ``to_state`` when the action returns a value equal to ``on``.

        Keys must be hashable. Registering the same key again replaces the
        previous destination. Keys that compare equal are the same key, so
        ``True``, ``1`` and ``1.0`` share one entry.
        """
        self._transitions[on] = to_state

    def next_state(self, on: Any) -> GameState:
        try:
            nxt = self._transitions.get(on)
        except TypeError:
            # Unhashable values can't have been registered as keys.
            nxt = None
        if nxt is not None:
            return nxt
        if self._default_transition is not None:
            return self._default_transition
        raise NoTransitionFound(state_id=self._id, value=on)

    def __repr__(self) -> str:
        return f"GameState(id={self._id})"


class GameMap:
    """Owns a graph of game states and the values their actions share.

    Independent maps never share ids, states or values.
    """

    def __init__(self, *, values: ValueStore | None = None):
        self._next_state_id = 0
        self._states: dict[int, GameState] = {}
        self._values: ValueStore = values if values is not None else InMemoryValueStore()

    @property
    def values(self) -> ValueStore:
        return self._values

    def new_state(self, action: Action) -> GameState:
        """Create and register a state. ``action`` runs whenever the state becomes active."""
        state = GameState(state_id=self._next_state_id, action=action)
        self._states[state.id] = state
        self._next_state_id += 1
        return state

    def get_state(self, state_id: int) -> GameState:
        state = self._states.get(state_id)
        if state is None:
            raise StateNotFound(state_id)
        return state

    def get_value(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, True)`` if ``key`` is set, else ``(None, False)``."""
        return self._values.get(key)

    def set_value(self, key: str, value: Any) -> None:
        self._values.set(key, value)

    def delete_value(self, key: str) -> None:
        """Remove ``key``. No-op if it is not set."""
        self._values.delete(key)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[GameState]:
        # Insertion order == id order.
        return iter(self._states.values())

    def __contains__(self, state: object) -> bool:
        return isinstance(state, GameState) and self._states.get(state.id) is state
