"""Minimal engine for scripted state machines.

Build a graph of ``GameState``s on a ``GameMap``, then drive it with
``run_game`` (to a known end state) or ``run_game_to_end`` (until no
transition applies).
"""
from __future__ import annotations

from gamestate.core.events import RunEvent, RunTrace
from gamestate.core.graph import GameMap, GameState
from gamestate.core.values import InMemoryValueStore, ValueStore
from gamestate.default import (
    delete_game_value,
    get_game_map,
    get_game_value,
    new_game_state,
    set_game_value,
)
from gamestate.engine import run_game, run_game_to_end
from gamestate.errors import GameStateError, NoTransitionFound, StateNotFound, ValueEncodingError
from gamestate.fsm import RunFSM

__all__ = [
    "GameMap",
    "GameState",
    "GameStateError",
    "InMemoryValueStore",
    "NoTransitionFound",
    "RunEvent",
    "RunFSM",
    "RunTrace",
    "StateNotFound",
    "ValueEncodingError",
    "ValueStore",
    "delete_game_value",
    "get_game_map",
    "get_game_value",
    "new_game_state",
    "run_game",
    "run_game_to_end",
    "set_game_value",
]
