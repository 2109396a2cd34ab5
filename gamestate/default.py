"""Process-wide default game map.

Code that doesn't want to pass a ``GameMap`` around can use these helpers;
they all act on one lazily created map.
"""
from __future__ import annotations

from typing import Any

from gamestate.core.graph import Action, GameMap, GameState

_GAME_MAP: GameMap | None = None


def get_game_map() -> GameMap:
    global _GAME_MAP
    if _GAME_MAP is None:
        _GAME_MAP = GameMap()
    return _GAME_MAP


def reset_game_map_for_tests() -> None:
    """Drop the default map so the next call starts with fresh ids and values."""

    global _GAME_MAP
    _GAME_MAP = None


def new_game_state(action: Action) -> GameState:
    return get_game_map().new_state(action)


def get_game_value(key: str) -> tuple[Any, bool]:
    return get_game_map().get_value(key)


def set_game_value(key: str, value: Any) -> None:
    get_game_map().set_value(key, value)


def delete_game_value(key: str) -> None:
    get_game_map().delete_value(key)
