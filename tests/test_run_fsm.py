from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from gamestate.core.graph import GameMap
from gamestate.errors import NoTransitionFound
from gamestate.fsm import RunFSM


def test_starts_running_at_start_state() -> None:
    gm = GameMap()
    start = gm.new_state(lambda: None)

    fsm = RunFSM(start=start)

    assert fsm.current_state.id == "running"
    assert fsm.position is start
    assert fsm.steps == 0
    assert not fsm.finished


def test_advance_moves_position_and_counts_steps() -> None:
    gm = GameMap()
    a = gm.new_state(lambda: None)
    b = gm.new_state(lambda: None)

    fsm = RunFSM(start=a)
    fsm.advance(to_state=b)
    fsm.advance(to_state=a)

    assert fsm.current_state.id == "running"
    assert fsm.position is a
    assert fsm.steps == 2


def test_complete_is_final_and_keeps_result() -> None:
    gm = GameMap()
    fsm = RunFSM(start=gm.new_state(lambda: None))

    fsm.complete(value=42)

    assert fsm.current_state.id == "completed"
    assert fsm.finished
    assert fsm.result == 42

    with pytest.raises(TransitionNotAllowed):
        fsm.advance(to_state=fsm.position)


def test_fail_is_final_and_keeps_error() -> None:
    gm = GameMap()
    start = gm.new_state(lambda: None)
    fsm = RunFSM(start=start)
    err = NoTransitionFound(state_id=start.id, value="x")

    fsm.fail(exc=err)

    assert fsm.current_state.id == "failed"
    assert fsm.finished
    assert fsm.error is err

    with pytest.raises(TransitionNotAllowed):
        fsm.complete(value=None)
