"""Run loops.

Both loops apply the same step: run the current state's action, then resolve
the next state from the returned value. Neither loop caps the number of
steps; a cyclic graph that always resolves runs forever.
"""
from __future__ import annotations

import logging
from typing import Any

from gamestate.core.events import EventType, RunEvent, RunListener
from gamestate.core.graph import GameState
from gamestate.errors import NoTransitionFound
from gamestate.fsm import RunFSM

logger = logging.getLogger(__name__)


def _emit(listener: RunListener | None, *, type: EventType, step: int, payload: dict[str, Any]) -> None:
    if listener is not None:
        listener(RunEvent.now(type=type, step=step, payload=payload))


def _run_action(fsm: RunFSM, listener: RunListener | None) -> Any:
    state = fsm.position
    _emit(listener, type="STATE_ENTERED", step=fsm.steps, payload={"state_id": state.id})
    value = state.action()
    logger.debug("State %d returned %r", state.id, value)
    _emit(listener, type="ACTION_RETURNED", step=fsm.steps, payload={"state_id": state.id, "value": value})
    return value


def _advance(fsm: RunFSM, to_state: GameState, listener: RunListener | None) -> None:
    from_id = fsm.position.id
    fsm.advance(to_state=to_state)
    _emit(listener, type="TRANSITIONED", step=fsm.steps, payload={"from_id": from_id, "to_id": to_state.id})


def _complete(fsm: RunFSM, result: Any, listener: RunListener | None) -> Any:
    fsm.complete(value=result)
    _emit(
        listener,
        type="RUN_COMPLETED",
        step=fsm.steps,
        payload={"state_id": fsm.position.id, "result": result},
    )
    return result


def run_game(start: GameState, end: GameState, *, listener: RunListener | None = None) -> Any:
    """Run from ``start`` until ``end`` is reached and return ``end``'s action result.

    The end state's action runs exactly once; transitions configured on it
    are never consulted. Raises ``NoTransitionFound`` if a state on the way
    has no transition for the value its action returned.
    """

    fsm = RunFSM(start=start)

    while fsm.position is not end:
        value = _run_action(fsm, listener)
        try:
            to_state = fsm.position.next_state(value)
        except NoTransitionFound as e:
            logger.warning("No transition from state %d for value %r", e.state_id, value)
            fsm.fail(exc=e)
            _emit(listener, type="RUN_FAILED", step=fsm.steps, payload={"state_id": e.state_id, "value": value})
            raise
        _advance(fsm, to_state, listener)

    return _complete(fsm, _run_action(fsm, listener), listener)


def run_game_to_end(start: GameState, *, listener: RunListener | None = None) -> Any:
    """Run from ``start`` until no transition is possible and return the last action result.

    A state without a matching transition ends the run, so a graph can have
    several end states. It also means a misconfigured transition ends the
    run early instead of raising.
    """

    fsm = RunFSM(start=start)

    while True:
        value = _run_action(fsm, listener)
        try:
            to_state = fsm.position.next_state(value)
        except NoTransitionFound:
            return _complete(fsm, value, listener)
        _advance(fsm, to_state, listener)
