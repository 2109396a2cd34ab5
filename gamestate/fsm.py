from __future__ import annotations

import logging
from typing import Any

from statemachine import State, StateMachine

from gamestate.core.graph import GameState
from gamestate.errors import NoTransitionFound

logger = logging.getLogger(__name__)


class RunFSM(StateMachine):
    """Lifecycle of a single run.

    running --advance--> running (one step per resolved transition)
    running --complete--> completed (end reached, or no transition in an open-ended run)
    running --fail--> failed (no transition in a targeted run)

    The FSM only tracks where the run is; the engine does the stepping.
    """

    running = State("Running", initial=True)
    completed = State("Completed", final=True)
    failed = State("Failed", final=True)

    advance = running.to.itself()
    complete = running.to(completed)
    fail = running.to(failed)

    def __init__(self, *, start: GameState):
        self.position: GameState = start
        self.steps = 0
        self.result: Any = None
        self.error: NoTransitionFound | None = None
        super().__init__()

    @property
    def finished(self) -> bool:
        return self.current_state.final

    def on_advance(self, to_state: GameState) -> None:
        self.position = to_state
        self.steps += 1

    def on_complete(self, value: Any) -> None:
        self.result = value

    def on_fail(self, exc: NoTransitionFound) -> None:
        self.error = exc

    def on_enter_completed(self) -> None:
        logger.debug("Run completed at state %d after %d steps", self.position.id, self.steps)

    def on_enter_failed(self) -> None:
        logger.debug("Run failed at state %d after %d steps", self.position.id, self.steps)
