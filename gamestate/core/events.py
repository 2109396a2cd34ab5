from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Literal

EventType = Literal[
    "STATE_ENTERED",
    "ACTION_RETURNED",
    "TRANSITIONED",
    "RUN_COMPLETED",
    "RUN_FAILED",
]

TERMINAL_EVENTS: frozenset[str] = frozenset({"RUN_COMPLETED", "RUN_FAILED"})


@dataclass(frozen=True, slots=True)
class RunEvent:
    type: EventType
    step: int
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, step: int, payload: dict[str, Any]) -> "RunEvent":
        return RunEvent(type=type, step=step, payload=payload, ts=datetime.now(timezone.utc))

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_EVENTS


RunListener = Callable[[RunEvent], None]


@dataclass(slots=True)
class RunTrace:
    """Listener that records every event of a run.

    Pass an instance as ``listener=`` to ``run_game``/``run_game_to_end``.
    """

    events: list[RunEvent] = field(default_factory=list)

    def __call__(self, event: RunEvent) -> None:
        self.events.append(event)

    @property
    def path(self) -> list[int]:
        """State ids in the order their actions ran."""
        return [e.payload["state_id"] for e in self.events if e.type == "STATE_ENTERED"]

    @property
    def returned(self) -> list[Any]:
        return [e.payload["value"] for e in self.events if e.type == "ACTION_RETURNED"]

    @property
    def terminal(self) -> RunEvent | None:
        if self.events and self.events[-1].is_terminal:
            return self.events[-1]
        return None
