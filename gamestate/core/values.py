from __future__ import annotations

from typing import Any, Protocol


class ValueStore(Protocol):
    """Key/value bag shared by every action of a game map."""

    def get(self, key: str) -> tuple[Any, bool]: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self) -> None: ...


class InMemoryValueStore:
    """Plain dict-backed store. Values are kept as-is, never copied."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def get(self, key: str) -> tuple[Any, bool]:
        if key in self._values:
            return self._values[key], True
        return None, False

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
