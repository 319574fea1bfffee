"""Evaluation trace - records which chain members ran and what they returned.

Trace is runtime infrastructure. It never takes part in a chain's result;
it only keeps evidence of how the result was reached. Tree relationships
are reconstructed on demand via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """One recorded evaluation event.

    Attributes:
        action: What happened (e.g. "chain_begin", "candidate")
        id: Sequential event id within its trace
        parent_id: Id of the enclosing event, if any
        timestamp: When the event was recorded
        info: Event details (index, function name, matched flag, ...)
        duration_ms: Wall time of the recorded invocation, if measured
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Collects Evidence while chains are evaluated.

    Nesting is stack based: the runner pushes the id of a chain_begin
    event so that candidate events recorded while it is on top become
    its children. Not thread-safe.

    A disabled trace records nothing and costs one flag check per event.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    def push(self, event_id: int) -> None:
        self._stack.append(event_id)

    def pop(self) -> int | None:
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened
            info: Additional context
            parent_id: Explicit parent id; defaults to the top of the stack
            duration_ms: Execution duration

        Returns:
            The new event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        if parent_id is not None:
            effective_parent = parent_id
        elif self._stack:
            effective_parent = self._stack[-1]
        else:
            effective_parent = None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=effective_parent,
                timestamp=datetime.now(UTC),
                info=info or {},
                duration_ms=duration_ms,
            )
        )

        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find(self, action: str) -> list[Evidence]:
        """All recorded events with the given action, in recording order."""
        return [ev for ev in self._events if ev.action == action]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._next_id = 0
        self._stack.clear()
