"""Ordered, append-only warning collection."""

from __future__ import annotations

from collections.abc import Iterable


class WarningCollector:
    """Accumulates advisory messages and hands them out as an immutable tuple.

    The dispatcher relies on insertion order: mode warnings, then concurrency
    warnings, then HITL warnings.
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def add(self, message: str) -> None:
        self._messages.append(message)

    def extend(self, messages: Iterable[str]) -> None:
        self._messages.extend(messages)

    def freeze(self) -> tuple[str, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


def check_concurrency(max_concurrent: int, agent_count: int) -> tuple[str, ...]:
    """Warn when the concurrency cap is larger than the number of agents."""
    if max_concurrent > agent_count:
        return (
            f"Max concurrent agents ({max_concurrent}) exceeds total agents ({agent_count})",
        )
    return ()
