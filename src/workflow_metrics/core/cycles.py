"""Dependency cycle detection over name-based ``depends_on`` edges."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from workflow_metrics.core.models import Agent

logger = logging.getLogger("workflow_metrics")


def find_cycle(agents: Sequence[Agent]) -> tuple[str, ...] | None:
    """Return the first dependency cycle found, closed on its start node.

    Edges run ``dependent -> dependency``. Uses an explicit stack with
    ``visited`` / ``in_progress`` marking instead of call-stack recursion.
    Names without a matching agent are dead ends, and duplicate names
    collapse to the last agent, the same as ``build_dependency_graph``.

    Returns:
        A tuple such as ``("A", "B", "A")``, or ``None`` for an acyclic set.
    """
    by_name = {agent.name: agent for agent in agents}
    visited: set[str] = set()
    in_progress: set[str] = set()

    for root in by_name:
        if root in visited:
            continue

        visited.add(root)
        in_progress.add(root)
        path: list[str] = [root]
        stack: list[Iterator[str]] = [iter(by_name[root].depends_on)]

        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                stack.pop()
                in_progress.discard(path.pop())
                continue
            if dep in in_progress:
                cycle = tuple(path[path.index(dep):]) + (dep,)
                logger.debug("Dependency cycle found: %s", " -> ".join(cycle))
                return cycle
            if dep in visited or dep not in by_name:
                continue
            visited.add(dep)
            in_progress.add(dep)
            path.append(dep)
            stack.append(iter(by_name[dep].depends_on))

    return None


def has_cycle(agents: Sequence[Agent]) -> bool:
    """True when the ``depends_on`` relation contains a cycle."""
    return find_cycle(agents) is not None


def format_cycle(cycle: Sequence[str]) -> str:
    return " -> ".join(cycle)
