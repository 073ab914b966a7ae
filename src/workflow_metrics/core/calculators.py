"""Per-mode duration and critical-path calculators.

Every calculator shares the signature ``(agents, workflow, pricing)`` and
returns a ``ModeEstimate`` in unrounded minutes, so the dispatcher can pick
one from a lookup table.
"""

from __future__ import annotations

from collections.abc import Sequence

import networkx as nx  # type: ignore[import-untyped]

from workflow_metrics.core.cost import DEFAULT_PRICING, round_half_up
from workflow_metrics.core.cycles import find_cycle, format_cycle
from workflow_metrics.core.models import Agent, ModeEstimate, Pricing, WorkflowConfig

GRAPH_PATH_LABEL = "Graph execution path"


# ---------------------------------------------------------------------------
# Sequential
# ---------------------------------------------------------------------------


def calculate_sequential(
    agents: Sequence[Agent],
    workflow: WorkflowConfig,
    pricing: Pricing = DEFAULT_PRICING,
) -> ModeEstimate:
    """Agents run back to back; every agent is on the critical path."""
    total_seconds = sum(agent.timeout_seconds for agent in agents)
    total_minutes = total_seconds / 60

    warnings: tuple[str, ...] = ()
    if total_seconds > workflow.timeout_seconds:
        warnings = (
            f"Sequential execution time ({round_half_up(total_minutes):.0f}min) "
            f"may exceed workflow timeout "
            f"({round_half_up(workflow.timeout_seconds / 60):.0f}min)",
        )

    return ModeEstimate(
        total_minutes=total_minutes,
        critical_path=tuple(agent.name for agent in agents),
        warnings=warnings,
    )


# ---------------------------------------------------------------------------
# Parallel
# ---------------------------------------------------------------------------


def resolve_group(agents: Sequence[Agent], group: Sequence[str]) -> list[Agent]:
    """Agents whose positional index (as a string) is listed in ``group``."""
    members = set(group)
    return [agent for index, agent in enumerate(agents) if str(index) in members]


def calculate_parallel(
    agents: Sequence[Agent],
    workflow: WorkflowConfig,
    pricing: Pricing = DEFAULT_PRICING,
) -> ModeEstimate:
    """Groups run one after another; agents inside a group run concurrently.

    Without ``parallel_groups`` the whole agent set is one implicit group.
    Groups that resolve to no agents contribute nothing.
    """
    groups = workflow.parallel_groups or (tuple(str(i) for i in range(len(agents))),)

    total_seconds = 0
    critical_path: list[str] = []
    for group in groups:
        members = resolve_group(agents, group)
        if not members:
            continue
        # max() keeps the first agent on ties
        longest = max(members, key=lambda agent: agent.timeout_seconds)
        total_seconds += longest.timeout_seconds
        critical_path.append(longest.name)

    return ModeEstimate(
        total_minutes=total_seconds / 60,
        critical_path=tuple(critical_path),
    )


# ---------------------------------------------------------------------------
# Conditional
# ---------------------------------------------------------------------------


def build_dependency_graph(agents: Sequence[Agent]) -> nx.DiGraph:
    """Name-indexed graph with ``dependency -> dependent`` edges.

    Duplicate names collapse onto the last agent with that name; dangling
    ``depends_on`` names are dropped.
    """
    by_name = {agent.name: agent for agent in agents}
    G = nx.DiGraph()
    for name, agent in by_name.items():
        G.add_node(name, minutes=agent.timeout_minutes)
    for name, agent in by_name.items():
        for dep in agent.depends_on:
            if dep in by_name:
                G.add_edge(dep, name)
    return G


def _longest_forward_paths(
    G: nx.DiGraph, starts: Sequence[str]
) -> tuple[dict[str, float], dict[str, str | None]]:
    """Memoized longest node-weighted path from each node to any sink.

    Iterative DFS with in-progress marking. An edge back into a node that is
    still in progress (a cycle) contributes zero, so results on cyclic graphs
    are lower bounds.
    """
    best: dict[str, float] = {}
    follow: dict[str, str | None] = {}
    in_progress: set[str] = set()

    for start in starts:
        if start in best:
            continue
        in_progress.add(start)
        stack = [(start, iter(G.successors(start)))]
        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is not None:
                if child not in best and child not in in_progress:
                    in_progress.add(child)
                    stack.append((child, iter(G.successors(child))))
                continue

            stack.pop()
            in_progress.discard(node)
            tail = 0.0
            nxt: str | None = None
            for succ in G.successors(node):
                if succ in best and (nxt is None or best[succ] > tail):
                    tail, nxt = best[succ], succ
            best[node] = G.nodes[node]["minutes"] + tail
            follow[node] = nxt

    return best, follow


def calculate_conditional(
    agents: Sequence[Agent],
    workflow: WorkflowConfig,
    pricing: Pricing = DEFAULT_PRICING,
) -> ModeEstimate:
    """Longest cumulative-timeout chain through the dependency graph.

    Entry agents are those with no resolvable predecessor. When every agent
    sits on a cycle there is no entry agent, and the estimate is zero minutes
    with an empty path.
    """
    G = build_dependency_graph(agents)
    entries = [name for name in G.nodes if G.in_degree(name) == 0]

    best, follow = _longest_forward_paths(G, entries)

    critical_path: list[str] = []
    total_minutes = 0.0
    if entries:
        head = max(entries, key=lambda name: best[name])
        total_minutes = best[head]
        node: str | None = head
        while node is not None:
            critical_path.append(node)
            node = follow[node]

    warnings: tuple[str, ...] = ()
    cycle = find_cycle(agents)
    if cycle is not None:
        warnings = (
            f"Circular dependencies detected ({format_cycle(cycle)}) "
            "- may cause infinite loops",
        )

    return ModeEstimate(
        total_minutes=total_minutes,
        critical_path=tuple(critical_path),
        warnings=warnings,
    )


# ---------------------------------------------------------------------------
# Graph (custom / langgraph)
# ---------------------------------------------------------------------------


def calculate_graph(
    agents: Sequence[Agent],
    workflow: WorkflowConfig,
    pricing: Pricing = DEFAULT_PRICING,
) -> ModeEstimate:
    """Sequential time discounted by the graph efficiency factor.

    No path is traced through ``graph_structure``; the critical path is a
    fixed label. Without a graph structure this is the sequential estimate.
    """
    if workflow.graph_structure is None:
        return calculate_sequential(agents, workflow, pricing)

    sequential_minutes = sum(agent.timeout_minutes for agent in agents)
    return ModeEstimate(
        total_minutes=sequential_minutes * pricing.graph_efficiency,
        critical_path=(GRAPH_PATH_LABEL,),
    )
