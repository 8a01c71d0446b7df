"""
Dependency graph utilities for tasks

Edges live on the tasks themselves (``Task.dependencies``), so the graph is
acyclic by construction: every new edge is checked with a reachability
search before it is appended. Since the graph was acyclic before the edge,
only the new edge can close a cycle and no whole-graph check is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set

if TYPE_CHECKING:
    from nake.core.task import Task


def is_dependant_upon(task: Task, other: Task, chain: List[str]) -> bool:
    """
    Depth-first search for ``other`` among the transitive dependencies of ``task``.

    Args:
        task: Task to start the search from
        other: Task being looked for (compared by identity)
        chain: Accumulates the full names along the current search path; on
            success it holds the path from ``task`` to the task that depends
            directly on ``other``

    Returns:
        True if ``task`` depends on ``other`` directly or transitively
    """
    chain.append(task.full_name)
    if _requires(task, other):
        return True

    # One pending-dependency iterator per name in the chain
    stack = [iter(task.dependencies)]
    explored: Set[int] = {id(task)}
    while stack:
        dependency = next(stack[-1], None)
        if dependency is None:
            stack.pop()
            chain.pop()
            continue
        if id(dependency) in explored:
            continue
        explored.add(id(dependency))

        chain.append(dependency.full_name)
        if _requires(dependency, other):
            return True
        stack.append(iter(dependency.dependencies))

    return False


def _requires(task: Task, other: Task) -> bool:
    return any(dependency is other for dependency in task.dependencies)


def find_cycle_path(dependent: Task, dependency: Task) -> Optional[List[str]]:
    """
    Check whether the edge ``dependent -> dependency`` would close a cycle.

    Returns:
        None when the edge is safe; otherwise the cycle as full names, starting
        at ``dependent`` and walking back through the existing chain, e.g.
        ``["C", "B", "A"]`` for existing edges A -> B -> C and new edge C -> A
    """
    chain: List[str] = []
    if not is_dependant_upon(dependency, dependent, chain):
        return None
    return [dependent.full_name] + list(reversed(chain))


def execution_plan(task: Task) -> List[Task]:
    """
    Order in which a task and its prerequisites run.

    Dependencies come first, depth-first in insertion order, each task once;
    the task itself is last.
    """
    plan: List[Task] = []
    seen: Set[int] = {id(task)}
    stack = [(task, iter(task.dependencies))]
    while stack:
        node, pending = stack[-1]
        dependency = next(pending, None)
        if dependency is None:
            stack.pop()
            plan.append(node)
        elif id(dependency) not in seen:
            seen.add(id(dependency))
            stack.append((dependency, iter(dependency.dependencies)))
    return plan
