"""
Unit tests for nake.core.dependency.graph
"""
import pytest

from nake.core.dependency import graph
from nake.core.task import Task


@pytest.fixture
def tasks(unit_factory):
    """Tasks keyed by name; wire edges per test."""
    return {name: Task(unit_factory(f"{name}()")) for name in ("A", "B", "C", "D", "E")}


def test_is_dependant_upon_direct(tasks):
    tasks["A"].add_dependency(tasks["B"])
    chain = []
    assert graph.is_dependant_upon(tasks["A"], tasks["B"], chain) is True
    assert chain == ["A"]


def test_is_dependant_upon_transitive(tasks):
    tasks["A"].add_dependency(tasks["B"])
    tasks["B"].add_dependency(tasks["C"])
    tasks["C"].add_dependency(tasks["D"])
    chain = []
    assert graph.is_dependant_upon(tasks["A"], tasks["D"], chain) is True
    assert chain == ["A", "B", "C"]


def test_is_dependant_upon_backtracks_dead_ends(tasks):
    """Branches that don't reach the target are dropped from the chain"""
    tasks["A"].add_dependency(tasks["E"])
    tasks["A"].add_dependency(tasks["B"])
    tasks["B"].add_dependency(tasks["C"])
    chain = []
    assert graph.is_dependant_upon(tasks["A"], tasks["C"], chain) is True
    assert chain == ["A", "B"]


def test_is_dependant_upon_unrelated(tasks):
    tasks["A"].add_dependency(tasks["B"])
    chain = []
    assert graph.is_dependant_upon(tasks["A"], tasks["C"], chain) is False
    assert chain == []


def test_find_cycle_path(tasks):
    tasks["A"].add_dependency(tasks["B"])
    tasks["B"].add_dependency(tasks["C"])
    assert graph.find_cycle_path(tasks["C"], tasks["A"]) == ["C", "B", "A"]
    assert graph.find_cycle_path(tasks["A"], tasks["C"]) is None
    assert graph.find_cycle_path(tasks["D"], tasks["A"]) is None


@pytest.mark.parametrize("edges,root,expected", [
    ([], "A", ["A"]),
    ([("A", "B"), ("A", "C")], "A", ["B", "C", "A"]),
    ([("A", "C"), ("A", "B")], "A", ["C", "B", "A"]),
    ([("A", "B"), ("B", "C"), ("A", "C")], "A", ["C", "B", "A"]),
    # Diamond: shared prerequisite appears once
    ([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], "A", ["D", "B", "C", "A"]),
    ([("A", "B"), ("B", "C")], "B", ["C", "B"]),
])
def test_execution_plan(tasks, edges, root, expected):
    for dependent, dependency in edges:
        tasks[dependent].add_dependency(tasks[dependency])
    plan = graph.execution_plan(tasks[root])
    assert [t.full_name for t in plan] == expected


@pytest.fixture
def long_chain(unit_factory):
    """Step0 -> Step1 -> ... -> Step1499, deeper than the interpreter recursion limit"""
    steps = [Task(unit_factory(f"Step{i}()")) for i in range(1500)]
    for dependent, dependency in zip(steps, steps[1:]):
        dependent.add_dependency(dependency)
    return steps


def test_is_dependant_upon_deep_chain(long_chain):
    chain = []
    assert graph.is_dependant_upon(long_chain[0], long_chain[-1], chain) is True
    assert chain == [f"Step{i}" for i in range(1499)]


def test_find_cycle_path_deep_chain(long_chain):
    path = graph.find_cycle_path(long_chain[-1], long_chain[0])
    assert len(path) == 1500
    assert path[:2] == ["Step1499", "Step1498"]
    assert path[-1] == "Step0"


def test_execution_plan_deep_chain(long_chain):
    plan = graph.execution_plan(long_chain[0])
    assert plan == list(reversed(long_chain))
