# Dependency module exports
from .graph import (
    is_dependant_upon,
    find_cycle_path,
    execution_plan,
)
from .registry import TaskRegistry

__all__ = [
    # Graph
    "is_dependant_upon",
    "find_cycle_path",
    "execution_plan",
    # Registry
    "TaskRegistry",
]
