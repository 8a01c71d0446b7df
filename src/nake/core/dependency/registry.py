"""
Task registry

Orchestrator-side collection of the tasks discovered in one script. Lookup
by name is case-insensitive, matching how tasks are addressed on the
command line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from nake.core.execution.errors import DuplicateTaskError
from nake.logger import get_logger

if TYPE_CHECKING:
    from nake.core.task import Task

logger = get_logger(__name__)


class TaskRegistry:
    """Tasks keyed by full name, kept in registration order."""

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.casefold()

    def register(self, task: Task) -> Task:
        """
        Add a task.

        Raises:
            DuplicateTaskError: A task with the same full name (ignoring case)
                is already registered
        """
        key = self._key(task.full_name)
        if key in self._tasks:
            raise DuplicateTaskError(
                task.display_name,
                context={"existing": self._tasks[key].display_name},
            )
        self._tasks[key] = task
        logger.debug(f"Registered task '{task.full_name}'")
        return task

    def find(self, name: str) -> Optional[Task]:
        return self._tasks.get(self._key(name))

    def reflect_all(self, namespace: Any) -> None:
        """Bind every registered task against the compiled script."""
        for task in self:
            task.reflect(namespace)

    def global_tasks(self) -> List[Task]:
        return [task for task in self if task.is_global()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __len__(self) -> int:
        return len(self._tasks)
