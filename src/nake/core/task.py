"""
Task entity

A Task is a validated, nameable unit of buildable work. It is built once from
a candidate unit, wired to its dependencies by the orchestrator, bound to the
compiled script once, and then invoked with at-most-once semantics per
distinct argument list.

Lifecycle:
    task = Task(unit)                 # validation errors abort construction
    task.add_dependency(other)        # repeated while wiring the graph
    task.reflect(compiled_namespace)  # once, before the first invoke
    task.invoke(arguments)            # repeated calls with equal args are skipped
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, FrozenSet, Optional, Sequence, Tuple

from nake.core import documentation, naming
from nake.core.config import NakeConfig, get_config
from nake.core.dependency.graph import find_cycle_path
from nake.core.descriptor import CandidateUnit, ParameterDescriptor
from nake.core.execution.errors import (
    CyclicDependency,
    RecursiveDependency,
    TaskBindingError,
    TaskNotBoundError,
)
from nake.core.execution.invocation import TaskArgument, TaskInvocation
from nake.core.validator import validate_candidate
from nake.logger import get_logger

logger = get_logger(__name__)

_MISSING = object()


class Task:
    """
    Validated unit of work discovered in a build script.

    Identity is the qualified name derived from the display signature. Tasks
    compare by object identity; the graph may hold several references to the
    same Task but never two Tasks for one method.
    """

    def __init__(self, unit: CandidateUnit, config: Optional[NakeConfig] = None):
        """
        Args:
            unit: Candidate unit produced by source analysis
            config: Naming conventions; defaults to the process-wide config

        Raises:
            TaskSignatureViolation: Unit does not have the shape of a task
            TaskPlacementViolation: Unit is nested in a non namespace-like container
            InvalidDocumentationViolation: Documentation comment is malformed
        """
        self._unit = validate_candidate(unit)
        self._config = config or get_config()
        self._dependencies: list[Task] = []
        self._invocations: set[TaskInvocation] = set()
        self._target: Optional[Callable[..., Any]] = None

    @property
    def display_name(self) -> str:
        return self._unit.display_signature

    @property
    def full_name(self) -> str:
        return naming.full_name(self.display_name)

    @property
    def name(self) -> str:
        return naming.short_name(self.display_name)

    @property
    def declaring_type(self) -> str:
        return naming.declaring_type(
            self.display_name,
            self._config.root_container,
            self._config.nested_type_joiner,
        )

    @property
    def summary(self) -> str:
        """Text of the ``<summary>`` documentation element, or "" when absent."""
        return documentation.parse(self._unit.documentation).summary or ""

    @property
    def parameters(self) -> Tuple[ParameterDescriptor, ...]:
        return tuple(self._unit.parameters)

    @property
    def dependencies(self) -> Tuple[Task, ...]:
        """Direct dependencies in the order they were added."""
        return tuple(self._dependencies)

    @property
    def invocations(self) -> FrozenSet[TaskInvocation]:
        return frozenset(self._invocations)

    @property
    def is_bound(self) -> bool:
        return self._target is not None

    def is_global(self) -> bool:
        return naming.is_global(self.display_name)

    def has_required_parameters(self) -> bool:
        return any(not p.has_default for p in self._unit.parameters)

    def add_dependency(self, dependency: Task) -> None:
        """
        Make ``dependency`` a prerequisite of this task.

        The graph is left unchanged when the edge is rejected.

        Raises:
            RecursiveDependency: ``dependency`` is this task
            CyclicDependency: ``dependency`` already depends on this task
        """
        if dependency is self:
            raise RecursiveDependency(self.full_name)

        cycle = find_cycle_path(self, dependency)
        if cycle is not None:
            raise CyclicDependency(self.full_name, dependency.full_name, cycle)

        self._dependencies.append(dependency)
        logger.debug(f"Task '{self.full_name}' now depends on '{dependency.full_name}'")

    def reflect(self, namespace: Any) -> None:
        """
        Bind this task to its entry point in the compiled script.

        ``declaring_type`` is resolved as a chain of attribute lookups starting
        at ``namespace`` (``Script+Group`` -> ``namespace.Script.Group``), then
        ``name`` is looked up on the final container.

        Args:
            namespace: Compiled script module or object exposing the root container

        Raises:
            TaskBindingError: No public static callable matches, or the task is
                already bound
        """
        declaring_type = self.declaring_type
        if self._target is not None:
            raise TaskBindingError(self.full_name, declaring_type, "task is already bound")

        container = namespace
        for segment in declaring_type.split(self._config.nested_type_joiner):
            if segment.startswith("_"):
                raise TaskBindingError(
                    self.full_name,
                    declaring_type,
                    f"container '{segment}' is not public",
                )
            container = getattr(container, segment, _MISSING)
            if container is _MISSING:
                raise TaskBindingError(
                    self.full_name,
                    declaring_type,
                    f"container '{segment}' not found",
                )

        if self.name.startswith("_"):
            raise TaskBindingError(self.full_name, declaring_type, f"'{self.name}' is not public")

        raw = inspect.getattr_static(container, self.name, _MISSING)
        if raw is _MISSING:
            raise TaskBindingError(self.full_name, declaring_type, f"method '{self.name}' not found")
        if inspect.isclass(container) and inspect.isfunction(raw):
            raise TaskBindingError(self.full_name, declaring_type, f"method '{self.name}' is not static")

        target = getattr(container, self.name)
        if not callable(target):
            raise TaskBindingError(self.full_name, declaring_type, f"'{self.name}' is not callable")

        self._target = target
        logger.debug(f"Task '{self.full_name}' bound to {declaring_type}.{self.name}")

    def invoke(self, arguments: Sequence[TaskArgument] = ()) -> None:
        """
        Run the task once per distinct argument list.

        A repeated call with arguments equal to an earlier call is a silent
        no-op. Exceptions raised by the task body propagate unchanged, and the
        failed invocation still counts as executed.

        Raises:
            TaskNotBoundError: ``reflect`` has not been called
        """
        if self._target is None:
            raise TaskNotBoundError(self.full_name)

        invocation = TaskInvocation(self, self._target, tuple(arguments))
        if invocation in self._invocations:
            logger.debug(f"Task '{self.full_name}' already invoked with {list(invocation.arguments)}, skipping")
            return

        self._invocations.add(invocation)
        invocation.invoke()

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"Task({self.display_name!r})"
