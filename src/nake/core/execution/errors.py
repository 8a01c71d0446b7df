"""
Custom exceptions for task construction, wiring and binding.

This module defines exceptions that represent the failure modes of the task
core: a candidate that cannot become a task, a dependency edge that would
break the graph, or a task that cannot be bound to executable code.

Exception Hierarchy:
    NakeError (base)
        ├── BusinessError (script author errors, no stack trace)
        │   ├── TaskValidationError (candidate rejected at construction)
        │   │   ├── TaskSignatureViolation
        │   │   ├── TaskPlacementViolation
        │   │   ├── InvalidDocumentationViolation
        │   │   └── DuplicateTaskError
        │   ├── DependencyError (dependency edge rejected)
        │   │   ├── RecursiveDependency
        │   │   └── CyclicDependency
        │   └── ConfigurationError (invalid core settings)
        └── SystemError (unexpected errors, with stack trace)
            ├── TaskBindingError (no entry point in compiled output)
            └── TaskNotBoundError (invoke before reflect)

Usage Guidelines:
    - Raise BusinessError subclasses for problems in the build script itself
    - Use structured error format: what/why/how_to_fix/context
    - Never wrap exceptions raised by a task body; they propagate unchanged
    - Orchestrators log BusinessError without exc_info, others with exc_info

Structured Error Format:
    All error classes support optional structured information:
    - what: What went wrong (brief description)
    - why: Why it happened (root cause)
    - how_to_fix: How to resolve it (actionable steps)
    - context: Additional context (dict with relevant details)
"""

from typing import List, Optional


class NakeError(RuntimeError):
    """
    Base exception for all nake-specific errors.

    Supports structured error information:
    - what: What went wrong
    - why: Why it happened
    - how_to_fix: How to resolve it
    - context: Additional context dict
    """

    def __init__(
        self,
        message: str,
        *,
        what: str | None = None,
        why: str | None = None,
        how_to_fix: str | None = None,
        context: dict | None = None,
    ):
        """
        Initialize error with optional structured information.

        Args:
            message: Error message (used if structured info not provided)
            what: Brief description of what went wrong
            why: Root cause explanation
            how_to_fix: Actionable resolution steps
            context: Additional context dictionary
        """
        self.message = message
        self.what = what
        self.why = why
        self.how_to_fix = how_to_fix
        self.context = context or {}

        if what:
            formatted_msg = f"❌ {what}"
            if why:
                formatted_msg += f"\n\n💡 Reason: {why}"
            if how_to_fix:
                formatted_msg += f"\n\n✅ Solution: {how_to_fix}"
            if context:
                context_str = "\n".join(f"  - {k}: {v}" for k, v in context.items())
                formatted_msg += f"\n\n📝 Context:\n{context_str}"
            super().__init__(formatted_msg)
        else:
            super().__init__(message)


class BusinessError(NakeError):
    """
    Base exception for failures caused by the build script.

    These errors represent expected failure modes (a badly declared task,
    a dependency cycle) that don't require stack traces for debugging.
    """

    pass


class TaskValidationError(BusinessError):
    """
    A candidate unit was rejected while constructing a Task.

    Carries the display signature of the offending unit as ``signature``.
    """

    def __init__(self, signature: str, **kwargs):
        self.signature = signature
        super().__init__(f"{self._reason}: {signature}", **kwargs)

    _reason = "Invalid task"


class TaskSignatureViolation(TaskValidationError):
    """
    Task method must be public static void, non-generic, and take only
    pass-by-value parameters of supported types.
    """

    _reason = (
        "Task method should be public static void non-generic "
        "and take only by-value parameters of supported types"
    )


class TaskPlacementViolation(TaskValidationError):
    """
    Task method is declared inside a container that is not a public static
    (namespace-like) container.
    """

    _reason = "Task method can only be declared in the script root or nested public static containers"


class InvalidDocumentationViolation(TaskValidationError):
    """Documentation comment attached to the task is not well-formed markup."""

    _reason = "Task has badly formed documentation comment"


class DuplicateTaskError(TaskValidationError):
    """Two tasks resolve to the same qualified name."""

    _reason = "Task with the same name is already defined"


class DependencyError(BusinessError):
    """A dependency edge could not be added to the task graph."""

    pass


class RecursiveDependency(DependencyError):
    """A task was declared to depend on itself."""

    def __init__(self, task_name: str):
        self.task_name = task_name
        super().__init__(
            f"Task '{task_name}' cannot depend on itself",
            what=f"Recursive dependency on task '{task_name}'",
            why="A task cannot list itself as its own prerequisite",
            how_to_fix=f"Remove the call to '{task_name}' from its own body",
            context={"task": task_name},
        )


class CyclicDependency(DependencyError):
    """
    Adding a dependency edge would close a cycle.

    Attributes:
        dependent: Full name of the task the edge was being added to
        dependency: Full name of the task it was going to depend on
        path: Full names around the cycle, starting at ``dependent`` and walking
            back through the tasks that require it, ending at ``dependency``
    """

    def __init__(self, dependent: str, dependency: str, path: List[str]):
        self.dependent = dependent
        self.dependency = dependency
        self.path = list(path)
        # Render in "depends on" direction, closing the loop at the dependent
        chain = " -> ".join(self.path[:1] + self.path[:0:-1] + self.path[:1])
        super().__init__(
            f"Cyclic dependency between '{dependent}' and '{dependency}': {chain}",
            what=f"Cyclic dependency between '{dependent}' and '{dependency}'",
            why=f"'{dependency}' already depends on '{dependent}' via {chain}",
            how_to_fix="Break the cycle by removing one of the task calls along the chain",
            context={"dependent": dependent, "dependency": dependency, "chain": chain},
        )


class ConfigurationError(BusinessError):
    """
    Configuration-specific business error.

    Raised for invalid core settings such as an empty root container name.
    """

    pass


class SystemError(NakeError):
    """
    Base exception for unexpected system-level errors.

    These are logged with full stack traces since they point at a mismatch
    between the analysed script and its compiled output.
    """

    pass


class TaskBindingError(SystemError):
    """No public entry point matching the task was found in the compiled output."""

    def __init__(self, task_name: str, declaring_type: str, reason: str, context: Optional[dict] = None):
        self.task_name = task_name
        self.declaring_type = declaring_type
        super().__init__(
            f"Cannot bind task '{task_name}' in '{declaring_type}': {reason}",
            what=f"Cannot bind task '{task_name}'",
            why=reason,
            how_to_fix="Make sure the script was compiled from the same source the tasks were discovered in",
            context={"task": task_name, "declaring_type": declaring_type, **(context or {})},
        )


class TaskNotBoundError(SystemError):
    """Task was invoked before being bound to executable code."""

    def __init__(self, task_name: str):
        self.task_name = task_name
        super().__init__(f"Task '{task_name}' must be reflected before it can be invoked")
