"""
nake - Task model and dependency core for build scripts

Turns candidate methods discovered in a build script into validated tasks,
wires the dependencies between them while rejecting cycles, and invokes each
task at most once per distinct argument list.

Modules:
- core.task: Task entity
- core.descriptor: Candidate unit descriptors (pydantic models)
- core.dependency: Dependency graph utilities and TaskRegistry
- core.execution: Errors and invocation identity
- core.config: NakeConfig and environment loading
"""

__version__ = "0.1.0"

# Lazy imports to keep package import fast and avoid circular dependencies
__all__ = [
    # Task model
    "Task",
    "TaskArgument",
    "TaskInvocation",
    "TaskRegistry",
    "execution_plan",
    # Descriptors
    "CandidateUnit",
    "ParameterDescriptor",
    "ScopeDescriptor",
    "Accessibility",
    "is_annotated",
    # Configuration
    "NakeConfig",
    "get_config",
    "set_config",
    # Version
    "__version__",
]


def __getattr__(name):
    """Lazy import to avoid loading nake.core at package import time"""

    if name == "Task":
        from nake.core.task import Task

        return Task

    if name in ("TaskArgument", "TaskInvocation"):
        from nake.core.execution.invocation import (
            TaskArgument,  # noqa: F401
            TaskInvocation,  # noqa: F401
        )

        return locals()[name]

    if name in ("TaskRegistry", "execution_plan"):
        from nake.core.dependency import (
            TaskRegistry,  # noqa: F401
            execution_plan,  # noqa: F401
        )

        return locals()[name]

    if name in (
        "CandidateUnit",
        "ParameterDescriptor",
        "ScopeDescriptor",
        "Accessibility",
        "is_annotated",
    ):
        from nake.core.descriptor import (
            CandidateUnit,  # noqa: F401
            ParameterDescriptor,  # noqa: F401
            ScopeDescriptor,  # noqa: F401
            Accessibility,  # noqa: F401
            is_annotated,  # noqa: F401
        )

        return locals()[name]

    if name in ("NakeConfig", "get_config", "set_config"):
        from nake.core.config import (
            NakeConfig,  # noqa: F401
            get_config,  # noqa: F401
            set_config,  # noqa: F401
        )

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
