# Execution module exports
from .errors import (
    NakeError,
    BusinessError,
    TaskValidationError,
    TaskSignatureViolation,
    TaskPlacementViolation,
    InvalidDocumentationViolation,
    DuplicateTaskError,
    DependencyError,
    RecursiveDependency,
    CyclicDependency,
    ConfigurationError,
    SystemError,
    TaskBindingError,
    TaskNotBoundError,
)
from .invocation import (
    TaskArgument,
    TaskInvocation,
    split_arguments,
)

__all__ = [
    # Errors
    "NakeError",
    "BusinessError",
    "TaskValidationError",
    "TaskSignatureViolation",
    "TaskPlacementViolation",
    "InvalidDocumentationViolation",
    "DuplicateTaskError",
    "DependencyError",
    "RecursiveDependency",
    "CyclicDependency",
    "ConfigurationError",
    "SystemError",
    "TaskBindingError",
    "TaskNotBoundError",
    # Invocation
    "TaskArgument",
    "TaskInvocation",
    "split_arguments",
]
