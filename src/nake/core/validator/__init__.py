# Task validation exports
from .task_validator import (
    check_signature,
    check_placement,
    check_documentation,
    validate_candidate,
)

__all__ = [
    "check_signature",
    "check_placement",
    "check_documentation",
    "validate_candidate",
]
