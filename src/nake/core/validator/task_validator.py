"""
Semantic validation of candidate task units

This module checks that a candidate unit satisfies the structural rules of a
task before a Task is built from it. The checks run in a fixed order and the
first failure aborts construction:

1. Signature: public, static, void-returning, non-generic, and only
   by-value parameters of supported types
2. Placement: every container between the unit and the root script
   container is public and static (namespace-like)
3. Documentation: the attached comment is well-formed markup
"""

from nake.core import documentation
from nake.core.descriptor import Accessibility, CandidateUnit
from nake.core.execution.errors import (
    InvalidDocumentationViolation,
    TaskPlacementViolation,
    TaskSignatureViolation,
)
from nake.core.types import is_supported
from nake.logger import get_logger

logger = get_logger(__name__)


def check_signature(unit: CandidateUnit) -> None:
    """
    Raises:
        TaskSignatureViolation: If the unit does not have the shape of a task
    """
    if (
        not unit.is_static
        or not unit.returns_void
        or unit.accessibility != Accessibility.PUBLIC
        or unit.generic_arity > 0
        or any(p.by_reference or not is_supported(p.type) for p in unit.parameters)
    ):
        raise TaskSignatureViolation(unit.display_signature)


def check_placement(unit: CandidateUnit) -> None:
    """
    Walk the containing scopes outward until the root container.

    Raises:
        TaskPlacementViolation: If an intermediate container is not public static
    """
    for scope in unit.containing_scopes:
        if scope.is_root:
            return
        is_namespace = scope.is_static and scope.accessibility == Accessibility.PUBLIC
        if not is_namespace:
            raise TaskPlacementViolation(
                unit.display_signature,
                context={"container": scope.name},
            )


def check_documentation(unit: CandidateUnit) -> None:
    """
    Raises:
        InvalidDocumentationViolation: If the documentation comment is malformed
    """
    if documentation.parse(unit.documentation).is_malformed:
        raise InvalidDocumentationViolation(unit.display_signature)


def validate_candidate(unit: CandidateUnit) -> CandidateUnit:
    """
    Run all task checks against a candidate unit.

    Args:
        unit: Candidate unit produced by source analysis

    Returns:
        The same unit, once every check has passed

    Raises:
        TaskSignatureViolation, TaskPlacementViolation,
        InvalidDocumentationViolation: First failing check
    """
    check_signature(unit)
    check_placement(unit)
    check_documentation(unit)
    logger.debug(f"Candidate '{unit.display_signature}' passed task validation")
    return unit
