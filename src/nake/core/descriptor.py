"""
Candidate unit descriptors

A candidate unit is a method proposed as a task by the source analysis step.
The analyser captures everything the validator needs into these models, so
the core never touches a compiler's semantic model directly. Descriptors are
immutable and can be built from plain dicts or JSON via ``model_validate``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Attribute names that mark a method as a task
TASK_ATTRIBUTE_NAMES = frozenset({"Task", "TaskAttribute"})


class Accessibility(str, Enum):
    PUBLIC = "public"
    INTERNAL = "internal"
    PROTECTED = "protected"
    PRIVATE = "private"


class ParameterDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Parameter name")
    type: str = Field(description="Semantic type tag, e.g. 'int' or 'string[]'")
    by_reference: bool = Field(default=False, description="Passed by reference (ref/out)")
    has_default: bool = Field(default=False, description="Declares an explicit default value")
    default: Any = Field(default=None, description="Default value when has_default is set")


class ScopeDescriptor(BaseModel):
    """One container in the chain enclosing a candidate unit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Container name")
    accessibility: Accessibility = Field(default=Accessibility.PUBLIC)
    is_static: bool = Field(default=True)
    is_root: bool = Field(default=False, description="Designated root script container")


class CandidateUnit(BaseModel):
    """
    Method descriptor proposed as a task.

    ``containing_scopes`` is ordered from the innermost container outward and
    is expected to end with the root container (``is_root=True``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    display_signature: str = Field(description="Fully qualified signature, e.g. 'Group.Build(int)'")
    accessibility: Accessibility = Field(default=Accessibility.PUBLIC)
    is_static: bool = Field(default=True)
    returns_void: bool = Field(default=True)
    generic_arity: int = Field(default=0, ge=0)
    parameters: List[ParameterDescriptor] = Field(default_factory=list)
    containing_scopes: List[ScopeDescriptor] = Field(default_factory=list)
    documentation: Optional[str] = Field(default=None, description="Raw documentation comment")
    attributes: List[str] = Field(default_factory=list, description="Attribute names on the method")


def is_annotated(unit: CandidateUnit) -> bool:
    """Check whether the unit carries the task marker attribute."""
    return any(attr in TASK_ATTRIBUTE_NAMES for attr in unit.attributes)
