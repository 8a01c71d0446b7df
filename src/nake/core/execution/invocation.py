"""
Task invocation identity

A TaskInvocation is the key for "this task already ran with these exact
arguments". Two invocations are equal when they refer to the same Task
object and carry argument lists that are equal by value and type, so a Task keeps a
set of them and uses membership as its at-most-once guard.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from nake.core.task import Task


def _freeze(value: Any) -> Any:
    """Turn flat collections into hashable tuples so arguments can key a set."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


def _identity(value: Any) -> Any:
    """
    Type-tagged key for a frozen value.

    Python treats ``1``, ``True`` and ``1.0`` as equal with equal hashes; they
    are distinct argument values here, so every scalar carries its type.
    """
    if isinstance(value, tuple):
        return (tuple, tuple(_identity(item) for item in value))
    if isinstance(value, frozenset):
        return (frozenset, frozenset(_identity(item) for item in value))
    return (type(value), value)


@dataclass(frozen=True, eq=False)
class TaskArgument:
    """
    A resolved value for one task parameter.

    Positional when ``name`` is None, named otherwise. Collection values are
    stored as tuples so that equal arguments hash equally. Equality compares
    values together with their types, so ``1`` and ``True`` differ.
    """

    value: Any
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _freeze(self.value))

    def _key(self) -> Tuple[Optional[str], Any]:
        return (self.name, _identity(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskArgument):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @classmethod
    def positional(cls, value: Any) -> TaskArgument:
        return cls(value=value)

    @classmethod
    def named(cls, name: str, value: Any) -> TaskArgument:
        return cls(value=value, name=name)


def split_arguments(arguments: Sequence[TaskArgument]) -> Tuple[List[Any], Dict[str, Any]]:
    """Split into positional values and keyword values, preserving order."""
    args: List[Any] = []
    kwargs: Dict[str, Any] = {}
    for argument in arguments:
        value = list(argument.value) if isinstance(argument.value, tuple) else argument.value
        if argument.is_named:
            kwargs[argument.name] = value
        else:
            args.append(value)
    return args, kwargs


@dataclass(frozen=True, eq=False)
class TaskInvocation:
    """One call of a task with concrete arguments."""

    task: Task
    target: Optional[Callable[..., Any]]
    arguments: Tuple[TaskArgument, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskInvocation):
            return NotImplemented
        return self.task is other.task and self.arguments == other.arguments

    def __hash__(self) -> int:
        return hash((id(self.task), self.arguments))

    def invoke(self) -> Any:
        """Call the bound target; exceptions from the task body propagate unchanged."""
        args, kwargs = split_arguments(self.arguments)
        return self.target(*args, **kwargs)
