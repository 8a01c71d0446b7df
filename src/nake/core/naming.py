"""
Name resolution for tasks

Every name a task exposes is derived from its display signature, e.g.
``Group.Sub.Build(int)``:

    full_name       Group.Sub.Build
    short_name      Build
    declaring_type  Script+Group+Sub

The functions are pure and cheap, so Task recomputes them on each access
instead of caching.
"""

from nake.core.config import DEFAULT_NESTED_JOINER, DEFAULT_ROOT_CONTAINER, NAME_SEPARATOR

PARAMETER_LIST_START = "("


def full_name(signature: str) -> str:
    index = signature.find(PARAMETER_LIST_START)
    if index < 0:
        return signature
    return signature[:index]


def is_global(signature: str) -> bool:
    """True when the task is declared directly in the root container."""
    return NAME_SEPARATOR not in full_name(signature)


def short_name(signature: str) -> str:
    name = full_name(signature)
    return name.rsplit(NAME_SEPARATOR, 1)[-1]


def declaring_type(
    signature: str,
    root_container: str = DEFAULT_ROOT_CONTAINER,
    joiner: str = DEFAULT_NESTED_JOINER,
) -> str:
    """
    Path of the compiled container holding the task's entry point.

    Args:
        signature: Display signature of the task
        root_container: Name of the root script container
        joiner: Separator between nested container names

    Returns:
        ``root_container`` for global tasks, otherwise the root followed by
        each enclosing container, joined with ``joiner``
    """
    if is_global(signature):
        return root_container
    prefix = full_name(signature).rsplit(NAME_SEPARATOR, 1)[0]
    return root_container + joiner + prefix.replace(NAME_SEPARATOR, joiner)
