"""Semantic type tags accepted for task parameters."""

from __future__ import annotations

from enum import Enum

COLLECTION_SUFFIX = "[]"


class SemanticType(str, Enum):
    """Scalar types a task parameter may carry."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    CHAR = "char"
    ENUM = "enum"


SCALAR_TYPES = frozenset(t.value for t in SemanticType)


def is_collection(type_tag: str) -> bool:
    return type_tag.endswith(COLLECTION_SUFFIX)


def element_type(type_tag: str) -> str:
    """Return the element tag of a collection tag, or the tag itself for scalars."""
    if is_collection(type_tag):
        return type_tag[: -len(COLLECTION_SUFFIX)]
    return type_tag


def is_supported(type_tag: str) -> bool:
    """
    Check whether a parameter type tag belongs to the supported set.

    Scalars and flat collections of scalars are supported; nested
    collections such as ``int[][]`` are not.
    """
    return element_type(type_tag.strip().lower()) in SCALAR_TYPES
