"""
Unit tests for nake.core.types
"""
import pytest

from nake.core.types import SemanticType, element_type, is_collection, is_supported


@pytest.mark.parametrize("type_tag,expected", [
    ("string", True),
    ("bool", True),
    ("Int", True),
    (" double ", True),
    ("enum", True),
    ("string[]", True),
    ("decimal[]", True),
    ("int[][]", False),
    ("object", False),
    ("[]", False),
    ("", False),
])
def test_is_supported(type_tag, expected):
    assert is_supported(type_tag) is expected


def test_element_type():
    assert is_collection("char[]") is True
    assert element_type("char[]") == "char"
    assert element_type("long") == "long"
    assert SemanticType("float") is SemanticType.FLOAT
