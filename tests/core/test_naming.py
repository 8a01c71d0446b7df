"""
Unit tests for nake.core.naming
"""
import pytest

from nake.core import naming


@pytest.mark.parametrize("signature,full_name,short_name,is_global,declaring_type", [
    ("Group.Sub.Build(int)", "Group.Sub.Build", "Build", False, "Script+Group+Sub"),
    ("Group.Test(string, bool)", "Group.Test", "Test", False, "Script+Group"),
    ("Build()", "Build", "Build", True, "Script"),
    ("Clean", "Clean", "Clean", True, "Script"),
])
def test_name_derivation(signature, full_name, short_name, is_global, declaring_type):
    assert naming.full_name(signature) == full_name
    assert naming.short_name(signature) == short_name
    assert naming.is_global(signature) is is_global
    assert naming.declaring_type(signature) == declaring_type


def test_full_name_stops_at_first_parameter_list():
    """Dots inside the parameter list don't affect the name"""
    signature = "Deploy.Publish(System.String, System.Int32)"
    assert naming.full_name(signature) == "Deploy.Publish"
    assert naming.short_name(signature) == "Publish"
    assert naming.declaring_type(signature) == "Script+Deploy"


def test_custom_root_and_joiner():
    assert naming.declaring_type("A.B.Run()", root_container="Build", joiner="/") == "Build/A/B"
    assert naming.declaring_type("Run()", root_container="Build", joiner="/") == "Build"
