"""Shared fixtures for nake tests."""

from types import SimpleNamespace

import pytest

from nake.core.config import NakeConfig, set_config
from nake.core.descriptor import (
    CandidateUnit,
    ParameterDescriptor,
    ScopeDescriptor,
)

ROOT_SCOPE = ScopeDescriptor(name="Script", is_root=True, is_static=False)


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    """Pin the process-wide config so NAKE_* variables from the host don't leak in."""
    for key in ("NAKE_ROOT_CONTAINER", "NAKE_NESTED_JOINER", "NAKE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    set_config(NakeConfig())
    yield
    set_config(None)


def scopes_for(signature: str, **overrides) -> list:
    """
    Build the containing scope chain implied by a signature.

    ``overrides`` maps a container name to ScopeDescriptor field overrides,
    e.g. ``scopes_for("A.B.Build()", B={"is_static": False})``.
    """
    full_name = signature.split("(", 1)[0]
    containers = full_name.split(".")[:-1]
    scopes = [
        ScopeDescriptor(name=name, **overrides.get(name, {}))
        for name in reversed(containers)
    ]
    return scopes + [ROOT_SCOPE]


def make_unit(signature: str = "Build()", **fields) -> CandidateUnit:
    """Candidate unit that passes every check unless fields say otherwise."""
    fields.setdefault("containing_scopes", scopes_for(signature))
    return CandidateUnit(display_signature=signature, **fields)


@pytest.fixture
def unit_factory():
    return make_unit


@pytest.fixture
def param():
    def _param(name="value", type="string", **fields):
        return ParameterDescriptor(name=name, type=type, **fields)

    return _param


@pytest.fixture
def compiled_script():
    """
    Stand-in for a compiled build script.

    Mirrors a script declaring ``Build``, ``Group.Test`` and ``Group.Sub.Pack``
    and records every call in ``calls``.
    """
    calls = []

    class Sub:
        @staticmethod
        def Pack(configuration="Release"):
            calls.append(("Group.Sub.Pack", configuration))

    class Group:
        @staticmethod
        def Test(filter, verbose=False):
            calls.append(("Group.Test", filter, verbose))

        def Instance(self):
            calls.append(("Group.Instance",))

        _Hidden = staticmethod(lambda: None)
        NotCallable = 42

    Group.Sub = Sub

    class Script:
        @staticmethod
        def Build():
            calls.append(("Build",))

        @staticmethod
        def Fail():
            calls.append(("Fail",))
            raise ValueError("boom")

    Script.Group = Group

    return SimpleNamespace(Script=Script, calls=calls)


@pytest.fixture
def scope_chain():
    return scopes_for
