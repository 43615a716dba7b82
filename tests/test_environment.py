import pytest

from mlisp.builtin.env_builtin import BUILTINS, CONSTANTS, default_env
from mlisp.types.builtin_fn import NativeFunction
from mlisp.types.environment import Environment
from mlisp.types.errors import UnknownSymbol


def test_default_env_has_every_builtin(env):
    for name in BUILTINS:
        assert isinstance(env.lookup(name), NativeFunction)
    for name, value in CONSTANTS.items():
        assert env.lookup(name) == value


def test_default_env_is_fresh_each_time():
    a = default_env()
    b = default_env()
    a.define("x", 1.0)
    assert "x" not in b


def test_child_reads_through_and_writes_locally():
    parent = Environment()
    parent.define("a", 1.0)
    child = parent.child()
    child.define("b", 2.0)
    child.define("a", 3.0)
    assert child.lookup("a") == 3.0
    assert child.lookup("b") == 2.0
    assert parent.lookup("a") == 1.0
    assert "b" not in parent


def test_dropped_child_leaves_parent_untouched():
    parent = Environment()
    parent.update({"a": 1.0})
    child = parent.child()
    child.define("a", 9.0)
    child.define("b", 2.0)
    del child
    assert parent.vars == {"a": 1.0}
    assert "b" not in parent


def test_lookup_unbound():
    with pytest.raises(UnknownSymbol):
        Environment().lookup("missing")
    assert Environment().get("missing", 5.0) == 5.0


def test_repr_shows_chain():
    env = Environment()
    env.define("a", 1.0)
    child = env.child()
    assert "->" in repr(child)
    assert str(child).endswith(" -> ...")
