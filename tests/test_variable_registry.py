import pytest

from ferrite.variable import registry as registry_module
from ferrite.variable.envvar import Variable
from ferrite.variable.literal import Literal
from ferrite.variable.registry import Registry, register, reset_default_registry
from ferrite.variable.schema import Marshaler
from ferrite.variable.schema_other import TypedOther
from ferrite.variable.specbuilder import TypedSpecBuilder


class StringMarshaler(Marshaler):
    def marshal(self, value):
        return Literal(value)

    def unmarshal(self, literal):
        return literal.string


def make_spec(name):
    return TypedSpecBuilder(name, "description").done(TypedOther(StringMarshaler()))


@pytest.fixture(autouse=True)
def reset():
    yield
    reset_default_registry()


def test_register_and_lookup():
    reg = Registry("k", "K")
    var = Variable(make_spec("FOO"))
    reg.register(var)
    assert "FOO" in reg
    assert reg.items() == [("FOO", var)]


def test_duplicate_name_is_rejected():
    reg = Registry("k", "K")
    reg.register(Variable(make_spec("FOO")))
    with pytest.raises(ValueError, match="a variable named FOO is already registered"):
        reg.register(Variable(make_spec("FOO")))
    assert len(reg) == 1


def test_register_uses_default_registry_when_none_given():
    var = register([], make_spec("FOO"))
    assert var.spec.name == "FOO"
    assert "FOO" in registry_module.DEFAULT_REGISTRY
    assert registry_module.DEFAULT_REGISTRY.is_default is True


def test_register_with_multiple_registries():
    first, second = Registry("a", "A"), Registry("b", "B")
    var = register([first, second], make_spec("FOO"))
    assert first.items() == [("FOO", var)]
    assert second.items() == [("FOO", var)]
    assert "FOO" not in registry_module.DEFAULT_REGISTRY


def test_clone_copies_fields_and_is_independent():
    reg = Registry("k", "K", url="docs", is_default=False)
    reg.register(Variable(make_spec("FOO")))
    copy = reg.clone()
    assert (copy.key, copy.name, copy.url, copy.is_default) == ("k", "K", "docs", False)
    assert "FOO" in copy
    copy.register(Variable(make_spec("BAR")))
    assert "BAR" not in reg


def test_assign_replaces_contents():
    target = Registry("a", "A")
    target.register(Variable(make_spec("OLD")))
    source = Registry("b", "B", is_default=True)
    source.register(Variable(make_spec("NEW")))
    target.assign(source)
    assert "NEW" in target
    assert "OLD" not in target
    assert (target.key, target.name, target.is_default) == ("b", "B", True)


def test_reset_default_registry_empties_it():
    var = register([], make_spec("FOO"))
    assert registry_module.DEFAULT_REGISTRY.items() == [("FOO", var)]
    reset_default_registry()
    assert registry_module.DEFAULT_REGISTRY.items() == []
    assert registry_module.DEFAULT_REGISTRY.is_default is True
    again = register([], make_spec("FOO"))
    assert registry_module.DEFAULT_REGISTRY.items() == [("FOO", again)]