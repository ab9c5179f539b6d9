import builtins
from io import StringIO

import pytest

from ferrite.limits import NumericKind
from ferrite.mode.config import Config
from ferrite.mode.validate import AttentionLevel, Table, attention_needed, run
from ferrite.options import relevant_if, with_registry
from ferrite.variable.literal import Literal
from ferrite.variable.registry import Registry
from ferrite.variable.registryset import RegistrySet
from ferrite.variable.schema import Marshaler
from ferrite.variable.schema_numeric import TypedNumeric
from ferrite.variable.schema_other import TypedOther
from ferrite.variable.schema_set import SetMember, TypedSet
from ferrite.variable.specbuilder import TypedSpecBuilder
from ferrite.varsets import deprecated, optional, required


class _TextMarshaler(Marshaler):
    def marshal(self, value):
        return Literal(value)

    def unmarshal(self, literal):
        return literal.string


class _UintMarshaler(Marshaler):
    def marshal(self, value):
        return Literal(str(value))

    def unmarshal(self, literal):
        if not literal.string.isdigit():
            raise builtins.ValueError("invalid syntax")
        return int(literal.string)


def _bool_schema():
    return TypedSet(
        members=(SetMember(True), SetMember(False)),
        to_literal=lambda v: Literal("true" if v else "false"),
        kind="bool",
    )


def _uint_schema():
    return TypedNumeric(marshaler=_UintMarshaler(), kind=NumericKind.UINT)


def _config(reg):
    registries = RegistrySet()
    registries.add(reg)
    exits = []
    cfg = Config(
        registries=registries,
        args=["<app>"],
        out=StringIO(),
        err=StringIO(),
        exit=exits.append,
    )
    return cfg, exits


@pytest.fixture
def reg():
    return Registry(key="app", is_default=True)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "FERRITE_WIDGET_ENABLED",
        "FERRITE_WIDGET_SPEED",
        "FERRITE_STRING",
        "FERRITE_WEIGHT",
        "FERRITE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


def _widgets(reg, speed_factory):
    enabled = required(
        _bool_schema(),
        TypedSpecBuilder("FERRITE_WIDGET_ENABLED", "enable the widget", False),
        with_registry(reg),
    )
    speed = speed_factory(
        _uint_schema(),
        TypedSpecBuilder("FERRITE_WIDGET_SPEED", "set the speed of the widget", 0),
        with_registry(reg),
        relevant_if(enabled),
    )
    return enabled, speed


def test_relevant_if_when_relevant(monkeypatch, reg):
    _, speed = _widgets(reg, optional)
    monkeypatch.setenv("FERRITE_WIDGET_SPEED", "100")
    monkeypatch.setenv("FERRITE_WIDGET_ENABLED", "true")
    cfg, exits = _config(reg)

    run(cfg)

    assert cfg.err.getvalue() == ""
    assert exits == []
    assert speed.value() == (100, True)


def test_relevant_if_when_not_relevant(monkeypatch, reg):
    _widgets(reg, required)
    monkeypatch.setenv("FERRITE_WIDGET_ENABLED", "false")
    cfg, exits = _config(reg)

    run(cfg)

    assert cfg.err.getvalue() == ""
    assert exits == []


def test_relevant_if_when_not_relevant_but_invalid(monkeypatch, reg):
    _widgets(reg, required)
    monkeypatch.setenv("FERRITE_WIDGET_SPEED", "-100")
    monkeypatch.setenv("FERRITE_WIDGET_ENABLED", "false")
    cfg, exits = _config(reg)

    run(cfg)

    assert cfg.err.getvalue() == (
        "Environment Variables:\n"
        "\n"
        "   FERRITE_WIDGET_ENABLED  enable the widget              true | false    ✓ set to false\n"
        " ❯ FERRITE_WIDGET_SPEED    set the speed of the widget    <uint>          ✗ set to -100, expected integer\n"
        "\n"
    )
    assert exits == []


def test_required_undefined_variable_exits_with_error(reg):
    required(
        TypedOther(marshaler=_TextMarshaler()),
        TypedSpecBuilder("FERRITE_STRING", "example string variable", ""),
        with_registry(reg),
    )
    cfg, exits = _config(reg)

    run(cfg)

    assert cfg.err.getvalue() == (
        "Environment Variables:\n"
        "\n"
        " ❯ FERRITE_STRING  example string variable    <string>    ✗ undefined\n"
        "\n"
    )
    assert exits == [1]


def test_valid_variables_produce_no_output(monkeypatch, reg):
    required(
        _bool_schema(),
        TypedSpecBuilder("FERRITE_DEBUG", "enable debugging", False),
        with_registry(reg),
    )
    monkeypatch.setenv("FERRITE_DEBUG", "true")
    cfg, exits = _config(reg)

    run(cfg)

    assert cfg.err.getvalue() == ""
    assert exits == []


def test_deprecated_variable_from_environment_is_a_warning(monkeypatch, reg):
    deprecated(
        _uint_schema(),
        TypedSpecBuilder("FERRITE_WEIGHT", "weighting for this node", 0),
        with_registry(reg),
    )
    monkeypatch.setenv("FERRITE_WEIGHT", "007")
    cfg, exits = _config(reg)

    (variable,) = cfg.registries.variables()
    assert attention_needed(variable) is AttentionLevel.WARNING

    run(cfg)

    out = cfg.err.getvalue()
    assert "⚠ deprecated variable set to 007, equivalent to 7" in out
    assert "[ <uint> ]" in out
    assert exits == []


def test_default_value_is_reported(monkeypatch, reg):
    builder = TypedSpecBuilder("FERRITE_DEBUG", "enable debugging", False)
    builder.with_default(False)
    required(_bool_schema(), builder, with_registry(reg))
    required(
        TypedOther(marshaler=_TextMarshaler()),
        TypedSpecBuilder("FERRITE_STRING", "example string variable", ""),
        with_registry(reg),
    )
    cfg, exits = _config(reg)

    run(cfg)

    out = cfg.err.getvalue()
    assert "[ true | false ] = false" in out
    assert "✓ using default value" in out
    assert exits == [1]


def test_attention_levels(monkeypatch, reg):
    required(
        _bool_schema(),
        TypedSpecBuilder("FERRITE_DEBUG", "enable debugging", False),
        with_registry(reg),
    )
    required(
        _uint_schema(),
        TypedSpecBuilder("FERRITE_WEIGHT", "weighting for this node", 0),
        with_registry(reg),
    )
    required(
        TypedOther(marshaler=_TextMarshaler()),
        TypedSpecBuilder("FERRITE_STRING", "example string variable", ""),
        with_registry(reg),
    )
    monkeypatch.setenv("FERRITE_DEBUG", "true")
    monkeypatch.setenv("FERRITE_WEIGHT", "heavy")
    cfg, _ = _config(reg)

    levels = {v.spec.name: attention_needed(v) for v in cfg.registries.variables()}
    assert levels == {
        "FERRITE_DEBUG": AttentionLevel.NONE,
        "FERRITE_STRING": AttentionLevel.ERROR,
        "FERRITE_WEIGHT": AttentionLevel.ERROR,
    }


def test_table_aligns_columns():
    table = Table()
    table.add_row("a", "bb", "c")
    table.add_row("ccc", "d", "e")
    lines = str(table).splitlines()

    assert len(lines) == 2
    assert lines[0].index("bb") == lines[1].index("d")
    assert lines[0].index("c", 1) == lines[1].index("e")


def test_table_write_to_returns_character_count():
    table = Table()
    table.add_row("name", "value")
    table.add_row("x", "longer value")
    stream = StringIO()

    count = table.write_to(stream)

    assert count == len(stream.getvalue())
    assert stream.getvalue() == str(table)


def test_table_drops_trailing_empty_columns():
    table = Table()
    table.add_row("x", "")
    table.add_row("yy", "")

    assert str(table).splitlines() == ["x", "yy"]