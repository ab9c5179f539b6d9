import pytest

from ferrite.variable.literal import Literal, ValueError as VarValueError, ValueOf, VariableError


@pytest.mark.parametrize("text", ["foo", "host:8080", "a/b.c", "user@example.com", "x=1,y-2", "50%"])
def test_quote_leaves_safe_values_alone(text):
    assert Literal(text).quote() == text


def test_quote_empty_string():
    assert Literal("").quote() == ""


def test_quote_wraps_values_with_spaces():
    assert Literal("hello world").quote() == "'hello world'"


def test_quote_escapes_single_quotes():
    assert Literal("it's").quote() == "'it'\"'\"'s'"


def test_quote_non_ascii_is_quoted():
    quoted = Literal("café").quote()
    assert quoted.startswith("'") and quoted.endswith("'")
    assert quoted[1:-1] == "café"


def test_literal_equality_and_str():
    assert Literal("x") == Literal("x")
    assert str(Literal("abc")) == "abc"


def test_value_of_defaults():
    v = ValueOf()
    assert v.verbatim == Literal()
    assert v.canonical == Literal()
    assert v.native is None


class _Recorder:
    def __init__(self):
        self.seen = []

    def visit_generic_error(self, err):
        self.seen.append(("generic", err))

    def visit_special(self, err):
        self.seen.append(("special", err))


class _SpecialError(Exception):
    def accept_visitor(self, visitor):
        visitor.visit_special(self)


def test_value_error_message_and_fields():
    cause = RuntimeError("boom")
    err = VarValueError("FOO", Literal("bar"), cause)
    assert str(err) == "value of FOO (bar) is invalid: boom"
    assert err.name == "FOO"
    assert err.literal == Literal("bar")
    assert err.cause is cause
    assert err.__cause__ is cause
    assert isinstance(err, VariableError)


def test_value_error_message_quotes_literal():
    err = VarValueError("FOO", Literal("a b"), RuntimeError("bad"))
    assert Literal("a b").quote() in str(err)


def test_accept_visitor_generic_cause():
    cause = RuntimeError("boom")
    rec = _Recorder()
    VarValueError("FOO", Literal("x"), cause).accept_visitor(rec)
    assert rec.seen == [("generic", cause)]


def test_accept_visitor_self_dispatching_cause():
    cause = _SpecialError("special")
    rec = _Recorder()
    VarValueError("FOO", Literal("x"), cause).accept_visitor(rec)
    assert rec.seen == [("special", cause)]