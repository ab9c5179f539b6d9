import pytest

from ferrite.maybe import Maybe, map_value, none, some, try_map


def test_some_holds_value():
    m = some(5)
    assert m.get() == (5, True)
    assert m.is_empty() is False
    assert m.must_get() == 5


def test_none_is_empty():
    m = none()
    assert m.get() == (None, False)
    assert m.is_empty() is True


def test_must_get_on_empty_raises():
    with pytest.raises(ValueError, match="maybe-value is empty"):
        none().must_get()


def test_default_constructed_is_empty():
    assert Maybe() == none()


def test_equality():
    assert some("a") == some("a")
    assert some("a") != some("b")
    assert some(None) != none()


def test_map_value_applies_function():
    assert map_value(some(2), lambda v: v * 10) == some(20)


def test_map_value_of_empty_stays_empty():
    calls = []
    result = map_value(none(), calls.append)
    assert result.is_empty()
    assert calls == []


def test_try_map_success():
    assert try_map(some("3"), int) == some(3)


def test_try_map_propagates_error():
    with pytest.raises(ValueError):
        try_map(some("not a number"), int)


def test_try_map_of_empty_does_not_call():
    def explode(_):
        raise AssertionError("called")

    assert try_map(none(), explode).is_empty()