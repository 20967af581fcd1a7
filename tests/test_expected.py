import pytest

from novakit.expected import Expected, Unexpected


def test_value_is_held():
    e = Expected(42)
    assert e.has_value()
    assert bool(e) is True
    assert e.value() == 42


def test_error_is_held():
    e = Expected(Unexpected("boom"))
    assert not e.has_value()
    assert bool(e) is False
    assert e.error() == "boom"


def test_value_access_on_error_raises():
    with pytest.raises(ValueError):
        Expected(Unexpected("boom")).value()


def test_error_access_on_value_raises():
    with pytest.raises(ValueError):
        Expected(1).error()


def test_value_or():
    assert Expected(5).value_or(9) == 5
    assert Expected(Unexpected("x")).value_or(9) == 9


def test_none_is_a_value():
    e = Expected(None)
    assert e.has_value()
    assert e.value() is None


def test_equality():
    assert Expected(3) == Expected(3)
    assert Expected(Unexpected(3)) != Expected(3)