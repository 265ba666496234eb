import pytest

from drillbook.rational import Rational, RationalError, equal


def test_conversion_to_float():
    assert equal(float(Rational(1)), 1)


def test_compound_assignments_sequence():
    x, y = Rational(1), Rational(2, 1)
    x += y
    assert x == Rational(3, 1)
    x -= y
    assert x == Rational(1, 1)
    x *= y
    assert x == Rational(2, 1)
    x /= y
    assert x == Rational(1, 1)


def test_increment_and_decrement_by_one():
    x, y = Rational(1), Rational(2)
    old = x
    x = x + 1
    assert old == Rational(1, 1)
    assert x == Rational(2, 1)
    old = x
    x = x - 1
    assert old == Rational(2, 1)
    assert x == Rational(1, 1)
    y = y + 1
    assert y == Rational(3, 1)
    y = y - 1
    assert y == Rational(2, 1)


def test_binary_operators():
    x, y = Rational(1), Rational(2)
    assert x + y == Rational(3, 1)
    assert x - y == Rational(-1, 1)
    assert x * y == Rational(2, 1)
    assert x / y == Rational(1, 2)


def test_mixed_with_int():
    x, y = Rational(1), Rational(2)
    x += 1
    assert x == Rational(2, 1)
    assert x + 1 == Rational(3, 1)
    assert 1 + y == Rational(3, 1)
    assert Rational(1 + 1) == Rational(2, 1)


def test_comparisons_of_equal_values():
    x, y = Rational(2), Rational(2)
    assert (x < y) is False
    assert (x > y) is False
    assert (x <= y) is True
    assert (x >= y) is True
    assert (x == y) is True
    assert (x != y) is False


def test_comparisons_order():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(1, 2) > Rational(1, 3)
    assert Rational(-1, 2) < 0


def test_parse_and_str_round_trip():
    x = Rational.parse("1/2")
    assert str(x) == "1/2"
    assert x == Rational(1, 2)


@pytest.mark.parametrize("text", ["1/2", "-3/7", "5/1", "0/1"])
def test_round_trip(text):
    assert str(Rational.parse(text)) == text


def test_reduction_and_sign_normalisation():
    r = Rational(2, -4)
    assert r == Rational(-1, 2)
    assert r.denominator > 0
    assert str(r) == "-1/2"


def test_parse_reduces():
    assert Rational.parse("2/4") == Rational(1, 2)


def test_zero_denominator_raises():
    with pytest.raises(RationalError):
        Rational(1, 0)


def test_division_by_zero_raises():
    with pytest.raises(RationalError):
        Rational(1, 2) / Rational(0)


@pytest.mark.parametrize("text", ["1-2", "abc", "1/", "/2", "1/0"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(RationalError):
        Rational.parse(text)


def test_equal_values_hash_alike():
    assert hash(Rational(3, 6)) == hash(Rational(1, 2))
    assert len({Rational(3, 6), Rational(1, 2), Rational(2, 4)}) == 1


def test_rsub_and_rtruediv():
    y = Rational(2)
    assert 1 - y == Rational(-1)
    assert 1 / y == Rational(1, 2)


def test_equal_tolerance():
    assert equal(1.0, 1.0 + 1e-7)
    assert not equal(1.0, 1.1)