# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

import math
from fractions import Fraction
import pytest
from numkit import Rational as R, DivisionByZero, Number

def test_reduction():
    for n in range(-12, 13):
        for d in range(-12, 13):
            if d == 0:
                continue
            r = R(n, d)
            assert r.denominator > 0
            assert math.gcd(abs(r.numerator), r.denominator) == 1
            assert r == Fraction(n, d)

    assert (R(2, -4).numerator, R(2, -4).denominator) == (-1, 2)
    assert (R(-6, -9).numerator, R(-6, -9).denominator) == (2, 3)
    assert (R(0, -5).numerator, R(0, -5).denominator) == (0, 1)

def test_zero_denominator():
    with pytest.raises(DivisionByZero):
        R(1, 0)
    with pytest.raises(DivisionByZero):
        R(0, 0)
    with pytest.raises(DivisionByZero):
        R(2**100, 0)

    # Existing handlers for the built-in exception keep working:
    with pytest.raises(ZeroDivisionError):
        R(1, 0)

def test_constructor_types():
    assert R(7) == R(7, 1)
    assert R(Fraction(3, 6)) == R(1, 2)
    assert R(R(1, 3)) == R(1, 3)
    assert R() == R(0, 1)
    assert R(True, 2) == R(1, 2)

    with pytest.raises(TypeError):
        R("1/2")
    with pytest.raises(TypeError):
        R(0.5)
    with pytest.raises(TypeError):
        R(1, 2.0)
    with pytest.raises(TypeError):
        R(Fraction(1, 2), 3)

def test_rational_to_str():
    assert str(R(1, 3)) == "1/3"
    assert str(R(4, 2)) == "2/1"
    assert str(R(0, 7)) == "0/1"
    assert str(R(3, -6)) == "-1/2"
    assert str(R(2**70, 3)) == f"{2**70}/3"

    assert repr(R(1, 3)) == "R(1, 3)"
    assert repr(R(-5, 10)) == "R(-1, 2)"

    assert f"{R(1, 3)}" == "1/3"
    assert format(R(5, 6), 's') == "5/6"

def test_arithmetic():
    a = R(1, 3)
    b = R(1, 6)
    assert a.add(b) == R(1, 2)
    assert a.subtract(b) == R(1, 6)
    assert b.subtract(a) == R(-1, 6)
    assert a.multiply(b) == R(1, 18)
    assert a.divide(b) == R(2, 1)
    assert b.divide(a) == R(1, 2)

    assert a + 1 == R(4, 3)
    assert 1 - a == R(2, 3)
    assert 2 * a == R(2, 3)
    assert 1 / a == R(3, 1)
    assert -a == R(-1, 3)
    assert abs(R(-1, 3)) == a

def test_operands_unchanged():
    a = R(1, 3)
    b = R(1, 6)
    a.add(b)
    a.multiply(b)
    a.divide(b)
    assert (a.numerator, a.denominator) == (1, 3)
    assert (b.numerator, b.denominator) == (1, 6)

def test_rational_op_types():
    assert type(R(1) + R(1)) == R
    assert type(R(1) - R(1)) == R
    assert type(R(1) * R(1)) == R
    assert type(R(1) / R(1)) == R
    assert type(1 + R(1)) == R
    assert type(1 - R(1)) == R
    assert type(2 * R(1)) == R
    assert type(1 / R(1)) == R
    assert type(-R(1)) == R
    assert type(+R(1)) == R
    assert type(abs(R(-1))) == R
    assert type(R(1).add(R(1))) == R
    assert type(R(1).divide(R(2))) == R
    assert type(R(3) % R(2)) == R
    assert type(7 % R(2)) == R
    assert type(R(7, 2) // R(1)) == R
    assert type(7 // R(2)) == R
    assert type(R(2) ** 2) == R
    assert type(R(2) ** -2) == R
    assert type(2 ** R(3)) == R
    assert type(2 ** R(-1)) == R
    assert all(type(x) == R for x in divmod(R(7, 2), R(1)))
    assert all(type(x) == R for x in divmod(7, R(2)))

    assert str(R(3) % R(2)) == "1/1"
    assert R(7, 2) // R(1) == 3
    assert divmod(R(7, 2), R(1)) == (R(3), R(1, 2))
    assert R(2) ** -2 == R(1, 4)
    assert 2 ** R(-1) == R(1, 2)

    # Mixing with float follows fractions.Fraction:
    assert type(R(1, 2) + 0.5) == float

def test_divide_by_zero():
    with pytest.raises(DivisionByZero):
        R(1, 2).divide(R(0, 3))
    with pytest.raises(DivisionByZero):
        R(1, 2) / 0
    with pytest.raises(DivisionByZero):
        1 / R(0)
    with pytest.raises(DivisionByZero):
        R(0) / R(0)
    with pytest.raises(DivisionByZero):
        R(1, 2) // R(0)
    with pytest.raises(DivisionByZero):
        1 // R(0)
    with pytest.raises(DivisionByZero):
        R(1, 2) % 0
    with pytest.raises(DivisionByZero):
        1 % R(0)
    with pytest.raises(DivisionByZero):
        divmod(R(1, 2), R(0))
    with pytest.raises(DivisionByZero):
        divmod(1, R(0))
    with pytest.raises(DivisionByZero):
        R(0) ** -1
    with pytest.raises(DivisionByZero):
        0 ** R(-1)

    assert R(0) ** 0 == R(1)

    assert R(0).divide(R(1, 2)) == R(0)

@pytest.mark.parametrize("a, b", [
    (R(1, 3), R(1, 6)),
    (R(-7, 3), R(5, 11)),
    (R(0), R(9, 4)),
    (R(2**80, 3**40), R(-(5**30), 7**25)),
])
def test_add_subtract_roundtrip(a, b):
    assert a.add(b).subtract(b) == a
    assert a.subtract(b).add(b) == a

def test_compare():
    assert R(1, 3).compare(R(1, 2)) == -1
    assert R(1, 2).compare(R(1, 3)) == 1
    assert R(1, 2).compare(R(2, 4)) == 0
    assert R(-1, 2).compare(R(1, -2)) == 0
    assert R(3, 2).compare(1) == 1
    assert R(-3, 2).compare(-1) == -1

    assert R(1, 3) < R(1, 2)
    assert R(5, 6) > R(3, 4)
    assert R(1, 2) <= R(2, 4)

def test_compare_large_values():
    # Cross-products far beyond 64 bits:
    a = R(2**70, 3**50)
    b = R(2**70 + 1, 3**50)
    c = R(2**71, 3**50 * 2 - 1)

    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert b.compare(c) == 1
    assert a.compare(c) == -1

    values = [a, b, c, R(-(2**90), 7), R(2**90, 7), R(0)]
    for x in values:
        assert x.compare(x) == 0
        for y in values:
            assert x.compare(y) == -y.compare(x)
            assert (x.compare(y) < 0) == (Fraction(x) < Fraction(y))
            for z in values:
                if x.compare(y) <= 0 and y.compare(z) <= 0:
                    assert x.compare(z) <= 0

def test_sort():
    fractions = [R(3, 4), R(1, 2), R(5, 6)]
    assert sorted(fractions) == [R(1, 2), R(3, 4), R(5, 6)]
    assert [str(f) for f in sorted(fractions)] == ["1/2", "3/4", "5/6"]
    assert sorted(fractions, reverse=True) == [R(5, 6), R(3, 4), R(1, 2)]

def test_sort_uses_compare(monkeypatch):
    calls = []
    compare = R.compare
    def counting_compare(self, other):
        calls.append((self, other))
        return compare(self, other)
    monkeypatch.setattr(R, "compare", counting_compare)

    assert sorted([R(3, 4), R(1, 2), R(5, 6)]) == [R(1, 2), R(3, 4), R(5, 6)]
    assert len(calls) > 0
    assert R(1, 3) < R(1, 2)
    assert R(1, 2) >= R(2, 4)
    assert R(1, 2) > 0.25

def test_immutable():
    r = R(1, 2)
    with pytest.raises(AttributeError):
        r.numerator = 3
    with pytest.raises(AttributeError):
        r.hello = 'world'

def test_hash_and_eq():
    assert hash(R(1, 2)) == hash(Fraction(1, 2))
    assert hash(R(4, 2)) == hash(2)
    assert R(4, 2) == 2
    assert len({R(1, 2), R(2, 4), R(3, 6)}) == 1

def test_number_protocol():
    assert isinstance(R(1, 2), Number)

def test_public_alias():
    import numkit.rational
    assert numkit.rational.R is R
    assert 'R' in numkit.rational.__all__
    assert 'Rational' in numkit.rational.__all__
