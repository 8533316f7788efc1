# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

import numbers
import operator
import fractions
from public import public
from .errors import DivisionByZero

@public
class Rational(fractions.Fraction):
    """
    Exact rational number with arbitrary-precision numerator and denominator.

    It extends :class:`fractions.Fraction` from Python's standard library:

    - The constructor takes an integer pair, e.g. Rational(1, 3), or a single
      rational value (int, Fraction, Rational). Strings and floats are not
      accepted.
    - A zero denominator raises :class:`numkit.errors.DivisionByZero`, as
      does division (/, //, %, divmod) by a zero value or raising zero to a
      negative power.
    - Arithmetic between Rational objects (and ints) yields Rational objects.
    - str() always shows "[numerator]/[denominator]", e.g. "1/3", "2/1" or
      "0/1".
    - repr() yields a different format, i.e. "R(numerator, denominator)".
    - add(), subtract(), multiply() and divide() implement the
      :class:`numkit.number.Number` protocol; compare() provides the total
      order. The operators <, <=, > and >= between rational values go
      through compare(), so sorted() orders by it.

    Every instance is reduced: numerator and denominator are coprime and the
    denominator is positive. Rational(2, -4) has numerator -1 and
    denominator 2.
    """

    __slots__ = ()

    def __new__(cls, numerator=0, denominator=None):
        if denominator is None:
            if not isinstance(numerator, numbers.Rational):
                raise TypeError(f"{cls.__name__} expects integers or a rational value, "
                    f"not {type(numerator).__name__}.")
            if isinstance(numerator, numbers.Integral):
                numerator = operator.index(numerator)
            return super().__new__(cls, numerator)
        if not isinstance(numerator, numbers.Integral) \
                or not isinstance(denominator, numbers.Integral):
            raise TypeError(f"{cls.__name__} numerator and denominator must be integers.")
        # Fixed-width integer types (e.g. numpy scalars) would overflow:
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise DivisionByZero(f"{cls.__name__}({numerator}, 0): denominator cannot be zero.")
        return super().__new__(cls, numerator, denominator)

    def __repr__(self):
        return f"R({self.numerator}, {self.denominator})"

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"

    def __format__(self, spec):
        if spec in ('s', ''):
            return str(self)
        else:
            return super().__format__(spec)

    def _wrap(self, result):
        # Fraction operators return plain Fractions, floats for mixed
        # float arithmetic or NotImplemented.
        if isinstance(result, numbers.Rational):
            return type(self)(result)
        return result

    def __add__(self, other):
        return self._wrap(super().__add__(other))

    def __radd__(self, other):
        return self._wrap(super().__radd__(other))

    def __sub__(self, other):
        return self._wrap(super().__sub__(other))

    def __rsub__(self, other):
        return self._wrap(super().__rsub__(other))

    def __mul__(self, other):
        return self._wrap(super().__mul__(other))

    def __rmul__(self, other):
        return self._wrap(super().__rmul__(other))

    def _check_divisor(self, divisor, dividend):
        if isinstance(divisor, numbers.Rational) and divisor == 0:
            raise DivisionByZero(f"Cannot divide {dividend} by zero.")

    def __truediv__(self, other):
        self._check_divisor(other, self)
        return self._wrap(super().__truediv__(other))

    def __rtruediv__(self, other):
        self._check_divisor(self, other)
        return self._wrap(super().__rtruediv__(other))

    def __floordiv__(self, other):
        self._check_divisor(other, self)
        return self._wrap(super().__floordiv__(other))

    def __rfloordiv__(self, other):
        self._check_divisor(self, other)
        return self._wrap(super().__rfloordiv__(other))

    def __mod__(self, other):
        self._check_divisor(other, self)
        return self._wrap(super().__mod__(other))

    def __rmod__(self, other):
        self._check_divisor(self, other)
        return self._wrap(super().__rmod__(other))

    def __divmod__(self, other):
        self._check_divisor(other, self)
        result = super().__divmod__(other)
        if result is NotImplemented:
            return result
        return tuple(self._wrap(x) for x in result)

    def __rdivmod__(self, other):
        self._check_divisor(self, other)
        result = super().__rdivmod__(other)
        if result is NotImplemented:
            return result
        return tuple(self._wrap(x) for x in result)

    def __pow__(self, other):
        # Zero raised to a negative power divides by zero.
        if self == 0 and isinstance(other, numbers.Real) and other < 0:
            raise DivisionByZero(f"Cannot raise {self} to negative power {other}.")
        return self._wrap(super().__pow__(other))

    def __rpow__(self, other):
        if isinstance(other, numbers.Real) and other == 0 and self < 0:
            raise DivisionByZero(f"Cannot raise {other} to negative power {self}.")
        return self._wrap(super().__rpow__(other))

    def __lt__(self, other):
        if isinstance(other, numbers.Rational):
            return self.compare(other) < 0
        return super().__lt__(other)

    def __le__(self, other):
        if isinstance(other, numbers.Rational):
            return self.compare(other) <= 0
        return super().__le__(other)

    def __gt__(self, other):
        if isinstance(other, numbers.Rational):
            return self.compare(other) > 0
        return super().__gt__(other)

    def __ge__(self, other):
        if isinstance(other, numbers.Rational):
            return self.compare(other) >= 0
        return super().__ge__(other)

    def __neg__(self):
        return type(self)(super().__neg__())

    def __pos__(self):
        return type(self)(super().__pos__())

    def __abs__(self):
        return type(self)(super().__abs__())

    def add(self, other: 'Rational') -> 'Rational':
        """Returns self + other."""
        return self + other

    def subtract(self, other: 'Rational') -> 'Rational':
        """Returns self - other."""
        return self - other

    def multiply(self, other: 'Rational') -> 'Rational':
        """Returns self * other."""
        return self * other

    def divide(self, other: 'Rational') -> 'Rational':
        """
        Returns self / other. Raises :class:`numkit.errors.DivisionByZero`
        if other is zero.
        """
        return self / other

    def compare(self, other) -> int:
        """
        Returns -1, 0 or 1 when self is less than, equal to or greater than
        other. Both denominators are positive, so comparing the
        cross-products preserves the order.
        """
        other = type(self)(other)
        lhs = self.numerator * other.denominator
        rhs = other.numerator * self.denominator
        return (lhs > rhs) - (lhs < rhs)

public(R = Rational) # alias
