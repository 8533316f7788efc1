# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

"""
Complex number with double-precision float components.
"""
import math
import numbers
from public import public
from .errors import DivisionByZero

def _float_str(value: float) -> str:
    # Integral values are shown without decimal point: 1.0 -> "1".
    s = repr(value)
    if s.endswith('.0'):
        s = s[:-2]
    return s

@public
class Complex(tuple):
    """
    Complex number stored as a (real, imag) pair of floats.

    Instances are immutable. Arithmetic follows IEEE-754 semantics,
    NaN and infinity are propagated. Only division by zero is rejected
    with :class:`numkit.errors.DivisionByZero`.

    str() concatenates the components literally, e.g. "1+3i" or "1+-3i".
    """

    __slots__ = ()

    def __new__(cls, real=0.0, imag=0.0):
        if not isinstance(real, numbers.Real) or not isinstance(imag, numbers.Real):
            raise TypeError(f"{cls.__name__} components must be real numbers.")
        real = float(real)
        imag = float(imag)
        return tuple.__new__(cls, (real, imag))

    @classmethod
    def from_builtin(cls, z: complex) -> 'Complex':
        """Returns Complex equivalent of Python's built-in complex z."""
        z = complex(z)
        return cls(z.real, z.imag)

    @property
    def real(self) -> float:
        """Real part."""
        return self[0]

    @property
    def imag(self) -> float:
        """Imaginary part."""
        return self[1]

    def __complex__(self):
        return complex(self.real, self.imag)

    def __eq__(self, other):
        # Plain tuples with equal items are not equal to a Complex.
        if not isinstance(other, Complex):
            return False
        return self.real == other.real and self.imag == other.imag

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = tuple.__hash__

    def _unordered(self, other):
        raise TypeError(f"{type(self).__name__} values are not ordered.")

    __lt__ = __le__ = __gt__ = __ge__ = _unordered

    def __add__(self, other):
        if not isinstance(other, Complex):
            raise TypeError(f"{type(self).__name__} cannot be added to {type(other).__name__}.")
        return type(self)(self.real + other.real, self.imag + other.imag)

    def __radd__(self, other):
        raise TypeError(f"{type(other).__name__} cannot be added to {type(self).__name__}.")

    def __sub__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return type(self)(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            # Multiplication with scalar
            return type(self)(other*self.real, other*self.imag)
        if not isinstance(other, Complex):
            return NotImplemented
        return type(self)(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        denom = other.real * other.real + other.imag * other.imag
        if denom == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero.")
        return type(self)(
            (self.real * other.real + self.imag * other.imag) / denom,
            (self.imag * other.real - self.real * other.imag) / denom,
        )

    def __neg__(self):
        return type(self)(-self.real, -self.imag)

    def conjugate(self) -> 'Complex':
        """Returns complex conjugate (real, -imag)."""
        return type(self)(self.real, -self.imag)

    def add(self, other: 'Complex') -> 'Complex':
        return self + other

    def subtract(self, other: 'Complex') -> 'Complex':
        return self - other

    def multiply(self, other: 'Complex') -> 'Complex':
        return self * other

    def divide(self, other: 'Complex') -> 'Complex':
        return self / other

    def isclose(self, other: 'Complex', rel_tol=1e-9, abs_tol=0.0) -> bool:
        """
        Returns whether both components are close according to
        :func:`math.isclose`.
        """
        return math.isclose(self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol) \
            and math.isclose(self.imag, other.imag, rel_tol=rel_tol, abs_tol=abs_tol)

    def __str__(self):
        return f"{_float_str(self.real)}+{_float_str(self.imag)}i"

    def __repr__(self):
        return f"{type(self).__name__}({self.real!r}, {self.imag!r})"
