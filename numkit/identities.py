# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

"""
Generic checks of algebraic identities.

The checks work with any type implementing :class:`numkit.number.Number`,
e.g. :class:`numkit.rational.Rational` or :class:`numkit.complexnum.Complex`.
They only call add(), subtract(), multiply() and divide() on the values and
do not assert anything themselves: each check returns an
:class:`IdentityCheck` holding the intermediate results, whose lines() can be
printed for the reader to compare both sides.
"""
import sys
import logging
from dataclasses import dataclass
from public import public
from .number import Number, N

@public
@dataclass(frozen=True)
class IdentityCheck:
    """Result of an identity check: title and labeled intermediate values."""
    title: str
    steps: tuple[tuple[str, Number], ...]

    @property
    def lhs(self) -> Number:
        """Value of the left-hand side of the identity."""
        return self.steps[-2][1]

    @property
    def rhs(self) -> Number:
        """Value of the right-hand side of the identity."""
        return self.steps[-1][1]

    def holds(self) -> bool:
        """
        Returns whether lhs equals rhs. Values providing an isclose() method
        (floating-point types) are compared with tolerance.
        """
        if self.lhs == self.rhs:
            return True
        isclose = getattr(self.lhs, 'isclose', None)
        return isclose is not None and isclose(self.rhs)

    def lines(self):
        """Yields the human-readable report, one line at a time."""
        yield f"=== Testing {self.title} ==="
        for label, value in self.steps:
            yield f"{label} = {value}"
        yield "=== Finished ==="

@public
def sum_square(a: N, b: N) -> IdentityCheck:
    """Checks (a+b)^2 = a^2 + 2ab + b^2."""
    logging.debug("sum_square: a=%r, b=%r", a, b)
    a_plus_b = a.add(b)
    a_plus_b_square = a_plus_b.multiply(a_plus_b)

    a_square = a.multiply(a)
    b_square = b.multiply(b)
    ab = a.multiply(b)
    ab_twice = ab.add(ab)
    right_side = a_square.add(ab_twice).add(b_square)

    return IdentityCheck(
        title=f"(a+b)^2 = a^2 + 2ab + b^2 for a = {a}, b = {b}",
        steps=(
            ("a + b", a_plus_b),
            ("(a + b)^2", a_plus_b_square),
            ("a^2 + 2ab + b^2", right_side),
        ),
    )

@public
def squares_difference(a: N, b: N) -> IdentityCheck:
    """Checks (a-b)*(a+b) = a^2 - b^2."""
    logging.debug("squares_difference: a=%r, b=%r", a, b)
    product = a.subtract(b).multiply(a.add(b))
    difference = a.multiply(a).subtract(b.multiply(b))

    return IdentityCheck(
        title=f"(a-b)*(a+b) = a^2 - b^2 for a = {a}, b = {b}",
        steps=(
            ("(a - b)*(a + b)", product),
            ("a^2 - b^2", difference),
        ),
    )

@public
def quotient_roundtrip(a: N, b: N) -> IdentityCheck:
    """
    Checks (a/b)*b = a. Raises :class:`numkit.errors.DivisionByZero` if b is
    zero.
    """
    logging.debug("quotient_roundtrip: a=%r, b=%r", a, b)
    quotient = a.divide(b)

    return IdentityCheck(
        title=f"(a/b)*b = a for a = {a}, b = {b}",
        steps=(
            ("a / b", quotient),
            ("(a / b)*b", quotient.multiply(b)),
            ("a", a),
        ),
    )

@public
def report(check: IdentityCheck, file=None):
    """Prints the lines of check to file (default: sys.stdout)."""
    if file is None:
        file = sys.stdout
    for line in check.lines():
        print(line, file=file)
