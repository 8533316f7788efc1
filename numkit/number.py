# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

"""
The number capability contract shared by :class:`numkit.rational.Rational`
and :class:`numkit.complexnum.Complex`.
"""
from typing import Protocol, TypeVar, runtime_checkable
from public import public

N = TypeVar('N', bound='Number')

@public
@runtime_checkable
class Number(Protocol):
    """
    Structural protocol for number-like values.

    Any class providing these four methods conforms; no inheritance is
    required. Each method returns a new value and leaves both operands
    unchanged.
    """

    def add(self: N, other: N) -> N:
        ...

    def subtract(self: N, other: N) -> N:
        ...

    def multiply(self: N, other: N) -> N:
        ...

    def divide(self: N, other: N) -> N:
        """Raises :class:`numkit.errors.DivisionByZero` if other is zero."""
        ...
