# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

from public import public

@public
class DivisionByZero(ZeroDivisionError):
    """
    Raised when a zero denominator or zero divisor is encountered.

    Subclasses the built-in :class:`ZeroDivisionError`, so existing handlers
    for the built-in exception also catch it.
    """
    pass
