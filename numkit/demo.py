# SPDX-FileCopyrightText: 2025 numkit contributors
# SPDX-License-Identifier: Apache-2.0

"""
Runs the algebraic identity checks (a+b)^2 = a^2 + 2ab + b^2 and
(a-b)*(a+b) = a^2 - b^2 for a pair of rational numbers (1/3, 1/6) and a pair
of complex numbers (1+3i, 1+6i), then prints the fractions 3/4, 1/2, 5/6 in
ascending order.
"""

import argparse
import logging
import sys
import traceback

from .errors import DivisionByZero
from .rational import R
from .complexnum import Complex
from .identities import sum_square, squares_difference, report
from .version import version

def run(file=None):
    if file is None:
        file = sys.stdout

    frac_a, frac_b = R(1, 3), R(1, 6)
    cplx_a, cplx_b = Complex(1, 3), Complex(1, 6)

    report(sum_square(frac_a, frac_b), file)
    report(sum_square(cplx_a, cplx_b), file)

    report(squares_difference(frac_a, frac_b), file)
    report(squares_difference(cplx_a, cplx_b), file)

    fractions = [R(3, 4), R(1, 2), R(5, 6)]
    print("Sorted fractions:", file=file)
    for frac in sorted(fractions):
        print(frac, file=file)

def main(argv=None):
    parser = argparse.ArgumentParser(prog='numkit-demo',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('-p', '--pause', action='store_true', help="Wait for Enter before exiting.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {version}')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        run()
    except DivisionByZero as e:
        logging.debug("Traceback: %s", traceback.format_exc())
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.pause:
        try:
            input("Press Enter to exit.")
        except EOFError:
            # stdin closed, nothing to wait for.
            print(file=sys.stderr)
    return 0
