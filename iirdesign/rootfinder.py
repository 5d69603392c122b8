"""Polynomial root finding with Laguerre's method."""

from __future__ import annotations

import cmath
import sys
from collections.abc import Iterable, Sequence

_MR = 8
_MT = 10
_MAX_ITERATIONS = _MT * _MR
_FRACTIONS = (0.0, 0.5, 0.25, 0.75, 0.13, 0.38, 0.62, 0.88, 1.0)
_MACHINE_EPSILON = sys.float_info.epsilon
_REAL_SNAP_EPSILON = 1.0e-30


class RootFindingError(RuntimeError):
    """Raised when Laguerre iteration does not converge."""


def _laguerre(coefficients: Sequence[complex], x: complex) -> complex:
    """Refine ``x`` towards a root of the polynomial with the given coefficients."""
    degree = len(coefficients) - 1
    lower = coefficients[:degree]
    for iteration in range(1, _MAX_ITERATIONS + 1):
        b = coefficients[degree]
        err = abs(b)
        d = f = 0j
        abx = abs(x)
        for coefficient in reversed(lower):
            f = x * f + d
            d = x * d + b
            b = x * b + coefficient
            err = abs(b) + abx * err
        err *= _MACHINE_EPSILON
        if abs(b) <= err:
            return x

        g = d / b
        g2 = g * g
        h = g2 - 2.0 * f / b
        sq = cmath.sqrt((degree - 1) * (degree * h - g2))
        gp = g + sq
        gm = g - sq
        abp = abs(gp)
        abm = abs(gm)
        if abp < abm:
            gp = gm
        if max(abp, abm) > 0.0:
            dx = degree / gp
        else:
            dx = cmath.rect(1 + abx, float(iteration))
        x1 = x - dx
        if x == x1:
            return x
        if iteration % _MT != 0:
            x = x1
        else:
            x -= _FRACTIONS[iteration // _MT] * dx

    raise RootFindingError("laguerre failed")


def _deflate(coefficients: Sequence[complex], root: complex) -> list[complex]:
    """Divide the polynomial by ``(x - root)`` and return the quotient."""
    quotient = []
    accumulator = 0j
    for coefficient in reversed(coefficients[1:]):
        accumulator = accumulator * root + coefficient
        quotient.append(accumulator)
    quotient.reverse()
    return quotient


def sort_by_imag_descending(roots: Iterable[complex]) -> list[complex]:
    """Return the roots ordered by descending imaginary part, keeping ties in order."""
    return sorted(roots, key=lambda root: -root.imag)


def find_roots(
    coefficients: Iterable[complex], polish: bool = True, sort: bool = True
) -> list[complex]:
    """Find all roots of the polynomial ``sum(c[i] * x**i)``.

    Coefficients are given in ascending order of power. The roots are
    optionally polished against the undeflated polynomial and sorted by
    descending imaginary part.
    """
    original = [complex(c) for c in coefficients]
    if not original:
        raise ValueError("at least one coefficient is required")

    working = list(original)
    found = []
    while len(working) > 1:
        x = _laguerre(working, 0j)
        if abs(x.imag) <= 2.0 * _REAL_SNAP_EPSILON * abs(x.real):
            x = complex(x.real, 0.0)
        found.append(x)
        working = _deflate(working, x)

    # roots are found from the highest index downwards
    roots = found[::-1]

    if polish:
        roots = [_laguerre(original, root) for root in roots]

    if sort:
        roots = sort_by_imag_descending(roots)

    return roots


def evaluate(coefficients: Sequence[complex], x: complex) -> complex:
    """Evaluate the polynomial with ascending coefficients at ``x``."""
    if not coefficients:
        return 0j
    if x == 0:
        return complex(coefficients[0])
    return sum((complex(c) * x**power for power, c in enumerate(coefficients)), 0j)