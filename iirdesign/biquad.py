"""Second order IIR sections and their pole/zero representation."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass


def _is_nan(value: complex) -> bool:
    return cmath.isnan(complex(value))


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE arithmetic, yielding inf or nan on a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class ComplexPair:
    """Two complex values, typically a pole or zero and its conjugate."""

    first: complex
    second: complex = 0j

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", complex(self.first))
        object.__setattr__(self, "second", complex(self.second))

    def is_nan(self) -> bool:
        return _is_nan(self.first) or _is_nan(self.second)

    def is_real(self) -> bool:
        return self.first.imag == 0 and self.second.imag == 0


@dataclass(frozen=True)
class PoleZeroPair:
    """The poles and zeros of one second order (or first order) section."""

    poles: ComplexPair
    zeros: ComplexPair

    def is_single_pole(self) -> bool:
        return self.poles.second == 0 and self.zeros.second == 0

    def is_nan(self) -> bool:
        return self.poles.is_nan() or self.zeros.is_nan()


@dataclass(frozen=True)
class BiquadPoleState(PoleZeroPair):
    """Poles, zeros and overall gain recovered from a biquad."""

    gain: float = 1.0


def pole_state(biquad: Biquad) -> BiquadPoleState:
    """Recover the poles, zeros and gain of a biquad's coefficients."""
    a0, a1, a2 = biquad.a0, biquad.a1, biquad.a2
    b0, b1, b2 = biquad.b0, biquad.b1, biquad.b2

    if a2 == 0 and b2 == 0:
        poles = ComplexPair(-a1, 0)
        zeros = ComplexPair(_ieee_divide(-b0, b1), 0)
    else:
        c = cmath.sqrt(complex(a1 * a1 - 4 * a0 * a2, 0))
        d = 2.0 * a0
        poles = ComplexPair(-(a1 + c) / d, (c - a1) / d)

        c = cmath.sqrt(complex(b1 * b1 - 4 * b0 * b2, 0))
        d = 2.0 * b0
        zeros = ComplexPair(-(b1 + c) / d, (c - b1) / d)

    return BiquadPoleState(poles=poles, zeros=zeros, gain=b0 / a0)


class Biquad:
    """A second order IIR section.

    ``a0`` holds the value given to :meth:`set_coefficients`; the other
    coefficients are stored divided by it.
    """

    def __init__(self) -> None:
        self.a0 = 1.0
        self.a1 = 0.0
        self.a2 = 0.0
        self.b0 = 1.0
        self.b1 = 0.0
        self.b2 = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(a0={self.a0!r}, a1={self.a1!r}, a2={self.a2!r}, "
            f"b0={self.b0!r}, b1={self.b1!r}, b2={self.b2!r})"
        )

    def set_coefficients(self, a0, a1, a2, b0, b1, b2) -> None:
        values = (a0, a1, a2, b0, b1, b2)
        if any(math.isnan(float(v)) for v in values):
            raise ValueError("biquad coefficients must not be NaN")
        self.a0 = float(a0)
        self.a1 = a1 / a0
        self.a2 = a2 / a0
        self.b0 = b0 / a0
        self.b1 = b1 / a0
        self.b2 = b2 / a0

    def set_one_pole(self, pole, zero) -> None:
        pole = complex(pole)
        zero = complex(zero)
        if pole.imag != 0 or zero.imag != 0:
            raise ValueError("a single pole section needs a real pole and zero")
        self.set_coefficients(1, -pole.real, 0, -zero.real, 1, 0)

    def set_two_pole(self, pole1, zero1, pole2, zero2) -> None:
        a1, a2 = self._quadratic_terms(complex(pole1), complex(pole2), "poles")
        b1, b2 = self._quadratic_terms(complex(zero1), complex(zero2), "zeros")
        self.set_coefficients(1, a1, a2, 1, b1, b2)

    @staticmethod
    def _quadratic_terms(first: complex, second: complex, what: str):
        if first.imag != 0:
            if second != first.conjugate():
                raise ValueError(f"complex {what} must form a conjugate pair")
            return -2 * first.real, abs(first) ** 2
        if second.imag != 0:
            raise ValueError(f"{what} must both be real or a conjugate pair")
        return -(first.real + second.real), first.real * second.real

    def set_pole_zero_pair(self, pair: PoleZeroPair) -> None:
        if pair.is_single_pole():
            self.set_one_pole(pair.poles.first, pair.zeros.first)
        else:
            self.set_two_pole(
                pair.poles.first, pair.zeros.first, pair.poles.second, pair.zeros.second
            )

    def set_pole_zero_form(self, state: BiquadPoleState) -> None:
        self.set_pole_zero_pair(state)
        self.apply_scale(state.gain)

    def set_identity(self) -> None:
        self.set_coefficients(1, 0, 0, 1, 0, 0)

    def apply_scale(self, scale: float) -> None:
        self.b0 *= scale
        self.b1 *= scale
        self.b2 *= scale

    def _transfer_terms(self, normalized_frequency: float) -> tuple[complex, complex]:
        """Numerator and denominator of the transfer function at a frequency."""
        w = 2 * math.pi * normalized_frequency
        czn1 = cmath.rect(1.0, -w)
        czn2 = cmath.rect(1.0, -2 * w)
        a0 = self.a0
        numerator = self.b0 / a0 + (self.b1 / a0) * czn1 + (self.b2 / a0) * czn2
        denominator = 1 + (self.a1 / a0) * czn1 + (self.a2 / a0) * czn2
        return numerator, denominator

    def response(self, normalized_frequency: float) -> complex:
        """Complex response at a frequency given as a fraction of the sample rate."""
        numerator, denominator = self._transfer_terms(normalized_frequency)
        return numerator / denominator

    def pole_zeros(self) -> list[PoleZeroPair]:
        return [pole_state(self)]