"""Legendre ("Optimum-L") filters: steepest monotonic roll-off."""

from __future__ import annotations

import math

from iirdesign.rootfinder import find_roots, sort_by_imag_descending
from iirdesign.transforms import (
    INFINITY,
    Layout,
    PoleFilter,
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)


def legendre_polynomial(n: int) -> list[float]:
    """Coefficients, in ascending powers, of the Legendre polynomial of degree ``n``."""
    if n < 0:
        raise ValueError(f"degree must not be negative, got {n}")
    if n == 0:
        return [1.0]
    if n == 1:
        return [0.0, 1.0]

    previous = [0.0, 1.0] + [0.0] * (n - 1)
    current = [-0.5, 0.0, 1.5] + [0.0] * (n - 2)
    # (i)P(i) = (2i-1)xP(i-1) - (i-1)P(i-2)
    for i in range(3, n + 1):
        older, previous = previous, current
        current = [0.0] * (n + 1)
        for j in range(i - 2, -1, -2):
            current[j] -= (i - 1) * older[j] / i
        for j in range(i - 1, -1, -2):
            current[j + 1] += (2 * i - 1) * previous[j] / i
    return current


def _weights(n: int, k: int) -> list[float]:
    """The constants ``a`` that weight the Legendre polynomials in the sum."""
    weights = [0.0] * (k + 2)
    if n % 2:
        for i in range(k + 1):
            weights[i] = (2.0 * i + 1.0) / (math.sqrt(2.0) * (k + 1.0))
    else:
        start = 1 if k % 2 else 0
        for i in range(start, k + 1, 2):
            weights[i] = (2 * i + 1) / math.sqrt(float((k + 1) * (k + 2)))
    return weights


def optimum_l_polynomial(n: int) -> list[float]:
    """Coefficients of the Optimum-L polynomial ``L_n`` in ascending powers of w**2.

    The result has ``n + 1`` entries; ``L_n(0) == 0`` and ``L_n(1) == 1``.
    """
    if n < 1:
        raise ValueError(f"order must be at least 1, got {n}")

    k = (n - 1) // 2
    a = _weights(n, k)

    # s = sum of a[i] * P[i]
    s = [0.0] * (n + 3)
    s[0] = a[0]
    s[1] = a[1]
    for i in range(2, k + 1):
        for j, coefficient in enumerate(legendre_polynomial(i)):
            s[j] += a[i] * coefficient

    # v = s squared
    v = [0.0] * (max(2 * k + 3, n + 3))
    for i in range(k + 1):
        for j in range(k + 1):
            v[i + j] += s[i] * s[j]

    # modify the integrand for even orders
    v[2 * k + 1] = 0.0
    if n % 2 == 0:
        for i in range(n, -1, -1):
            v[i + 1] += v[i]

    # indefinite integral of v
    for i in range(n + 1, -1, -1):
        v[i + 1] = v[i] / (i + 1.0)
    v[0] = 0.0

    # definite integral, expanding powers of (2x - 1)
    s = [0.0] * (n + 2)
    s[0] = -1.0
    s[1] = 2.0
    w = [0.0] * (n + 1)
    for i in range(1, n + 1):
        if i > 1:
            c0 = -s[0]
            for j in range(1, i + 1):
                c1 = -s[j] + 2.0 * s[j - 1]
                s[j - 1] = c0
                c0 = c1
            c1 = 2.0 * s[i]
            s[i] = c0
            s[i + 1] = c1
        for j in range(i, 0, -1):
            w[j] += v[i] * s[j]

    if n % 2 == 0:
        w[1] = 0.0
    return w


class AnalogLowPass(Layout):
    """Analog Optimum-L low pass prototype with its -3 dB point at unity."""

    def __init__(self) -> None:
        super().__init__()
        self._key = None
        self.set_normal(0, 1)

    def design(self, num_poles: int) -> None:
        if self._key == num_poles:
            return
        if num_poles < 1:
            raise ValueError(f"num_poles must be at least 1, got {num_poles}")

        w = optimum_l_polynomial(num_poles)
        degree = 2 * num_poles
        coefficients = [0.0] * (degree + 1)
        coefficients[0] = 1 + w[0]
        for i, value in enumerate(w[1:], start=1):
            coefficients[2 * i] = -value if i % 2 else value

        roots = find_roots(coefficients)
        left = [root for root in roots if root.real <= 0]
        compacted = left + roots[len(left):]
        poles = sort_by_imag_descending(compacted[:num_poles]) + compacted[num_poles:]

        self.reset()
        pairs = num_poles // 2
        for pole in poles[:pairs]:
            self.add_pole_zero_conjugate_pairs(pole, INFINITY)
        if num_poles % 2:
            self.add(poles[pairs].real, INFINITY)
        self._key = num_poles


class LowPass(PoleFilter):
    analog_prototype = AnalogLowPass

    def setup(self, order: int, sample_rate: float, cutoff_frequency: float) -> None:
        self._check_order(order)
        self.analog_proto.design(order)
        low_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class HighPass(PoleFilter):
    analog_prototype = AnalogLowPass

    def setup(self, order: int, sample_rate: float, cutoff_frequency: float) -> None:
        self._check_order(order)
        self.analog_proto.design(order)
        high_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class BandPass(PoleFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(
        self, order: int, sample_rate: float, center_frequency: float, width_frequency: float
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order)
        band_pass_transform(
            center_frequency / sample_rate,
            width_frequency / sample_rate,
            self.digital_proto,
            self.analog_proto,
        )
        self.set_layout(self.digital_proto)


class BandStop(PoleFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(
        self, order: int, sample_rate: float, center_frequency: float, width_frequency: float
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order)
        band_stop_transform(
            center_frequency / sample_rate,
            width_frequency / sample_rate,
            self.digital_proto,
            self.analog_proto,
        )
        self.set_layout(self.digital_proto)