"""Bessel filters: maximally flat group delay."""

from __future__ import annotations

import math

from iirdesign.rootfinder import find_roots
from iirdesign.transforms import (
    INFINITY,
    Layout,
    PoleFilter,
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)


def reverse_bessel(k: int, n: int) -> float:
    """The coefficient of ``s**k`` in the reverse Bessel polynomial of degree ``n``."""
    return math.factorial(2 * n - k) / (
        math.factorial(n - k) * math.factorial(k) * 2 ** (n - k)
    )


def _reverse_bessel_coefficients(n: int) -> list[float]:
    return [reverse_bessel(i, n) for i in range(n + 1)]


class _BesselPrototype(Layout):
    """Analog prototype whose poles are the roots of a reverse Bessel polynomial."""

    _default_normal_w = 0.0

    def __init__(self) -> None:
        super().__init__()
        self._key = None
        self.set_normal(self._default_normal_w, 1)

    def _place(self, num_poles: int, poles: list[complex], zeros: list) -> None:
        self.reset()
        pairs = num_poles // 2
        for pole, zero in zip(poles[:pairs], zeros[:pairs]):
            self.add_pole_zero_conjugate_pairs(pole, zero)
        if num_poles % 2:
            zero = zeros[pairs]
            self.add(poles[pairs].real, zero if zero == INFINITY else zero.real)


class AnalogLowPass(_BesselPrototype):
    """Analog Bessel low pass prototype."""

    def design(self, num_poles: int) -> None:
        if self._key == num_poles:
            return
        self._key = num_poles
        poles = find_roots(_reverse_bessel_coefficients(num_poles))
        self._place(num_poles, poles, [INFINITY] * len(poles))


class AnalogLowShelf(_BesselPrototype):
    """Analog Bessel low shelf prototype, normalised to unit gain at infinity."""

    _default_normal_w = math.pi

    def design(self, num_poles: int, gain_db: float) -> None:
        if self._key == (num_poles, gain_db):
            return
        self._key = (num_poles, gain_db)
        g = 10.0 ** (gain_db / 20) - 1
        coefficients = _reverse_bessel_coefficients(num_poles)
        shifted = [coefficients[0] * (1 + g), *coefficients[1:]]
        self._place(num_poles, find_roots(coefficients), find_roots(shifted))


class _BesselFilter(PoleFilter):
    def _realize(self, transform, order, sample_rate, frequencies, *design_args):
        self._check_order(order)
        self.analog_proto.design(order, *design_args)
        normalized = [f / sample_rate for f in frequencies]
        transform(*normalized, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class LowPass(_BesselFilter):
    analog_prototype = AnalogLowPass

    def setup(self, order, sample_rate, cutoff_frequency):
        self._realize(low_pass_transform, order, sample_rate, [cutoff_frequency])


class HighPass(_BesselFilter):
    analog_prototype = AnalogLowPass

    def setup(self, order, sample_rate, cutoff_frequency):
        self._realize(high_pass_transform, order, sample_rate, [cutoff_frequency])


class BandPass(_BesselFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency):
        band = [center_frequency, width_frequency]
        self._realize(band_pass_transform, order, sample_rate, band)


class BandStop(_BesselFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency):
        band = [center_frequency, width_frequency]
        self._realize(band_stop_transform, order, sample_rate, band)


class LowShelf(_BesselFilter):
    analog_prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db):
        self._realize(low_pass_transform, order, sample_rate, [cutoff_frequency], gain_db)