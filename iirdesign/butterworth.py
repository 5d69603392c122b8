"""Butterworth filters: maximally flat pass band."""

from __future__ import annotations

import cmath
import math

from iirdesign.transforms import (
    INFINITY,
    Layout,
    PoleFilter,
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)


class _Prototype(Layout):
    """Analog prototype that is rebuilt only when its parameters change."""

    _default_normal_w = 0.0

    def __init__(self) -> None:
        super().__init__()
        self._key = None
        self.set_normal(self._default_normal_w, 1)

    def _begin(self, *key) -> bool:
        """Reset for a new design; False when ``key`` is the current design."""
        if key == self._key:
            return False
        self._key = key
        self.reset()
        return True


class AnalogLowPass(_Prototype):
    """Analog Butterworth low pass prototype with unit cutoff."""

    def design(self, num_poles: int) -> None:
        if not self._begin(num_poles):
            return
        n2 = 2 * num_poles
        for i in range(num_poles // 2):
            c = cmath.rect(1.0, math.pi / 2 + (2 * i + 1) * math.pi / n2)
            self.add_pole_zero_conjugate_pairs(c, INFINITY)
        if num_poles % 2:
            self.add(-1, INFINITY)


class AnalogLowShelf(_Prototype):
    """Analog Butterworth low shelf prototype, normalised to unit gain at infinity."""

    _default_normal_w = math.pi

    def design(self, num_poles: int, gain_db: float) -> None:
        if not self._begin(num_poles, gain_db):
            return
        n2 = num_poles * 2
        g = (10.0 ** (gain_db / 20)) ** (1.0 / n2)
        gp = -1.0 / g
        gz = -g
        for i in range(1, num_poles // 2 + 1):
            theta = math.pi * (0.5 - (2 * i - 1) / n2)
            self.add_pole_zero_conjugate_pairs(cmath.rect(gp, theta), cmath.rect(gz, theta))
        if num_poles % 2:
            self.add(gp, gz)


class _Filter(PoleFilter):
    def _realize(self, transform, order, sample_rate, frequencies, *design_args, normal_w=None):
        self._check_order(order)
        self.analog_proto.design(order, *design_args)
        transform(*(f / sample_rate for f in frequencies), self.digital_proto, self.analog_proto)
        if normal_w is not None:
            self.digital_proto.set_normal(normal_w, 1)
        self.set_layout(self.digital_proto)


class LowPass(_Filter):
    analog_prototype = AnalogLowPass

    def setup(self, order, sample_rate, cutoff_frequency):
        self._realize(low_pass_transform, order, sample_rate, (cutoff_frequency,))


class HighPass(_Filter):
    analog_prototype = AnalogLowPass

    def setup(self, order, sample_rate, cutoff_frequency):
        self._realize(high_pass_transform, order, sample_rate, (cutoff_frequency,))


class BandPass(_Filter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency):
        self._realize(
            band_pass_transform, order, sample_rate, (center_frequency, width_frequency)
        )


class BandStop(_Filter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency):
        self._realize(
            band_stop_transform, order, sample_rate, (center_frequency, width_frequency)
        )


class LowShelf(_Filter):
    analog_prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db):
        self._realize(low_pass_transform, order, sample_rate, (cutoff_frequency,), gain_db)


class HighShelf(_Filter):
    analog_prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db):
        self._realize(high_pass_transform, order, sample_rate, (cutoff_frequency,), gain_db)


class BandShelf(_Filter):
    analog_prototype = AnalogLowShelf
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency, gain_db):
        # normalise at whichever end of the spectrum is further from the band
        self._realize(
            band_pass_transform,
            order,
            sample_rate,
            (center_frequency, width_frequency),
            gain_db,
            normal_w=math.pi if center_frequency / sample_rate < 0.25 else 0.0,
        )