"""Chebyshev type II (inverse Chebyshev) filters: equiripple stop band."""

from __future__ import annotations

import math

from iirdesign import chebyshev1
from iirdesign.transforms import (
    INFINITY,
    Layout,
    PoleFilter,
    band_pass_transform,
    band_stop_transform,
    high_pass_transform,
    low_pass_transform,
)


class AnalogLowPass(Layout):
    """Analog inverse Chebyshev low pass prototype with stop band edge at unity."""

    def __init__(self) -> None:
        super().__init__()
        self._key = None
        self.set_normal(0, 1)

    def design(self, num_poles: int, stop_band_db: float) -> None:
        if self._key == (num_poles, stop_band_db):
            return
        if num_poles < 1:
            raise ValueError(f"num_poles must be at least 1, got {num_poles}")
        if stop_band_db <= 0:
            raise ValueError("stop band attenuation must be positive")

        eps = math.sqrt(1.0 / (math.exp(stop_band_db * 0.1 * math.log(10)) - 1))
        v0 = math.asinh(1 / eps) / num_poles
        sinh_v0 = -math.sinh(v0)
        cosh_v0 = math.cosh(v0)
        fn = math.pi / (2 * num_poles)

        self.reset()
        for k in range(1, 2 * (num_poles // 2), 2):
            a = sinh_v0 * math.cos((k - num_poles) * fn)
            b = cosh_v0 * math.sin((k - num_poles) * fn)
            d2 = a * a + b * b
            im = 1 / math.cos(k * fn)
            self.add_pole_zero_conjugate_pairs(complex(a / d2, b / d2), complex(0, im))

        if num_poles % 2:
            self.add(1 / sinh_v0, INFINITY)
        self._key = (num_poles, stop_band_db)


class AnalogLowShelf(chebyshev1.AnalogLowShelf):
    """Analog low shelf prototype with ripple bounded by ``stop_band_db``."""

    def design(self, num_poles: int, gain_db: float, stop_band_db: float) -> None:
        super().design(num_poles, gain_db, stop_band_db)


class LowPass(PoleFilter):
    analog_prototype = AnalogLowPass

    def setup(
        self, order: int, sample_rate: float, cutoff_frequency: float, stop_band_db: float
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, stop_band_db)
        low_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class HighPass(PoleFilter):
    analog_prototype = AnalogLowPass

    def setup(
        self, order: int, sample_rate: float, cutoff_frequency: float, stop_band_db: float
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, stop_band_db)
        high_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class BandPass(PoleFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(
        self,
        order: int,
        sample_rate: float,
        center_frequency: float,
        width_frequency: float,
        stop_band_db: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, stop_band_db)
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
        self,
        order: int,
        sample_rate: float,
        center_frequency: float,
        width_frequency: float,
        stop_band_db: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, stop_band_db)
        band_stop_transform(
            center_frequency / sample_rate,
            width_frequency / sample_rate,
            self.digital_proto,
            self.analog_proto,
        )
        self.set_layout(self.digital_proto)


class LowShelf(PoleFilter):
    analog_prototype = AnalogLowShelf

    def setup(
        self,
        order: int,
        sample_rate: float,
        cutoff_frequency: float,
        gain_db: float,
        stop_band_db: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, gain_db, stop_band_db)
        low_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class HighShelf(PoleFilter):
    analog_prototype = AnalogLowShelf

    def setup(
        self,
        order: int,
        sample_rate: float,
        cutoff_frequency: float,
        gain_db: float,
        stop_band_db: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, gain_db, stop_band_db)
        high_pass_transform(cutoff_frequency / sample_rate, self.digital_proto, self.analog_proto)
        self.set_layout(self.digital_proto)


class BandShelf(PoleFilter):
    analog_prototype = AnalogLowShelf
    poles_per_order = 2

    def setup(
        self,
        order: int,
        sample_rate: float,
        center_frequency: float,
        width_frequency: float,
        gain_db: float,
        stop_band_db: float,
    ) -> None:
        self._check_order(order)
        self.analog_proto.design(order, gain_db, stop_band_db)
        band_pass_transform(
            center_frequency / sample_rate,
            width_frequency / sample_rate,
            self.digital_proto,
            self.analog_proto,
        )
        self.digital_proto.set_normal(
            math.pi if center_frequency / sample_rate < 0.25 else 0.0, 1
        )
        self.set_layout(self.digital_proto)