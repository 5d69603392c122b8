"""Chebyshev type I filters: equiripple pass band, monotonic stop band."""

from __future__ import annotations

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


def _check_num_poles(num_poles: int) -> None:
    if num_poles < 1:
        raise ValueError(f"num_poles must be at least 1, got {num_poles}")


def _design_shelf(layout: Layout, num_poles: int, gain_db: float, ripple_db: float) -> None:
    """Fill ``layout`` with a high order parametric shelf of the given gain and ripple."""
    gain_db = -gain_db
    ripple_db = min(ripple_db, abs(gain_db))
    if gain_db < 0:
        ripple_db = -ripple_db

    g = 10.0 ** (gain_db / 20.0)
    gb = 10.0 ** ((gain_db - ripple_db) / 20.0)
    g0 = 1.0
    eps = math.sqrt((g * g - gb * gb) / (gb * gb - g0 * g0)) if gb != g0 else g - 1
    if eps == 0:
        raise ValueError("a shelf needs a nonzero gain and a nonzero ripple")

    root = math.sqrt(1 + 1 / (eps * eps))
    u = math.log((g / eps + gb * root) ** (1.0 / num_poles) / g0 ** (1.0 / num_poles))
    v = math.log((1.0 / eps + root) ** (1.0 / num_poles))
    sinh_u, cosh_u = math.sinh(u), math.cosh(u)
    sinh_v, cosh_v = math.sinh(v), math.cosh(v)

    layout.reset()
    for i in range(1, num_poles // 2 + 1):
        a = math.pi * (2 * i - 1) / (2 * num_poles)
        sn, cs = math.sin(a), math.cos(a)
        layout.add_pole_zero_conjugate_pairs(
            complex(-sn * sinh_u, cs * cosh_u), complex(-sn * sinh_v, cs * cosh_v)
        )
    if num_poles % 2:
        layout.add(-sinh_u, -sinh_v)


class _Prototype(Layout):
    """Analog prototype remembering the parameters of its last successful design."""

    def __init__(self) -> None:
        super().__init__()
        self._key = None


class AnalogLowPass(_Prototype):
    """Analog Chebyshev type I low pass prototype with pass band edge at unity."""

    def design(self, num_poles: int, ripple_db: float) -> None:
        key = (num_poles, ripple_db)
        if key == self._key:
            return
        _check_num_poles(num_poles)
        if ripple_db <= 0:
            raise ValueError("pass band ripple must be positive")

        eps = math.sqrt(1.0 / math.exp(-ripple_db * 0.1 * math.log(10)) - 1)
        v0 = math.asinh(1 / eps) / num_poles
        sinh_v0 = -math.sinh(v0)
        cosh_v0 = math.cosh(v0)

        self.reset()
        for i in range(num_poles // 2):
            angle = (2 * i + 1 - num_poles) * math.pi / (2 * num_poles)
            pole = complex(sinh_v0 * math.cos(angle), cosh_v0 * math.sin(angle))
            self.add_pole_zero_conjugate_pairs(pole, INFINITY)

        if num_poles % 2:
            self.add(complex(sinh_v0, 0), INFINITY)
            self.set_normal(0, 1)
        else:
            self.set_normal(0, 10 ** (-ripple_db / 20.0))
        self._key = key


class AnalogLowShelf(_Prototype):
    """Analog Chebyshev type I low shelf prototype, unit gain at infinity."""

    def __init__(self) -> None:
        super().__init__()
        self.set_normal(math.pi, 1)

    def design(self, num_poles: int, gain_db: float, ripple_db: float) -> None:
        key = (num_poles, gain_db, ripple_db)
        if key == self._key:
            return
        _check_num_poles(num_poles)
        _design_shelf(self, num_poles, gain_db, ripple_db)
        self._key = key


class _ChebyshevFilter(PoleFilter):
    def _realize(self, transform, order, sample_rate, frequencies, *design_args, normal_w=None):
        self._check_order(order)
        self.analog_proto.design(order, *design_args)
        normalized = [f / sample_rate for f in frequencies]
        transform(*normalized, self.digital_proto, self.analog_proto)
        if normal_w is not None:
            self.digital_proto.set_normal(normal_w, 1)
        self.set_layout(self.digital_proto)


class LowPass(_ChebyshevFilter):
    analog_prototype = AnalogLowPass

    def setup(self, order, sample_rate, cutoff_frequency, ripple_db):
        self._realize(low_pass_transform, order, sample_rate, [cutoff_frequency], ripple_db)


class HighPass(_ChebyshevFilter):
    analog_prototype = AnalogLowPass

    def setup(self, order, sample_rate, cutoff_frequency, ripple_db):
        self._realize(high_pass_transform, order, sample_rate, [cutoff_frequency], ripple_db)


class BandPass(_ChebyshevFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency, ripple_db):
        band = [center_frequency, width_frequency]
        self._realize(band_pass_transform, order, sample_rate, band, ripple_db)


class BandStop(_ChebyshevFilter):
    analog_prototype = AnalogLowPass
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency, ripple_db):
        band = [center_frequency, width_frequency]
        self._realize(band_stop_transform, order, sample_rate, band, ripple_db)


class LowShelf(_ChebyshevFilter):
    analog_prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db, ripple_db):
        self._realize(
            low_pass_transform, order, sample_rate, [cutoff_frequency], gain_db, ripple_db
        )


class HighShelf(_ChebyshevFilter):
    analog_prototype = AnalogLowShelf

    def setup(self, order, sample_rate, cutoff_frequency, gain_db, ripple_db):
        self._realize(
            high_pass_transform, order, sample_rate, [cutoff_frequency], gain_db, ripple_db
        )


class BandShelf(_ChebyshevFilter):
    analog_prototype = AnalogLowShelf
    poles_per_order = 2

    def setup(self, order, sample_rate, center_frequency, width_frequency, gain_db, ripple_db):
        self._realize(
            band_pass_transform,
            order,
            sample_rate,
            [center_frequency, width_frequency],
            gain_db,
            ripple_db,
            normal_w=math.pi if center_frequency / sample_rate < 0.25 else 0.0,
        )