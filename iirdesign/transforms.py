"""Pole/zero layouts and the analog to digital frequency transformations."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterator

from iirdesign.biquad import ComplexPair, PoleZeroPair
from iirdesign.cascade import Cascade

INFINITY = complex(math.inf, 0.0)


class Layout:
    """The poles and zeros of a filter, grouped into second order pairs.

    At most one single (first order) pole may be added, and it must come last.
    ``normal_w`` and ``normal_gain`` give the angular frequency and the gain
    at which the realised filter is normalised.
    """

    def __init__(self) -> None:
        self._pairs: list[PoleZeroPair] = []
        self._num_poles = 0
        self.normal_w = 0.0
        self.normal_gain = 1.0

    @property
    def num_poles(self) -> int:
        return self._num_poles

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, index: int) -> PoleZeroPair:
        return self._pairs[index]

    def __iter__(self) -> Iterator[PoleZeroPair]:
        return iter(self._pairs)

    def reset(self) -> None:
        """Remove all poles and zeros; the normalisation is kept."""
        self._pairs.clear()
        self._num_poles = 0

    def _require_even(self) -> None:
        if self._num_poles % 2:
            raise ValueError("no poles may be added after a single pole")

    def add(self, pole, zero) -> None:
        """Add a single real pole and zero, or a pair given as two ComplexPairs."""
        self._require_even()
        if isinstance(pole, ComplexPair) or isinstance(zero, ComplexPair):
            if not (isinstance(pole, ComplexPair) and isinstance(zero, ComplexPair)):
                raise TypeError("poles and zeros must both be ComplexPair values")
            self._pairs.append(PoleZeroPair(pole, zero))
            self._num_poles += 2
        else:
            self._pairs.append(PoleZeroPair(ComplexPair(pole, 0), ComplexPair(zero, 0)))
            self._num_poles += 1

    def add_pole_zero_conjugate_pairs(self, pole, zero) -> None:
        """Add a pole and a zero together with their complex conjugates."""
        self._require_even()
        pole = complex(pole)
        zero = complex(zero)
        self._pairs.append(
            PoleZeroPair(
                ComplexPair(pole, pole.conjugate()),
                ComplexPair(zero, zero.conjugate()),
            )
        )
        self._num_poles += 2

    def set_normal(self, w: float, gain: float) -> None:
        self.normal_w = w
        self.normal_gain = gain


class PoleFilter(Cascade):
    """A cascade designed from an analog prototype of up to ``max_order`` poles.

    Subclasses name the prototype class in ``analog_prototype``; band filters
    set ``poles_per_order`` to 2 since their digital order is doubled.
    """

    analog_prototype: type = Layout
    poles_per_order = 1

    def __init__(self, max_order: int) -> None:
        if max_order < 1:
            raise ValueError("max_order must be at least 1")
        super().__init__((max_order * self.poles_per_order + 1) // 2)
        self.max_order = max_order
        self.analog_proto = self.analog_prototype()
        self.digital_proto = Layout()

    def _check_order(self, order: int) -> None:
        if not 1 <= order <= self.max_order:
            raise ValueError(f"order must be between 1 and {self.max_order}, got {order}")


def _bilinear(c: complex) -> complex:
    return (1.0 + c) / (1.0 - c)


def low_pass_transform(fc: float, digital: Layout, analog: Layout) -> None:
    """Map an analog low pass prototype to a digital low pass at cutoff ``fc``."""
    digital.reset()
    f = math.tan(math.pi * fc)

    def transform(c: complex) -> complex:
        if c == INFINITY:
            return complex(-1, 0)
        return _bilinear(f * c)

    _map_pairs(analog, digital, transform)
    digital.set_normal(analog.normal_w, analog.normal_gain)


def high_pass_transform(fc: float, digital: Layout, analog: Layout) -> None:
    """Map an analog low pass prototype to a digital high pass at cutoff ``fc``."""
    digital.reset()
    f = 1.0 / math.tan(math.pi * fc)

    def transform(c: complex) -> complex:
        if c.real == math.inf or c.imag == math.inf:
            return complex(1, 0)
        return -_bilinear(f * c)

    _map_pairs(analog, digital, transform)
    digital.set_normal(math.pi - analog.normal_w, analog.normal_gain)


def _map_pairs(analog: Layout, digital: Layout, transform) -> None:
    pairs = analog.num_poles // 2
    for pair in analog[:pairs] if isinstance(analog, list) else list(analog)[:pairs]:
        digital.add_pole_zero_conjugate_pairs(
            transform(pair.poles.first), transform(pair.zeros.first)
        )
    if analog.num_poles % 2:
        pair = analog[pairs]
        digital.add(transform(pair.poles.first), transform(pair.zeros.first))


def _band_edges(fc: float, fw: float) -> tuple[float, float]:
    ww = 2 * math.pi * fw
    wc2 = 2 * math.pi * fc - ww / 2
    wc = wc2 + ww
    wc2 = max(wc2, 1e-8)
    wc = min(wc, math.pi - 1e-8)
    return wc, wc2


def _sqrt_or_nan(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _map_band_pairs(analog: Layout, digital: Layout, transform) -> list:
    pairs = analog.num_poles // 2
    mapped = []
    for pair in list(analog)[:pairs]:
        mapped.append((transform(pair.poles.first), transform(pair.zeros.first)))
    return mapped


def band_pass_transform(fc: float, fw: float, digital: Layout, analog: Layout) -> None:
    """Map an analog low pass prototype to a digital band pass.

    ``fc`` is the centre and ``fw`` the width, both as fractions of the
    sample rate.
    """
    digital.reset()
    wc, wc2 = _band_edges(fc, fw)

    a = math.cos((wc + wc2) * 0.5) / math.cos((wc - wc2) * 0.5)
    b = 1 / math.tan((wc - wc2) * 0.5)
    a2 = a * a
    b2 = b * b
    ab_2 = 2 * a * b
    k = b2 * (a2 - 1)

    def transform(c: complex) -> ComplexPair:
        if c == INFINITY:
            return ComplexPair(-1, 1)
        c = _bilinear(c)
        v = (4 * (k + 1) * c + 8 * (k - 1)) * c + 4 * (k + 1)
        v = cmath.sqrt(v)
        u = -v + ab_2 * c + ab_2
        v = v + ab_2 * c + ab_2
        d = 2 * (b - 1) * c + 2 * (1 + b)
        return ComplexPair(u / d, v / d)

    for poles, zeros in _map_band_pairs(analog, digital, transform):
        digital.add_pole_zero_conjugate_pairs(poles.first, zeros.first)
        digital.add_pole_zero_conjugate_pairs(poles.second, zeros.second)

    if analog.num_poles % 2:
        pair = analog[analog.num_poles // 2]
        digital.add(transform(pair.poles.first), transform(pair.zeros.first))

    wn = analog.normal_w
    digital.set_normal(
        2 * math.atan(_sqrt_or_nan(math.tan((wc + wn) * 0.5) * math.tan((wc2 + wn) * 0.5))),
        analog.normal_gain,
    )


def band_stop_transform(fc: float, fw: float, digital: Layout, analog: Layout) -> None:
    """Map an analog low pass prototype to a digital band stop.

    ``fc`` is the centre and ``fw`` the width, both as fractions of the
    sample rate.
    """
    digital.reset()
    wc, wc2 = _band_edges(fc, fw)

    a = math.cos((wc + wc2) * 0.5) / math.cos((wc - wc2) * 0.5)
    b = math.tan((wc - wc2) * 0.5)
    a2 = a * a
    b2 = b * b

    def transform(c: complex) -> ComplexPair:
        c = complex(-1, 0) if c == INFINITY else _bilinear(c)
        u = (4 * (b2 + a2 - 1) * c + 8 * (b2 - a2 + 1)) * c + 4 * (a2 + b2 - 1)
        u = cmath.sqrt(u)
        v = u * -0.5 + a - a * c
        u = u * 0.5 + a - a * c
        d = (b + 1) + (b - 1) * c
        return ComplexPair(u / d, v / d)

    for poles, zeros in _map_band_pairs(analog, digital, transform):
        if zeros.second == zeros.first:
            zeros = ComplexPair(zeros.first, zeros.first.conjugate())
        digital.add_pole_zero_conjugate_pairs(poles.first, zeros.first)
        digital.add_pole_zero_conjugate_pairs(poles.second, zeros.second)

    if analog.num_poles % 2:
        pair = analog[analog.num_poles // 2]
        digital.add(transform(pair.poles.first), transform(pair.zeros.first))

    digital.set_normal(math.pi if fc < 0.25 else 0.0, analog.normal_gain)