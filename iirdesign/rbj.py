"""Biquad filters from the well known audio EQ cookbook formulas."""

from __future__ import annotations

import math

from iirdesign.biquad import Biquad


def _angular(sample_rate: float, frequency: float) -> tuple[float, float, float]:
    w0 = 2 * math.pi * frequency / sample_rate
    return w0, math.cos(w0), math.sin(w0)


class LowPass(Biquad):
    def setup(self, sample_rate: float, cutoff_frequency: float, q: float) -> None:
        _, cs, sn = _angular(sample_rate, cutoff_frequency)
        al = sn / (2 * q)
        self.set_coefficients(
            1 + al, -2 * cs, 1 - al, (1 - cs) / 2, 1 - cs, (1 - cs) / 2
        )


class HighPass(Biquad):
    def setup(self, sample_rate: float, cutoff_frequency: float, q: float) -> None:
        _, cs, sn = _angular(sample_rate, cutoff_frequency)
        al = sn / (2 * q)
        self.set_coefficients(
            1 + al, -2 * cs, 1 - al, (1 + cs) / 2, -(1 + cs), (1 + cs) / 2
        )


class BandPass1(Biquad):
    """Band pass with constant skirt gain; peak gain equals ``band_width``."""

    def setup(self, sample_rate: float, center_frequency: float, band_width: float) -> None:
        _, cs, sn = _angular(sample_rate, center_frequency)
        al = sn / (2 * band_width)
        self.set_coefficients(
            1 + al, -2 * cs, 1 - al, band_width * al, 0, -band_width * al
        )


class BandPass2(Biquad):
    """Band pass with constant 0 dB peak gain."""

    def setup(self, sample_rate: float, center_frequency: float, band_width: float) -> None:
        _, cs, sn = _angular(sample_rate, center_frequency)
        al = sn / (2 * band_width)
        self.set_coefficients(1 + al, -2 * cs, 1 - al, al, 0, -al)


class BandStop(Biquad):
    def setup(self, sample_rate: float, center_frequency: float, band_width: float) -> None:
        _, cs, sn = _angular(sample_rate, center_frequency)
        al = sn / (2 * band_width)
        self.set_coefficients(1 + al, -2 * cs, 1 - al, 1, -2 * cs, 1)


def _shelf_terms(sample_rate, frequency, gain_db, shelf_slope):
    a = 10 ** (gain_db / 40)
    _, cs, sn = _angular(sample_rate, frequency)
    al = sn / 2 * math.sqrt((a + 1 / a) * (1 / shelf_slope - 1) + 2)
    sq = 2 * math.sqrt(a) * al
    return a, cs, sq


class LowShelf(Biquad):
    def setup(
        self, sample_rate: float, cutoff_frequency: float, gain_db: float, shelf_slope: float
    ) -> None:
        a, cs, sq = _shelf_terms(sample_rate, cutoff_frequency, gain_db, shelf_slope)
        b0 = a * ((a + 1) - (a - 1) * cs + sq)
        b1 = 2 * a * ((a - 1) - (a + 1) * cs)
        b2 = a * ((a + 1) - (a - 1) * cs - sq)
        a0 = (a + 1) + (a - 1) * cs + sq
        a1 = -2 * ((a - 1) + (a + 1) * cs)
        a2 = (a + 1) + (a - 1) * cs - sq
        self.set_coefficients(a0, a1, a2, b0, b1, b2)


class HighShelf(Biquad):
    def setup(
        self, sample_rate: float, cutoff_frequency: float, gain_db: float, shelf_slope: float
    ) -> None:
        a, cs, sq = _shelf_terms(sample_rate, cutoff_frequency, gain_db, shelf_slope)
        b0 = a * ((a + 1) + (a - 1) * cs + sq)
        b1 = -2 * a * ((a - 1) + (a + 1) * cs)
        b2 = a * ((a + 1) + (a - 1) * cs - sq)
        a0 = (a + 1) - (a - 1) * cs + sq
        a1 = 2 * ((a - 1) - (a + 1) * cs)
        a2 = (a + 1) - (a - 1) * cs - sq
        self.set_coefficients(a0, a1, a2, b0, b1, b2)


class BandShelf(Biquad):
    def setup(
        self, sample_rate: float, center_frequency: float, gain_db: float, band_width: float
    ) -> None:
        a = 10 ** (gain_db / 40)
        w0, cs, sn = _angular(sample_rate, center_frequency)
        al = sn * math.sinh(math.log(2) / 2 * band_width * w0 / sn)
        if math.isnan(al):
            raise ValueError("band shelf parameters give an undefined bandwidth")
        self.set_coefficients(1 + al / a, -2 * cs, 1 - al / a, 1 + al * a, -2 * cs, 1 - al * a)


class AllPass(Biquad):
    def setup(self, sample_rate: float, phase_frequency: float, q: float) -> None:
        _, cs, sn = _angular(sample_rate, phase_frequency)
        al = sn / (2 * q)
        self.set_coefficients(1 + al, -2 * cs, 1 - al, 1 - al, -2 * cs, 1 + al)