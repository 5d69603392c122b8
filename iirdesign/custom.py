"""Filters whose poles and zeros are given directly."""

from __future__ import annotations

import cmath

from iirdesign.biquad import Biquad


class OnePole(Biquad):
    """A first order section with one real pole and one real zero."""

    def setup(self, scale: float, pole: float, zero: float) -> None:
        self.set_one_pole(pole, zero)
        self.apply_scale(scale)


class TwoPole(Biquad):
    """A second order section with a conjugate pole pair and zero pair in polar form."""

    def setup(
        self,
        scale: float,
        pole_rho: float,
        pole_theta: float,
        zero_rho: float,
        zero_theta: float,
    ) -> None:
        pole = cmath.rect(pole_rho, pole_theta)
        zero = cmath.rect(zero_rho, zero_theta)
        self.set_two_pole(pole, zero, pole.conjugate(), zero.conjugate())
        self.apply_scale(scale)