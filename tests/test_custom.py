import cmath
import math

import pytest

from iirdesign.biquad import pole_state
from iirdesign.custom import OnePole, TwoPole


def test_one_pole_places_pole_and_zero():
    f = OnePole()
    f.setup(1.0, 0.25, -0.5)
    state = pole_state(f)
    assert state.poles.first == pytest.approx(0.25)
    assert state.zeros.first == pytest.approx(-0.5)


def test_one_pole_scale_sets_gain():
    f = OnePole()
    f.setup(2.0, 0.25, -1.0)
    assert pole_state(f).gain == pytest.approx(2.0)


def test_one_pole_zero_at_nyquist_blocks_nyquist():
    f = OnePole()
    f.setup(1.0, 0.25, -1.0)
    assert abs(f.response(0.5)) == pytest.approx(0.0, abs=1e-12)


def test_two_pole_places_conjugate_pairs():
    f = TwoPole()
    f.setup(1.0, 0.5, math.pi / 2, 0.5, math.pi / 4)
    state = pole_state(f)
    poles = sorted([state.poles.first, state.poles.second], key=lambda c: c.imag)
    zeros = sorted([state.zeros.first, state.zeros.second], key=lambda c: c.imag)
    assert poles[1] == pytest.approx(cmath.rect(0.5, math.pi / 2))
    assert poles[0] == pytest.approx(cmath.rect(0.5, -math.pi / 2))
    assert zeros[1] == pytest.approx(cmath.rect(0.5, math.pi / 4))
    assert zeros[0] == pytest.approx(cmath.rect(0.5, -math.pi / 4))


def test_two_pole_with_matching_pole_and_zero_is_flat():
    f = TwoPole()
    f.setup(3.0, 0.5, 1.0, 0.5, 1.0)
    for freq in (0.0, 0.1, 0.3, 0.5):
        assert f.response(freq) == pytest.approx(3.0 + 0j)


def test_two_pole_real_axis_pole():
    f = TwoPole()
    f.setup(1.0, 0.5, 0.0, 0.5, 0.0)
    assert f.a2 == pytest.approx(0.25)
    assert f.b2 == pytest.approx(0.25)