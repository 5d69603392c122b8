import cmath
import math

import pytest

from iirdesign import chebyshev1, elliptic


def test_elliptic_k_at_zero_modulus():
    assert elliptic.elliptic_k(0.0) == pytest.approx(math.pi / 2)


def test_elliptic_k_known_value():
    assert elliptic.elliptic_k(1 / math.sqrt(2)) == pytest.approx(1.8540746773013719, rel=1e-12)


def test_elliptic_k_increases_with_modulus():
    values = [elliptic.elliptic_k(k / 10) for k in range(10)]
    assert all(b > a for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("ripple", [0.1, 1.0, 3.0])
def test_first_order_matches_chebyshev(ripple):
    proto = elliptic.AnalogLowPass()
    proto.design(1, ripple, 0.0)
    reference = chebyshev1.AnalogLowPass()
    reference.design(1, ripple)
    assert proto.num_poles == 1
    assert proto[0].poles.first.real == pytest.approx(reference[0].poles.first.real, rel=1e-9)
    assert proto.normal_gain == 1.0


@pytest.mark.parametrize("order", range(1, 9))
def test_prototype_structure(order):
    proto = elliptic.AnalogLowPass()
    proto.design(order, 1.0, 0.0)
    assert proto.num_poles == order
    assert len(proto) == (order + 1) // 2
    for pair in proto:
        assert pair.poles.first.real < 0
    for pair in list(proto)[: order // 2]:
        assert pair.zeros.first.real == 0
        assert pair.zeros.first.imag > 0


@pytest.mark.parametrize("order", [2, 4, 6])
def test_even_order_normal_gain(order):
    proto = elliptic.AnalogLowPass()
    proto.design(order, 2.0, 0.0)
    assert proto.normal_gain == pytest.approx(10 ** (-2.0 / 20))
    assert proto.normal_w == 0


def test_prototype_rejects_bad_arguments():
    with pytest.raises(ValueError):
        elliptic.AnalogLowPass().design(0, 1.0, 0.0)
    with pytest.raises(ValueError):
        elliptic.AnalogLowPass().design(3, 0.0, 0.0)


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
def test_low_pass_dc_gain_and_stability(order):
    f = elliptic.LowPass(8)
    f.setup(order, 44100, 4000, 1.0, 0.0)
    expected = 1.0 if order % 2 else 10 ** (-1.0 / 20)
    assert abs(f.response(0.0)) == pytest.approx(expected)
    for state in f.pole_zeros():
        assert abs(state.poles.first) < 1
        assert abs(state.poles.second) < 1


def test_low_pass_transmission_zeros_on_unit_circle():
    f = elliptic.LowPass(8)
    f.setup(4, 44100, 4000, 1.0, 0.0)
    for pair in f.digital_proto:
        zero = pair.zeros.first
        assert abs(zero) == pytest.approx(1.0)
        frequency = abs(cmath.phase(zero)) / (2 * math.pi)
        assert abs(f.response(frequency)) < 1e-6


def test_high_pass_normalised_at_nyquist():
    f = elliptic.HighPass(6)
    f.setup(5, 44100, 3000, 0.5, 0.0)
    assert abs(f.response(0.5)) == pytest.approx(1.0)
    assert len(f) == 3


def test_band_pass_stages_and_stability():
    f = elliptic.BandPass(4)
    f.setup(4, 44100, 5000, 2000, 1.0, 0.0)
    assert len(f) == 4
    for state in f.pole_zeros():
        assert abs(state.poles.first) < 1
        assert abs(state.poles.second) < 1


def test_band_stop_normalised_at_nyquist():
    f = elliptic.BandStop(4)
    f.setup(3, 44100, 5000, 2000, 1.0, 0.0)
    assert abs(f.response(0.5)) == pytest.approx(1.0)
    assert len(f) == 3


@pytest.mark.parametrize("order", [0, 9])
def test_setup_rejects_bad_order(order):
    f = elliptic.LowPass(8)
    with pytest.raises(ValueError):
        f.setup(order, 44100, 1000, 1.0, 0.0)