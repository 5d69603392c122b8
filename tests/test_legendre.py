import math

import pytest

from iirdesign import butterworth, legendre
from iirdesign.rootfinder import evaluate


@pytest.mark.parametrize(
    "n, expected",
    [(0, [1.0]), (1, [0.0, 1.0]), (2, [-0.5, 0.0, 1.5])],
)
def test_legendre_polynomial_base_cases(n, expected):
    assert legendre.legendre_polynomial(n) == expected


@pytest.mark.parametrize("n", range(11))
def test_legendre_polynomial_end_values(n):
    coefficients = legendre.legendre_polynomial(n)
    assert len(coefficients) == n + 1
    assert evaluate(coefficients, 1.0).real == pytest.approx(1.0)
    assert evaluate(coefficients, -1.0).real == pytest.approx((-1) ** n)


@pytest.mark.parametrize("n", range(11))
def test_legendre_polynomial_parity(n):
    coefficients = legendre.legendre_polynomial(n)
    assert all(c == 0 for power, c in enumerate(coefficients) if (power - n) % 2)


def test_legendre_polynomial_rejects_negative_degree():
    with pytest.raises(ValueError):
        legendre.legendre_polynomial(-1)


def test_optimum_l_low_orders():
    assert legendre.optimum_l_polynomial(1) == pytest.approx([0.0, 1.0])
    assert legendre.optimum_l_polynomial(2) == pytest.approx([0.0, 0.0, 1.0])


@pytest.mark.parametrize("n", range(1, 11))
def test_optimum_l_endpoints(n):
    w = legendre.optimum_l_polynomial(n)
    assert len(w) == n + 1
    assert w[0] == 0.0
    assert sum(w) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("n", range(1, 9))
def test_optimum_l_is_monotonic_on_unit_interval(n):
    w = legendre.optimum_l_polynomial(n)
    values = [evaluate(w, x / 100).real for x in range(101)]
    assert all(v >= -1e-12 for v in values)
    assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))


def test_optimum_l_rejects_zero_order():
    with pytest.raises(ValueError):
        legendre.optimum_l_polynomial(0)


@pytest.mark.parametrize("order", [1, 2])
def test_low_orders_match_butterworth(order):
    proto = legendre.AnalogLowPass()
    proto.design(order)
    reference = butterworth.AnalogLowPass()
    reference.design(order)
    assert proto.num_poles == reference.num_poles == order
    for mine, theirs in zip(proto, reference):
        assert mine.poles.first.real == pytest.approx(theirs.poles.first.real, abs=1e-9)
        assert mine.poles.first.imag == pytest.approx(theirs.poles.first.imag, abs=1e-9)


@pytest.mark.parametrize("order", range(1, 9))
def test_prototype_poles_in_left_half_plane(order):
    proto = legendre.AnalogLowPass()
    proto.design(order)
    assert proto.num_poles == order
    assert len(proto) == (order + 1) // 2
    assert all(pair.poles.first.real < 0 for pair in proto)


def test_prototype_rejects_zero_poles():
    with pytest.raises(ValueError):
        legendre.AnalogLowPass().design(0)


@pytest.mark.parametrize("order", [2, 3, 4, 5, 6])
def test_low_pass_half_power_at_cutoff(order):
    f = legendre.LowPass(8)
    f.setup(order, 44100, 4000)
    assert abs(f.response(0.0)) == pytest.approx(1.0)
    assert abs(f.response(4000 / 44100)) == pytest.approx(math.sqrt(0.5), abs=1e-6)


def test_low_pass_is_monotonic_and_bounded():
    f = legendre.LowPass(8)
    f.setup(5, 44100, 3000)
    magnitudes = [abs(f.response(i / 400)) for i in range(200)]
    assert all(m <= 1 + 1e-9 for m in magnitudes)
    assert all(b <= a + 1e-9 for a, b in zip(magnitudes, magnitudes[1:]))


def test_low_pass_poles_inside_unit_circle():
    f = legendre.LowPass(8)
    f.setup(6, 44100, 5000)
    assert len(f) == 3
    for state in f.pole_zeros():
        assert abs(state.poles.first) < 1
        assert abs(state.poles.second) < 1


def test_high_pass_normalised_at_nyquist():
    f = legendre.HighPass(6)
    f.setup(4, 44100, 2000)
    assert abs(f.response(0.5)) == pytest.approx(1.0)
    assert abs(f.response(2000 / 44100)) == pytest.approx(math.sqrt(0.5), abs=1e-6)
    assert abs(f.response(0.001)) < 0.01


def test_band_pass_bounded_by_unity():
    f = legendre.BandPass(4)
    f.setup(4, 44100, 4000, 1000)
    assert len(f) == 4
    magnitudes = [abs(f.response(i / 400)) for i in range(1, 200)]
    assert max(magnitudes) <= 1 + 1e-6
    assert abs(f.response(0.0)) < 1e-6


@pytest.mark.parametrize("order", [0, 5])
def test_setup_rejects_bad_order(order):
    f = legendre.LowPass(4)
    with pytest.raises(ValueError):
        f.setup(order, 44100, 1000)