import pytest

from iirdesign.rbj import (
    AllPass,
    BandPass1,
    BandPass2,
    BandShelf,
    BandStop,
    HighPass,
    HighShelf,
    LowPass,
    LowShelf,
)

FS = 44100
FC = 440


def _numerator(f):
    return f.b0, f.b1, f.b2


def test_low_pass_has_unit_dc_gain():
    f = LowPass()
    f.setup(FS, FC, 1)
    assert sum(_numerator(f)) == pytest.approx(1 + f.a1 + f.a2)
    assert f.b0 == pytest.approx(f.b2)
    assert f.b1 == pytest.approx(2 * f.b0)


def test_high_pass_has_unit_nyquist_gain_and_no_dc():
    f = HighPass()
    f.setup(FS, FC, 1)
    assert sum(_numerator(f)) == pytest.approx(0.0, abs=1e-12)
    assert f.b0 - f.b1 + f.b2 == pytest.approx(1 - f.a1 + f.a2)


def test_band_pass2_symmetry():
    f = BandPass2()
    f.setup(FS, 4000, 0.5)
    assert f.b1 == 0
    assert f.b0 == pytest.approx(-f.b2)
    assert sum(_numerator(f)) == pytest.approx(0.0, abs=1e-12)


def test_band_pass1_is_band_pass2_times_bandwidth():
    one = BandPass1()
    two = BandPass2()
    one.setup(FS, 4000, 2.0)
    two.setup(FS, 4000, 2.0)
    assert one.b0 == pytest.approx(2.0 * two.b0)
    assert one.b2 == pytest.approx(2.0 * two.b2)
    assert (one.a1, one.a2) == pytest.approx((two.a1, two.a2))


def test_band_stop_shares_a1():
    f = BandStop()
    f.setup(FS, 4000, 1.0)
    assert f.b1 == pytest.approx(f.a1)
    assert f.b0 == pytest.approx(f.b2)
    assert f.b0 == pytest.approx(1 / f.a0)


def test_all_pass_mirrors_denominator():
    f = AllPass()
    f.setup(FS, FC, 1)
    assert f.b0 == pytest.approx(f.a2)
    assert f.b1 == pytest.approx(f.a1)
    assert f.b2 == pytest.approx(1.0)


@pytest.mark.parametrize("cls", [LowShelf, HighShelf])
def test_shelf_with_zero_gain_is_flat(cls):
    f = cls()
    f.setup(FS, FC, 0.0, 1.0)
    assert _numerator(f) == pytest.approx((1.0, f.a1, f.a2))


def test_band_shelf_with_zero_gain_is_flat():
    f = BandShelf()
    f.setup(FS, 4000, 0.0, 1.0)
    assert _numerator(f) == pytest.approx((1.0, f.a1, f.a2))


def test_low_shelf_dc_gain_follows_gain():
    f = LowShelf()
    f.setup(FS, FC, 12.0, 1.0)
    dc = sum(_numerator(f)) / (1 + f.a1 + f.a2)
    assert dc == pytest.approx(10 ** (12.0 / 20))