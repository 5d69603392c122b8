import math

import pytest

from iirdesign.params import (
    Format,
    ParamId,
    ParamInfo,
    Scale,
    default_bandwidth_hz_param,
    default_bandwidth_param,
    default_center_frequency_param,
    default_cutoff_frequency_param,
    default_gain_param,
    default_pole_real_param,
    default_pole_rho_param,
    default_pole_theta_param,
    default_q_param,
    default_ripple_db_param,
    default_rolloff_param,
    default_sample_rate_param,
    default_slope_param,
    default_stop_db_param,
    default_zero_real_param,
    default_zero_rho_param,
    default_zero_theta_param,
)


def test_sample_rate_param_fields():
    info = default_sample_rate_param()
    assert info.id is ParamId.SAMPLE_RATE
    assert info.slug == "Fs"
    assert (info.arg1, info.arg2, info.default_value) == (11025, 192000, 44100)


def test_sample_rate_formats_as_hz():
    assert default_sample_rate_param().to_string(44100) == "44100 Hz"


def test_default_round_trips_through_control_value():
    infos = [
        default_sample_rate_param(),
        default_cutoff_frequency_param(),
        default_center_frequency_param(),
        default_q_param(),
        default_bandwidth_param(),
        default_bandwidth_hz_param(),
        default_gain_param(),
        default_slope_param(),
        default_ripple_db_param(),
        default_stop_db_param(),
        default_rolloff_param(),
        default_pole_rho_param(),
        default_pole_theta_param(),
        default_zero_rho_param(),
        default_zero_theta_param(),
        default_pole_real_param(),
        default_zero_real_param(),
    ]
    for info in infos:
        control = info.to_control_value(info.default_value)
        assert 0.0 <= control <= 1.0
        assert info.to_native_value(control) == pytest.approx(info.default_value)


def test_clamp_limits_to_range():
    infos = [
        default_sample_rate_param(),
        default_cutoff_frequency_param(),
        default_center_frequency_param(),
        default_q_param(),
        default_bandwidth_param(),
        default_bandwidth_hz_param(),
        default_gain_param(),
        default_slope_param(),
        default_ripple_db_param(),
        default_stop_db_param(),
        default_rolloff_param(),
        default_pole_rho_param(),
        default_pole_theta_param(),
        default_zero_rho_param(),
        default_zero_theta_param(),
        default_pole_real_param(),
        default_zero_real_param(),
    ]
    for info in infos:
        lowest = info.to_native_value(0)
        highest = info.to_native_value(1)
        assert info.clamp(highest * 10 + 1e6) == highest
        assert info.clamp(lowest - 1e6) == lowest
        assert info.clamp(info.default_value) == info.default_value


def test_pow2_scale_bounds():
    info = default_q_param()
    assert info.to_native_value(0) == pytest.approx(2.0**info.arg1)
    assert info.to_native_value(1) == pytest.approx(2.0**info.arg2)


def test_log_scale_bounds():
    info = default_cutoff_frequency_param()
    assert info.to_native_value(0) == pytest.approx(10)
    assert info.to_native_value(1) == pytest.approx(22040)
    assert info.to_control_value(10) == pytest.approx(0.0)


def test_log_scale_is_monotonic():
    info = default_bandwidth_hz_param()
    values = [info.to_native_value(c / 10) for c in range(11)]
    assert values == sorted(values)


def test_int_scale_rounds():
    info = ParamInfo(ParamId.ORDER, "Order", "Order", 1, 50, 2, Scale.INT, Format.INT)
    assert info.to_native_value(0.5) == 26
    assert info.to_native_value(info.to_control_value(7)) == 7


def test_int_format_truncates():
    info = ParamInfo(ParamId.ORDER, "Order", "Order", 1, 50, 2, Scale.INT, Format.INT)
    assert info.to_string(3.7) == "3"


def test_real_format_has_three_decimals():
    text = default_q_param().to_string(1.25)
    assert float(text) == pytest.approx(1.25)
    assert len(text.split(".")[1]) == 3


@pytest.mark.parametrize("value, precision", [(0.5, 3), (-0.25, 3), (5, 2), (-6, 2), (12, 1), (-24, 1)])
def test_db_format_precision(value, precision):
    text = default_gain_param().to_string(value)
    number, unit = text.split(" ")
    assert unit == "dB"
    assert float(number) == pytest.approx(value)
    assert len(number.split(".")[1]) == precision


def test_pole_theta_range_is_half_turn():
    info = default_pole_theta_param()
    assert info.to_native_value(1) == pytest.approx(math.pi)
    assert info.default_value == pytest.approx(math.pi / 2)


def test_param_info_is_immutable():
    info = default_gain_param()
    with pytest.raises(AttributeError):
        info.arg1 = 0
    assert info.arg1 == -24
    assert info.to_native_value(0) == pytest.approx(-24)