"""Descriptions of filter parameters and their mapping to control values."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class ParamId(enum.IntEnum):
    """Identifies what a filter parameter means, independent of its position."""

    SAMPLE_RATE = 0
    FREQUENCY = 1
    Q = 2
    BANDWIDTH = 3
    BANDWIDTH_HZ = 4
    GAIN = 5
    SLOPE = 6
    ORDER = 7
    RIPPLE_DB = 8
    STOP_DB = 9
    ROLLOFF = 10
    POLE_RHO = 11
    POLE_THETA = 12
    ZERO_RHO = 13
    ZERO_THETA = 14
    POLE_REAL = 15
    ZERO_REAL = 16


class Scale(enum.Enum):
    """How a native value maps onto the control range 0..1."""

    INT = "int"
    REAL = "real"
    LOG = "log"
    POW2 = "pow2"


class Format(enum.Enum):
    """How a native value is shown as text."""

    INT = "int"
    HZ = "hz"
    REAL = "real"
    DB = "db"


_LOG_BASE = 1.5


@dataclass(frozen=True)
class ParamInfo:
    """A parameter's identity, range, default and presentation.

    ``arg1`` and ``arg2`` are the range bounds; for the power of two scale
    they are the exponents of the bounds.
    """

    id: ParamId
    slug: str
    label: str
    arg1: float
    arg2: float
    default_value: float
    scale: Scale
    format: Format

    def to_control_value(self, native_value: float) -> float:
        """Map a native value onto the control range 0..1."""
        lo, hi = self.arg1, self.arg2
        if self.scale in (Scale.INT, Scale.REAL):
            return (native_value - lo) / (hi - lo)
        if self.scale is Scale.LOG:
            l0 = math.log(lo) / math.log(_LOG_BASE)
            l1 = math.log(hi) / math.log(_LOG_BASE)
            return (math.log(native_value) / math.log(_LOG_BASE) - l0) / (l1 - l0)
        return (math.log(native_value) / math.log(2.0) - lo) / (hi - lo)

    def to_native_value(self, control_value: float) -> float:
        """Map a control value in 0..1 back to a native value."""
        lo, hi = self.arg1, self.arg2
        if self.scale is Scale.INT:
            return float(math.floor(lo + control_value * (hi - lo) + 0.5))
        if self.scale is Scale.REAL:
            return lo + control_value * (hi - lo)
        if self.scale is Scale.LOG:
            l0 = math.log(lo) / math.log(_LOG_BASE)
            l1 = math.log(hi) / math.log(_LOG_BASE)
            return _LOG_BASE ** (l0 + control_value * (l1 - l0))
        return 2.0 ** (control_value * (hi - lo) + lo)

    def to_string(self, native_value: float) -> str:
        """Format a native value for display."""
        if self.format is Format.INT:
            return str(int(native_value))
        if self.format is Format.HZ:
            return f"{int(native_value)} Hz"
        if self.format is Format.REAL:
            return f"{native_value:.3f}"
        magnitude = abs(native_value)
        if magnitude < 1:
            precision = 3
        elif magnitude < 10:
            precision = 2
        else:
            precision = 1
        return f"{native_value:.{precision}f} dB"

    def clamp(self, native_value: float) -> float:
        """Limit a native value to the parameter's range."""
        min_value = self.to_native_value(0)
        max_value = self.to_native_value(1)
        if native_value < min_value:
            return min_value
        if native_value > max_value:
            return max_value
        return native_value


def default_sample_rate_param() -> ParamInfo:
    return ParamInfo(ParamId.SAMPLE_RATE, "Fs", "Sample Rate",
                     11025, 192000, 44100, Scale.REAL, Format.HZ)


def default_cutoff_frequency_param() -> ParamInfo:
    return ParamInfo(ParamId.FREQUENCY, "Fc", "Cutoff Frequency",
                     10, 22040, 2000, Scale.LOG, Format.HZ)


def default_center_frequency_param() -> ParamInfo:
    return ParamInfo(ParamId.FREQUENCY, "Fc", "Center Frequency",
                     10, 22040, 2000, Scale.LOG, Format.HZ)


def default_q_param() -> ParamInfo:
    return ParamInfo(ParamId.Q, "Q", "Resonance",
                     -4, 4, 1, Scale.POW2, Format.REAL)


def default_bandwidth_param() -> ParamInfo:
    return ParamInfo(ParamId.BANDWIDTH, "BW", "Bandwidth (Octaves)",
                     -4, 4, 1, Scale.POW2, Format.REAL)


def default_bandwidth_hz_param() -> ParamInfo:
    return ParamInfo(ParamId.BANDWIDTH_HZ, "BW", "Bandwidth (Hz)",
                     10, 22040, 1720, Scale.LOG, Format.HZ)


def default_gain_param() -> ParamInfo:
    return ParamInfo(ParamId.GAIN, "Gain", "Gain",
                     -24, 24, -6, Scale.REAL, Format.DB)


def default_slope_param() -> ParamInfo:
    return ParamInfo(ParamId.SLOPE, "Slope", "Slope",
                     -2, 2, 1, Scale.POW2, Format.REAL)


def default_ripple_db_param() -> ParamInfo:
    return ParamInfo(ParamId.RIPPLE_DB, "Ripple", "Ripple dB",
                     0.001, 12, 0.01, Scale.REAL, Format.DB)


def default_stop_db_param() -> ParamInfo:
    return ParamInfo(ParamId.STOP_DB, "Stop", "Stopband dB",
                     3, 60, 48, Scale.REAL, Format.DB)


def default_rolloff_param() -> ParamInfo:
    return ParamInfo(ParamId.ROLLOFF, "W", "Transition Width",
                     -16, 4, 0, Scale.REAL, Format.REAL)


def default_pole_rho_param() -> ParamInfo:
    return ParamInfo(ParamId.POLE_RHO, "Pd", "Pole Distance",
                     0, 1, 0.5, Scale.REAL, Format.REAL)


def default_pole_theta_param() -> ParamInfo:
    return ParamInfo(ParamId.POLE_THETA, "Pa", "Pole Angle",
                     0, math.pi, math.pi / 2, Scale.REAL, Format.REAL)


def default_zero_rho_param() -> ParamInfo:
    return ParamInfo(ParamId.ZERO_RHO, "Pd", "Zero Distance",
                     0, 1, 0.5, Scale.REAL, Format.REAL)


def default_zero_theta_param() -> ParamInfo:
    return ParamInfo(ParamId.ZERO_THETA, "Pa", "Zero Angle",
                     0, math.pi, math.pi / 2, Scale.REAL, Format.REAL)


def default_pole_real_param() -> ParamInfo:
    return ParamInfo(ParamId.POLE_REAL, "A1", "Pole Real",
                     -1, 1, 0.25, Scale.REAL, Format.REAL)


def default_zero_real_param() -> ParamInfo:
    return ParamInfo(ParamId.ZERO_REAL, "B1", "Zero Real",
                     -1, 1, -0.25, Scale.REAL, Format.REAL)