"""IIR digital filter design: biquads, cascades, analog prototypes and parameter descriptions."""

__version__ = "0.1.0"

__all__ = [
    "rootfinder",
    "biquad",
    "cascade",
    "custom",
    "rbj",
    "transforms",
    "butterworth",
    "bessel",
    "chebyshev1",
    "chebyshev2",
    "legendre",
    "elliptic",
    "params",
    "filter",
]