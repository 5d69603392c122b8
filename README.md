# iirdesign

Design infinite impulse response (IIR) digital filters in pure Python.
The package computes second-order sections (biquads) and cascades of them.
It reports their coefficients, their complex frequency response, and their
poles and zeros. It uses only the standard library.

## Filter families

- `iirdesign.rbj`: single biquads from the RBJ audio EQ cookbook formulas.
  These are `LowPass`, `HighPass`, `BandPass1`, `BandPass2`, `BandStop`,
  `LowShelf`, `HighShelf`, `BandShelf` and `AllPass`.
- `iirdesign.butterworth`: maximally flat responses. Offers `LowPass`,
  `HighPass`, `BandPass`, `BandStop`, `LowShelf`, `HighShelf` and `BandShelf`.
- `iirdesign.chebyshev1`: ripple in the pass band. Offers the same seven
  classes as Butterworth.
- `iirdesign.chebyshev2`: ripple in the stop band ("inverse Chebyshev").
  Offers the same seven classes.
- `iirdesign.elliptic`: ripple in both bands. Offers `LowPass`, `HighPass`,
  `BandPass` and `BandStop`.
- `iirdesign.bessel`: nearly linear phase. Offers `LowPass`, `HighPass`,
  `BandPass`, `BandStop` and `LowShelf`.
- `iirdesign.legendre`: "Optimum-L" filters, which have a monotonic pass band.
  Offers `LowPass`, `HighPass`, `BandPass` and `BandStop`.
- `iirdesign.custom`: `OnePole` and `TwoPole`, which place poles and zeros
  directly.

The cascade filters take their maximum order when they are built. Their
`setup()` takes the order first. Frequencies are given in Hz together with
the sample rate. Each family also exposes its analog prototypes, for example
`AnalogLowPass`.

## Installation

```
pip install .
```

## Usage

A single RBJ low pass at 440 Hz:

```python
from iirdesign import rbj

f = rbj.LowPass()
f.setup(44100, 440, 1.0)       # sample rate, cutoff, Q
h = f.response(440 / 44100)    # complex response at a normalized frequency
print(abs(h))
```

A third-order Butterworth high pass, realized as a cascade of biquads:

```python
from iirdesign import butterworth

f = butterworth.HighPass(3)    # maximum order
f.setup(3, 44100, 2000)        # order, sample rate, cutoff
print(len(f))                  # number of second-order stages (2)
for stage in f:
    print(stage.a0, stage.a1, stage.a2, stage.b0, stage.b1, stage.b2)
print(f.pole_zeros())
```

A Chebyshev type I band stop with 1 dB ripple:

```python
from iirdesign import chebyshev1

f = chebyshev1.BandStop(3)
f.setup(3, 44100, 4000, 880, 1.0)   # order, rate, center, width, ripple dB
print(abs(f.response(4000 / 44100)))
```

The setup methods raise `ValueError` when the order is outside
`1..max_order` or when a design parameter is out of range. One example is a
ripple that is not positive.

## Building blocks

- `iirdesign.biquad`: `Biquad`, with `set_coefficients()`, `set_one_pole()`,
  `set_two_pole()`, `set_pole_zero_pair()`, `set_identity()`,
  `apply_scale()`, `response()` and `pole_zeros()`. Also `ComplexPair`,
  `PoleZeroPair`, `BiquadPoleState` and `pole_state()`.
- `iirdesign.cascade`: `Cascade`, a fixed-capacity chain of biquads that is
  laid out from a pole/zero layout and normalised to the layout's gain.
- `iirdesign.transforms`: `Layout`, `PoleFilter` and the analog-to-digital
  transforms. These are `low_pass_transform()`, `high_pass_transform()`,
  `band_pass_transform()` and `band_stop_transform()`.
- `iirdesign.rootfinder`: `find_roots()` (Laguerre's method, with ascending
  coefficients), `evaluate()` and `sort_by_imag_descending()`. Raises
  `RootFindingError` when the iteration does not converge.

## Parameters and introspection

`iirdesign.params` describes filter parameters. A `ParamInfo` holds the
following:

- a `ParamId`;
- a range and a default;
- a `Scale` (int, real, log or power of two), which maps values onto a 0..1
  control value;
- a `Format` for display.

Factory functions such as `default_cutoff_frequency_param()` and
`default_q_param()` return ready-made descriptions.

```python
from iirdesign.params import default_q_param

q = default_q_param()
print(q.to_native_value(0.5))   # 1.0
print(q.to_string(1.0))         # "1.000"
```

`iirdesign.filter.Filter` holds a list of `ParamInfo` descriptions together
with their current values. Its methods are:

- `default_params()`, `param()` and `set_param()`;
- `find_param_id()`, which returns `None` when no parameter has the id;
- `set_param_by_id()`, which raises `KeyError` when no parameter has the id;
- `set_params()`, which checks the count;
- `copy_params_from()`, which takes matching parameters from another filter
  and clamps them.

An optional `on_change` callback receives the new values each time they
change.

## What the package does not do

The package designs filters and analyses them. It does not run samples
through them: it has no per-channel processing state, no Direct Form
realisations and no smoothing of parameter changes. `Filter` stores
parameters, but it does not link them to a particular design by itself. The
owner redesigns in the `on_change` callback. There is no command-line
program or graphical interface.

## Running the tests

```
pip install .[test]
pytest
```